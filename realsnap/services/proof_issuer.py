"""
Proof Issuer
Intake: store content -> mint id -> hash -> persist record.
Either a complete record exists afterwards or nothing does.
"""

import logging
import uuid
from datetime import datetime, timezone
from realsnap.errors import IntakeError, NoContentProvided, StorageError
from realsnap.models.record import Record
from realsnap.services.hasher import hash_content

logger = logging.getLogger(__name__)


def new_record_id():
    return str(uuid.uuid4())


def verify_ref_for(base_url, record_id):
    return f"{base_url.rstrip('/')}/v/{record_id}"


class ProofIssuer:
    def __init__(self, content_store, record_store, hasher=hash_content):
        self.content_store = content_store
        self.record_store = record_store
        self.hasher = hasher

    def issue(self, content, base_url, filename=None):
        if not content:
            raise NoContentProvided("No file received")

        try:
            content_ref = self.content_store.store(content, filename)
        except StorageError as e:
            raise IntakeError("Could not store uploaded content", cause=e) from e

        try:
            record_id = new_record_id()
            record = Record(
                record_id=record_id,
                content_ref=content_ref,
                verify_ref=verify_ref_for(base_url, record_id),
                integrity_hash=self.hasher(content),
                created_at=datetime.now(timezone.utc).isoformat(),
            )
            self.record_store.put(record_id, record)
        except Exception as e:
            # No record points at these bytes, so they must not stay behind
            self.content_store.discard(content_ref)
            raise IntakeError("Could not record proof for uploaded content", cause=e) from e

        logger.info("Issued record %s (sha256 %s)", record.record_id, record.integrity_hash)
        return record
