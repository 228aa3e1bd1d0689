"""
Verification Resolver
Looks up an id and pairs the record with a link to the original content.
The stored hash is shown as recorded at intake; content is not re-hashed here.
"""

from dataclasses import dataclass
from realsnap.models.record import Record


@dataclass(frozen=True)
class VerificationView:
    record: Record
    content_url: str

    @property
    def integrity_hash(self):
        return self.record.integrity_hash


@dataclass(frozen=True)
class NotFound:
    record_id: str


class VerificationResolver:
    def __init__(self, record_store, content_url_prefix="/uploads"):
        self.record_store = record_store
        self.content_url_prefix = content_url_prefix.rstrip("/")

    def resolve(self, record_id):
        record = self.record_store.get(record_id)
        if record is None:
            return NotFound(record_id)
        return VerificationView(
            record=record,
            content_url=f"{self.content_url_prefix}/{record.content_ref}",
        )
