"""
Record Store
Maps record id -> Record. Two backends share one contract:
    - get(record_id) returns the Record or None, never raises for a missing id
    - put(record_id, record) inserts, raising DuplicateIdError if the id exists

JsonRecordStore keeps the whole table in one JSON document and rewrites it on
every put. Writes within a process are serialized by the store's lock; several
processes sharing one file are not coordinated (last writer wins).
"""

import json
import logging
import os
import tempfile
import threading
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from realsnap.errors import DuplicateIdError
from realsnap.extensions import db
from realsnap.models.record import Record, RecordRow

logger = logging.getLogger(__name__)


class JsonRecordStore:
    def __init__(self, path):
        self.path = os.path.abspath(path)
        self._lock = threading.Lock()
        self._table = self._load()

    def get(self, record_id):
        return self._table.get(record_id)

    def put(self, record_id, record):
        if record_id != record.record_id:
            raise ValueError(f"Key {record_id} does not match record id {record.record_id}")

        with self._lock:
            if record_id in self._table:
                raise DuplicateIdError(record_id)
            table = dict(self._table)
            table[record_id] = record
            self._write(table)
            # Only publish the new table once it is on disk
            self._table = table

    def check(self):
        directory = os.path.dirname(self.path)
        os.makedirs(directory, exist_ok=True)
        if not os.access(directory, os.W_OK):
            raise OSError(f"Records directory {directory} is not writable")

    def __len__(self):
        return len(self._table)

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, encoding="utf-8") as f:
            raw = json.load(f)
        logger.info("Loaded %d records from %s", len(raw), self.path)
        return {record_id: Record.from_dict(data) for record_id, data in raw.items()}

    def _write(self, table):
        directory = os.path.dirname(self.path)
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".records-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(
                    {record_id: record.to_dict() for record_id, record in table.items()},
                    f,
                    indent=2,
                    ensure_ascii=False,
                )
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class SqlRecordStore:
    """Records in a SQL table via Flask-SQLAlchemy. Needs an app context."""

    def get(self, record_id):
        row = db.session.get(RecordRow, record_id)
        if not row:
            return None
        return row.to_record()

    def put(self, record_id, record):
        if record_id != record.record_id:
            raise ValueError(f"Key {record_id} does not match record id {record.record_id}")

        if self._exists(record_id):
            raise DuplicateIdError(record_id)

        db.session.add(RecordRow.from_record(record))
        try:
            db.session.commit()
        except IntegrityError as e:
            # Another writer inserted the same id between the check and the commit
            db.session.rollback()
            raise DuplicateIdError(record_id) from e
        except Exception:
            db.session.rollback()
            raise

    def _exists(self, record_id):
        return db.session.get(RecordRow, record_id) is not None

    def check(self):
        db.session.execute(text("SELECT 1"))


def build_record_store(app):
    backend = app.config["RECORD_STORE"]
    if backend == "json":
        return JsonRecordStore(app.config["RECORDS_FILE"])
    if backend == "sql":
        db.init_app(app)
        with app.app_context():
            db.create_all()
        return SqlRecordStore()
    raise ValueError(f"Unknown RECORD_STORE backend: {backend!r} (expected 'json' or 'sql')")
