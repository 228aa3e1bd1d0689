"""
Record Model
One verified upload: id, content reference, verification link, SHA-256, intake time.
Records are created once at intake and never updated.
"""

from dataclasses import dataclass
from realsnap.extensions import db


@dataclass(frozen=True)
class Record:
    record_id: str
    content_ref: str
    verify_ref: str
    integrity_hash: str
    created_at: str

    def to_dict(self):
        return {
            "id":             self.record_id,
            "content_ref":    self.content_ref,
            "verify_ref":     self.verify_ref,
            "integrity_hash": self.integrity_hash,
            "created_at":     self.created_at,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            record_id=data["id"],
            content_ref=data["content_ref"],
            verify_ref=data["verify_ref"],
            integrity_hash=data["integrity_hash"],
            created_at=data["created_at"],
        )


class RecordRow(db.Model):
    """Table backing the SQL record store."""

    __tablename__ = "records"

    record_id = db.Column(db.String(36), primary_key=True)
    content_ref = db.Column(db.String(255), nullable=False)
    verify_ref = db.Column(db.Text, nullable=False)
    integrity_hash = db.Column(db.String(64), nullable=False)
    # ISO-8601 text so the value reads back exactly as it was issued
    created_at = db.Column(db.String(40), nullable=False)

    @classmethod
    def from_record(cls, record):
        return cls(
            record_id=record.record_id,
            content_ref=record.content_ref,
            verify_ref=record.verify_ref,
            integrity_hash=record.integrity_hash,
            created_at=record.created_at,
        )

    def to_record(self):
        return Record(
            record_id=self.record_id,
            content_ref=self.content_ref,
            verify_ref=self.verify_ref,
            integrity_hash=self.integrity_hash,
            created_at=self.created_at,
        )
