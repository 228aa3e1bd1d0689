"""
Error taxonomy for the intake and verification flows.
A missing record is not an error: the resolver returns NotFound for it.
"""


class RealSnapError(Exception):
    """Base class for errors raised by RealSnap services."""


class NoContentProvided(RealSnapError):
    """Intake was called without any bytes to record."""


class StorageError(RealSnapError):
    """The content medium could not be written or read."""


class DuplicateIdError(RealSnapError):
    """A record with this id already exists. Records are never overwritten."""

    def __init__(self, record_id):
        super().__init__(f"Record {record_id} already exists")
        self.record_id = record_id


class IntakeError(RealSnapError):
    """Intake failed part way; nothing retrievable was left behind."""

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause
