from realsnap.models.record import Record, RecordRow

__all__ = ["Record", "RecordRow"]
