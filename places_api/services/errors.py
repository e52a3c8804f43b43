from __future__ import annotations


class DuplicateRecordError(ValueError):
    """A record with the same id is already stored."""


class RecordNotFoundError(LookupError):
    """No record with the requested id is stored."""
