"""Typed exceptions raised by the scoring engine and its repositories.

Domain outcomes such as "already scored" or "badge already held" are not
errors: services return ``None`` or an empty list for them. Only invalid
caller input, missing required records and storage uniqueness violations
raise.
"""
from __future__ import annotations


class CompassBadgesError(Exception):
    """Base exception for the engine."""


class InvalidInputError(CompassBadgesError, ValueError):
    """Caller input rejected before any repository access (HTTP 400)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(CompassBadgesError, LookupError):
    """A record required by the operation does not exist (HTTP 404)."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")


class DuplicateRecordError(CompassBadgesError):
    """A write violated a uniqueness constraint enforced by storage.

    Attributes:
        table: Table whose unique constraint rejected the row.
        key: The natural key that already exists.
    """

    def __init__(self, table: str, key: tuple[str, ...]) -> None:
        self.table = table
        self.key = key
        super().__init__(f"Duplicate {table} record for key {key!r}")
