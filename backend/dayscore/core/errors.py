"""Domain error taxonomy shared by services, repositories and routes."""
from __future__ import annotations


class DayScoreError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DayScoreError):
    """Malformed or out-of-range input, or an empty patch."""


class AuthError(DayScoreError):
    """Missing/invalid credential or failed identity resolution."""

    status_code = 401


class StoreError(DayScoreError):
    """Constraint violation or connectivity failure in the entry store."""


class EntryNotFoundError(StoreError):
    def __init__(self, entry_id: int) -> None:
        super().__init__("Entry not found")
        self.entry_id = entry_id
