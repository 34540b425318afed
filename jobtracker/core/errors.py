"""
Error taxonomy for the job tracker core.

Every store operation either returns its value or raises exactly one of
ValidationError, NotFoundError or StorageError.
"""
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError


class TrackerError(Exception):
    """Base class for errors surfaced to the UI layer."""


class ValidationError(TrackerError, ValueError):
    """Input fails the record invariants. Recoverable by correcting the input."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        errors = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "record"
            errors.append(f"{field}: {err['msg']}")
        return cls("; ".join(errors), errors)


class NotFoundError(TrackerError):
    """Referenced application id does not exist."""

    def __init__(self, application_id: int):
        super().__init__(f"Job application not found with id: {application_id}")
        self.application_id = application_id


class StorageError(TrackerError):
    """Underlying database or file system failure."""
