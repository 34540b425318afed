"""
Edit-form state for the desktop UI.

The form holds raw strings exactly as typed; to_create() turns them into a
validated JobApplicationCreate or raises ValidationError with messages the
UI can show next to the form.
"""
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from jobtracker.core.errors import ValidationError
from jobtracker.schemas.job_application import (
    AppliedStatus,
    InterviewStatus,
    JobApplication,
    JobApplicationCreate,
    OfferStatus,
    RejectedStatus,
    StatusKind,
)


class StatusSelection(str, Enum):
    """Status dropdown value; the variant payload lives in its own form field."""
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"

    @classmethod
    def from_kind(cls, kind: StatusKind) -> "StatusSelection":
        return {
            StatusKind.APPLIED: cls.APPLIED,
            StatusKind.INTERVIEW: cls.INTERVIEW,
            StatusKind.OFFER: cls.OFFER,
            StatusKind.REJECTED: cls.REJECTED,
        }[StatusKind(kind)]


def _optional(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


class ApplicationForm(BaseModel):
    """String-valued form fields, one per input widget."""
    company: str = ""
    position: str = ""
    location: str = ""
    applied_date: str = Field(default_factory=lambda: date.today().isoformat())
    salary_expectation: str = ""
    status: StatusSelection = StatusSelection.APPLIED
    resume_path: str = ""
    interview_round: str = "1"
    offer_amount: str = ""

    @classmethod
    def from_application(cls, record: JobApplication) -> "ApplicationForm":
        """Fill the form from a stored record."""
        interview_round = ""
        offer_amount = ""
        if isinstance(record.status, InterviewStatus):
            interview_round = str(record.status.round)
        elif isinstance(record.status, OfferStatus):
            offer_amount = str(record.status.amount)

        return cls(
            company=record.company,
            position=record.position,
            location=record.location or "",
            applied_date=record.applied_date.isoformat(),
            salary_expectation="" if record.salary_expectation is None else str(record.salary_expectation),
            status=StatusSelection.from_kind(record.status.kind),
            resume_path=record.resume_path or "",
            interview_round=interview_round,
            offer_amount=offer_amount,
        )

    def _parse_status(self, errors: List[str]):
        if self.status == StatusSelection.INTERVIEW:
            try:
                return InterviewStatus(round=int(self.interview_round.strip()))
            except (ValueError, PydanticValidationError):
                errors.append("Invalid interview round")
                return None
        if self.status == StatusSelection.OFFER:
            try:
                return OfferStatus(amount=Decimal(self.offer_amount.strip()))
            except (InvalidOperation, PydanticValidationError):
                errors.append("Invalid offer amount")
                return None
        if self.status == StatusSelection.REJECTED:
            return RejectedStatus()
        return AppliedStatus()

    def to_create(self) -> JobApplicationCreate:
        """Parse every field; all problems are reported together."""
        errors = []

        try:
            applied_date = date.fromisoformat(self.applied_date.strip())
        except ValueError:
            errors.append("Invalid date format. Use YYYY-MM-DD")
            applied_date = None

        salary_expectation = None
        if _optional(self.salary_expectation):
            try:
                salary_expectation = Decimal(self.salary_expectation.strip())
            except InvalidOperation:
                errors.append("Invalid salary expectation")

        status = self._parse_status(errors)

        if errors:
            raise ValidationError("; ".join(errors), errors)

        try:
            return JobApplicationCreate(
                company=self.company,
                position=self.position,
                location=_optional(self.location),
                status=status,
                applied_date=applied_date,
                resume_path=_optional(self.resume_path),
                salary_expectation=salary_expectation,
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e
