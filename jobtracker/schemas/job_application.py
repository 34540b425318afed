"""
Pydantic schemas for job application records.

Status is a tagged union: the `kind` field selects the variant and only
that variant's payload (interview round, offer amount) exists.
"""
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from jobtracker.core.errors import ValidationError


class StatusKind(str, Enum):
    """Tag of the active status variant, also the stored column value."""
    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"


class AppliedStatus(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["applied"] = "applied"


class InterviewStatus(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["interview"] = "interview"
    round: int = Field(..., ge=1, description="Interview round, starting at 1")


class OfferStatus(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["offer"] = "offer"
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Offered amount")


class RejectedStatus(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["rejected"] = "rejected"


Status = Annotated[
    Union[AppliedStatus, InterviewStatus, OfferStatus, RejectedStatus],
    Field(discriminator="kind"),
]


class JobApplicationBase(BaseModel):
    """Fields shared by every record shape."""
    model_config = ConfigDict(extra="forbid")

    company: str = Field(..., description="Company name", min_length=1)
    position: str = Field(..., description="Position applied for", min_length=1)
    location: Optional[str] = Field(None, description="Job location")
    status: Status = Field(default_factory=AppliedStatus, description="Current application status")
    applied_date: date = Field(..., description="Date the application was sent")
    resume_path: Optional[str] = Field(None, description="Path of the resume sent (not checked)")
    salary_expectation: Optional[Decimal] = Field(
        None, ge=0, max_digits=12, decimal_places=2, description="Expected salary"
    )

    @field_validator("company", "position")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class JobApplicationCreate(JobApplicationBase):
    """Schema for creating a new job application."""
    pass


class JobApplicationUpdate(BaseModel):
    """
    Schema for a partial update.

    Only fields explicitly supplied are applied; `id` is not accepted.
    """
    model_config = ConfigDict(extra="forbid")

    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    status: Optional[Status] = None
    applied_date: Optional[date] = None
    resume_path: Optional[str] = None
    salary_expectation: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)

    def changes(self) -> dict:
        # Nested models dump whole, so a defaulted status kind is kept
        return self.model_dump(include=self.model_fields_set)


class JobApplication(JobApplicationBase):
    """A stored job application."""
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "id": 1,
                "company": "Tech Corp",
                "position": "Senior Software Engineer",
                "location": "Remote",
                "status": {"kind": "interview", "round": 2},
                "applied_date": "2024-01-15",
                "resume_path": "resumes/backend.pdf",
                "salary_expectation": "120000",
            }
        },
    )

    id: int = Field(..., description="Store-assigned id")


class JobApplicationListResponse(BaseModel):
    """Schema for list of applications response."""
    applications: List[JobApplication] = Field(..., description="Matching applications")
    total: int = Field(..., description="Number of matching applications")


class ApplicationFilter(BaseModel):
    """Optional constraints for listing; absent fields do not restrict."""
    status: Optional[StatusKind] = Field(None, description="Exact status variant")
    company_contains: Optional[str] = Field(None, description="Case-insensitive company substring")
    date_from: Optional[date] = Field(None, description="Earliest applied_date (inclusive)")
    date_to: Optional[date] = Field(None, description="Latest applied_date (inclusive)")


class StatusStats(BaseModel):
    """Record counts per status variant."""
    applied: int = 0
    interview: int = 0
    offer: int = 0
    rejected: int = 0
    total: int = 0


def build_application(data: Union[JobApplicationCreate, Mapping[str, Any]]) -> JobApplicationCreate:
    """Validate raw input into a JobApplicationCreate, raising the tracker ValidationError."""
    if isinstance(data, JobApplicationCreate):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude={"id"})
    try:
        return JobApplicationCreate.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e
