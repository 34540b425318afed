"""
Unit tests for the job application record model.
Tests required fields, status variants and error conversion.
"""
import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError as PydanticValidationError

from jobtracker.core.errors import ValidationError
from jobtracker.schemas.job_application import (
    AppliedStatus,
    ApplicationFilter,
    InterviewStatus,
    JobApplicationCreate,
    JobApplicationUpdate,
    OfferStatus,
    RejectedStatus,
    build_application,
)


def valid_fields(**overrides):
    fields = {
        "company": "Test Corp",
        "position": "Software Engineer",
        "applied_date": date(2024, 1, 15),
    }
    fields.update(overrides)
    return fields


def test_minimal_record_defaults_to_applied():
    """Test a record with only required fields gets Applied and empty optionals."""
    record = JobApplicationCreate(**valid_fields())
    assert record.status == AppliedStatus()
    assert record.location is None
    assert record.resume_path is None
    assert record.salary_expectation is None


def test_company_and_position_are_stripped():
    """Test surrounding whitespace is removed from required text fields."""
    record = JobApplicationCreate(**valid_fields(company="  Acme  ", position=" Dev "))
    assert record.company == "Acme"
    assert record.position == "Dev"


@pytest.mark.parametrize("field", ["company", "position"])
@pytest.mark.parametrize("value", ["", "   "])
def test_blank_required_text_rejected(field, value):
    """Test empty or whitespace-only company/position fail validation."""
    with pytest.raises(PydanticValidationError):
        JobApplicationCreate(**valid_fields(**{field: value}))


def test_applied_date_required():
    """Test a record without applied_date is invalid."""
    fields = valid_fields()
    del fields["applied_date"]
    with pytest.raises(PydanticValidationError):
        JobApplicationCreate(**fields)


def test_invalid_calendar_date_rejected():
    """Test impossible dates such as February 30th are rejected."""
    with pytest.raises(PydanticValidationError):
        JobApplicationCreate(**valid_fields(applied_date="2024-02-30"))


def test_status_variants_from_tagged_dicts():
    """Test the kind tag selects the status variant."""
    assert JobApplicationCreate(**valid_fields(status={"kind": "applied"})).status == AppliedStatus()
    assert JobApplicationCreate(**valid_fields(status={"kind": "rejected"})).status == RejectedStatus()

    interview = JobApplicationCreate(**valid_fields(status={"kind": "interview", "round": 2})).status
    assert isinstance(interview, InterviewStatus)
    assert interview.round == 2

    offer = JobApplicationCreate(**valid_fields(status={"kind": "offer", "amount": "95000.50"})).status
    assert isinstance(offer, OfferStatus)
    assert offer.amount == Decimal("95000.50")


@pytest.mark.parametrize("status", [
    {"kind": "interview", "round": 0},
    {"kind": "interview"},
    {"kind": "offer", "amount": "-1"},
    {"kind": "offer"},
    {"kind": "hired"},
    {"kind": "applied", "round": 2},
])
def test_inconsistent_status_payload_rejected(status):
    """Test payloads that do not match the variant are rejected."""
    with pytest.raises(PydanticValidationError):
        JobApplicationCreate(**valid_fields(status=status))


def test_negative_salary_expectation_rejected():
    """Test salary expectation must not be negative."""
    with pytest.raises(PydanticValidationError):
        JobApplicationCreate(**valid_fields(salary_expectation="-10"))


def test_build_application_raises_tracker_validation_error():
    """Test build_application converts pydantic errors into ValidationError."""
    with pytest.raises(ValidationError) as exc_info:
        build_application(valid_fields(company=""))

    assert any(message.startswith("company:") for message in exc_info.value.errors)
    assert isinstance(exc_info.value, ValueError)


def test_build_application_passes_through_valid_input():
    """Test build_application returns validated records unchanged."""
    record = JobApplicationCreate(**valid_fields())
    assert build_application(record) is record
    assert build_application(valid_fields()) == record


def test_update_changes_only_contain_supplied_fields():
    """Test partial updates report exactly the fields that were set."""
    changes = JobApplicationUpdate(location=None, status={"kind": "interview", "round": 2})
    assert changes.changes() == {
        "location": None,
        "status": {"kind": "interview", "round": 2},
    }


@pytest.mark.parametrize("status,dumped", [
    (InterviewStatus(round=2), {"kind": "interview", "round": 2}),
    (OfferStatus(amount=Decimal("500")), {"kind": "offer", "amount": Decimal("500")}),
    (AppliedStatus(), {"kind": "applied"}),
    (RejectedStatus(), {"kind": "rejected"}),
])
def test_update_changes_keep_status_kind_of_typed_status(status, dumped):
    """Test a status built from the model classes keeps its defaulted kind tag."""
    changes = JobApplicationUpdate(status=status)
    assert changes.changes() == {"status": dumped}


@pytest.mark.parametrize("amount", ["0.01", "9999999999.99"])
def test_amount_within_column_precision_accepted(amount):
    """Test offer amounts up to 10 whole digits and 2 decimals are valid."""
    record = JobApplicationCreate(**valid_fields(status=OfferStatus(amount=Decimal(amount))))
    assert record.status.amount == Decimal(amount)


@pytest.mark.parametrize("amount", ["1234.567", "99999999999", "0.001"])
def test_amount_beyond_column_precision_rejected(amount):
    """Test amounts the stored column would round or overflow are rejected."""
    with pytest.raises(PydanticValidationError):
        OfferStatus(amount=Decimal(amount))
    with pytest.raises(ValidationError):
        build_application(valid_fields(salary_expectation=amount))


def test_update_rejects_id():
    """Test the id cannot be part of an update."""
    with pytest.raises(PydanticValidationError):
        JobApplicationUpdate(id=5)


def test_empty_filter_has_no_constraints():
    """Test a default filter leaves every dimension open."""
    filters = ApplicationFilter()
    assert filters.status is None
    assert filters.company_contains is None
    assert filters.date_from is None
    assert filters.date_to is None
