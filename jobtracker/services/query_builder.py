"""
Translate an ApplicationFilter into a parameterized SQLAlchemy query.

User-supplied values only ever reach SQL as bound parameters.
"""
from typing import List, Optional

from sqlalchemy import Select, func, select

from jobtracker.db.models.job_application import JobApplicationRow
from jobtracker.schemas.job_application import ApplicationFilter


def filter_conditions(filters: Optional[ApplicationFilter]) -> List:
    """Return the WHERE clauses for every constrained dimension of `filters`."""
    if filters is None:
        return []

    conditions = []
    if filters.status is not None:
        conditions.append(JobApplicationRow.status == filters.status.value)

    # Empty text means "no constraint", same as absent
    if filters.company_contains:
        conditions.append(
            JobApplicationRow.company.icontains(filters.company_contains, autoescape=True)
        )

    if filters.date_from is not None:
        conditions.append(JobApplicationRow.applied_date >= filters.date_from)
    if filters.date_to is not None:
        conditions.append(JobApplicationRow.applied_date <= filters.date_to)

    return conditions


def build_list_query(filters: Optional[ApplicationFilter] = None) -> Select:
    """
    Build the list query: matching rows, newest applied_date first, ties by id.

    An empty or missing filter gives the unrestricted list.
    """
    return (
        select(JobApplicationRow)
        .where(*filter_conditions(filters))
        .order_by(JobApplicationRow.applied_date.desc(), JobApplicationRow.id.asc())
    )


def build_count_query(filters: Optional[ApplicationFilter] = None) -> Select:
    return select(func.count(JobApplicationRow.id)).where(*filter_conditions(filters))


def build_stats_query() -> Select:
    return select(JobApplicationRow.status, func.count(JobApplicationRow.id)).group_by(
        JobApplicationRow.status
    )
