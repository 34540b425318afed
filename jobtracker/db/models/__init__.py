"""
Database models module.

Imports every model so it is registered with Base.metadata before
migrations or table creation run.
"""
from jobtracker.db.models.job_application import JobApplicationRow

__all__ = [
    "JobApplicationRow",
]
