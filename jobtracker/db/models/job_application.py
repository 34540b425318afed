from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String
from sqlalchemy.sql import func

from jobtracker.db.base import Base


class JobApplicationRow(Base):
    """
    Stored job application.

    `status` holds the variant tag; `interview_round` and `offer_amount`
    are only set while the matching variant is active.
    """
    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company = Column(String, nullable=False)
    position = Column(String, nullable=False)
    location = Column(String, nullable=True)
    status = Column(String(16), nullable=False, default="applied", index=True)
    interview_round = Column(Integer, nullable=True)
    offer_amount = Column(Numeric(12, 2), nullable=True)
    applied_date = Column(Date, nullable=False, index=True)
    resume_path = Column(String, nullable=True)
    salary_expectation = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
