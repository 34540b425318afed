"""
Job application store.

Owns the SQLite database handle: opened once at startup with
JobStore.initialize(), passed explicitly to whoever needs it, and closed
at shutdown. Every operation runs in a single transaction and either
returns its value or raises ValidationError, NotFoundError or StorageError.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from alembic.util import CommandError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobtracker.core import config
from jobtracker.core.errors import NotFoundError, StorageError, ValidationError
from jobtracker.db.migrate import run_migrations
from jobtracker.db.models.job_application import JobApplicationRow
from jobtracker.db.session import MEMORY_PATH, create_db_engine, make_session_factory
from jobtracker.schemas.job_application import (
    ApplicationFilter,
    InterviewStatus,
    JobApplication,
    JobApplicationCreate,
    JobApplicationUpdate,
    OfferStatus,
    StatusKind,
    StatusStats,
    build_application,
)
from jobtracker.services.query_builder import (
    build_count_query,
    build_list_query,
    build_stats_query,
)

logger = logging.getLogger(__name__)


def _apply_to_row(row: JobApplicationRow, record: JobApplicationCreate) -> None:
    """Copy a validated record onto a row, clearing payload columns of inactive variants."""
    row.company = record.company
    row.position = record.position
    row.location = record.location
    row.status = record.status.kind
    row.interview_round = record.status.round if isinstance(record.status, InterviewStatus) else None
    row.offer_amount = record.status.amount if isinstance(record.status, OfferStatus) else None
    row.applied_date = record.applied_date
    row.resume_path = record.resume_path
    row.salary_expectation = record.salary_expectation


def _status_from_row(row: JobApplicationRow) -> Dict[str, Any]:
    if row.status == StatusKind.INTERVIEW.value:
        return {"kind": row.status, "round": row.interview_round}
    if row.status == StatusKind.OFFER.value:
        return {"kind": row.status, "amount": row.offer_amount}
    return {"kind": row.status}


def _row_to_record(row: JobApplicationRow) -> JobApplication:
    try:
        return JobApplication(
            id=row.id,
            company=row.company,
            position=row.position,
            location=row.location,
            status=_status_from_row(row),
            applied_date=row.applied_date,
            resume_path=row.resume_path,
            salary_expectation=row.salary_expectation,
        )
    except PydanticValidationError as e:
        logger.error(f"Stored row cannot be read back: id={row.id}, status={row.status!r}")
        raise StorageError(f"Corrupt job application row with id: {row.id}") from e


class JobStore:
    """Persistence for JobApplication records."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = make_session_factory(engine)

    @classmethod
    def initialize(cls, path: Optional[Union[str, Path]] = None) -> "JobStore":
        """
        Open or create the database at `path` and bring its schema up to date.

        Safe to call on every startup. Raises StorageError when the file or
        its directory cannot be created or opened.
        """
        path = path if path is not None else config.DATABASE_PATH
        try:
            if str(path) != MEMORY_PATH:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
            engine = create_db_engine(path)
            run_migrations(engine)
        except (OSError, SQLAlchemyError, CommandError) as e:
            logger.error(f"Failed to initialize database at {path}: {e}", exc_info=True)
            raise StorageError(f"Cannot open database at {path}: {e}") from e

        logger.info(f"Database ready at {path}")
        return cls(engine)

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Session]:
        """One session, one transaction; engine failures become StorageError."""
        try:
            with self._session_factory.begin() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action}: {e}", exc_info=True)
            raise StorageError(f"Failed to {action}") from e

    def create(self, record: Union[JobApplicationCreate, Mapping[str, Any]]) -> int:
        """Validate and insert a record, returning its new id."""
        record = build_application(record)
        with self._transaction("create job application") as session:
            row = JobApplicationRow()
            _apply_to_row(row, record)
            session.add(row)
            session.flush()
            application_id = row.id

        logger.info(f"Job application created: id={application_id}, company={record.company}")
        return application_id

    def get(self, application_id: int) -> JobApplication:
        with self._transaction("get job application") as session:
            row = session.get(JobApplicationRow, application_id)
            if row is None:
                raise NotFoundError(application_id)
            return _row_to_record(row)

    def update(
        self,
        application_id: int,
        changes: Union[JobApplicationUpdate, Mapping[str, Any]],
    ) -> JobApplication:
        """
        Apply only the supplied fields, re-validate the whole record and persist it.

        Replacing the status replaces its payload too, so no stale
        interview round or offer amount survives a transition.
        """
        if not isinstance(changes, JobApplicationUpdate):
            try:
                changes = JobApplicationUpdate.model_validate(changes)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e) from e

        with self._transaction("update job application") as session:
            row = session.get(JobApplicationRow, application_id)
            if row is None:
                raise NotFoundError(application_id)

            merged = _row_to_record(row).model_dump(exclude={"id"})
            merged.update(changes.changes())
            record = build_application(merged)

            _apply_to_row(row, record)
            session.flush()
            updated = _row_to_record(row)

        logger.info(f"Job application updated: id={application_id}, fields={sorted(changes.changes())}")
        return updated

    def delete(self, application_id: int) -> None:
        with self._transaction("delete job application") as session:
            row = session.get(JobApplicationRow, application_id)
            if row is None:
                raise NotFoundError(application_id)
            session.delete(row)

        logger.info(f"Job application deleted: id={application_id}")

    def list(self, filters: Optional[ApplicationFilter] = None) -> List[JobApplication]:
        """Return the matching records, newest applied_date first, ties by ascending id."""
        with self._transaction("list job applications") as session:
            rows = session.scalars(build_list_query(filters)).all()
            records = [_row_to_record(row) for row in rows]

        logger.debug(f"Job applications listed: total={len(records)}")
        return records

    def count(self, filters: Optional[ApplicationFilter] = None) -> int:
        with self._transaction("count job applications") as session:
            return session.scalar(build_count_query(filters))

    def stats(self) -> StatusStats:
        """Count records per status variant."""
        with self._transaction("compute job application stats") as session:
            grouped = session.execute(build_stats_query()).all()

        counts = {kind.value: 0 for kind in StatusKind}
        for status, count in grouped:
            if status not in counts:
                raise StorageError(f"Unknown status stored: {status!r}")
            counts[status] = count
        return StatusStats(**counts, total=sum(counts.values()))

    def clear(self) -> int:
        """Delete every record, returning how many were removed."""
        with self._transaction("clear job applications") as session:
            result = session.execute(delete(JobApplicationRow))
            removed = result.rowcount

        logger.info(f"Job applications cleared: removed={removed}")
        return removed

    def ping(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database closed")

    def __enter__(self) -> "JobStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
