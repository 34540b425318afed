"""
Tests for the Alembic migrations run at startup.
"""
from alembic.script import ScriptDirectory
from sqlalchemy import inspect, text

from jobtracker.db.migrate import get_alembic_config, run_migrations
from jobtracker.db.session import create_db_engine
from jobtracker.services.store import JobStore


def test_single_migration_head():
    """Test the migration history is linear."""
    script = ScriptDirectory.from_config(get_alembic_config())
    assert len(script.get_heads()) == 1


def test_schema_created(tmp_path):
    """Test migrations create the job_applications table with its indexes."""
    engine = create_db_engine(tmp_path / "schema.db")
    try:
        run_migrations(engine)

        inspector = inspect(engine)
        assert "job_applications" in inspector.get_table_names()

        columns = {col["name"] for col in inspector.get_columns("job_applications")}
        assert {
            "id", "company", "position", "location", "status", "interview_round",
            "offer_amount", "applied_date", "resume_path", "salary_expectation",
            "created_at", "updated_at",
        } <= columns

        indexes = {idx["name"] for idx in inspector.get_indexes("job_applications")}
        assert "ix_job_applications_status" in indexes
        assert "ix_job_applications_applied_date" in indexes
    finally:
        engine.dispose()


def test_migrations_are_idempotent(tmp_path):
    """Test running migrations again keeps data and stays at head."""
    db_path = tmp_path / "jobs.db"
    with JobStore.initialize(db_path) as store:
        store.create({"company": "Acme", "position": "Dev", "applied_date": "2024-01-01"})

    engine = create_db_engine(db_path)
    try:
        run_migrations(engine)
        run_migrations(engine)

        head = ScriptDirectory.from_config(get_alembic_config()).get_current_head()
        with engine.connect() as connection:
            version = connection.execute(text("SELECT version_num FROM alembic_version")).scalar_one()
            count = connection.execute(text("SELECT COUNT(*) FROM job_applications")).scalar_one()
        assert version == head
        assert count == 1
    finally:
        engine.dispose()
