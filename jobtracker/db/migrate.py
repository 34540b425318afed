"""
Database migration runner for Alembic migrations.
"""
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parent / "migrations"


def get_alembic_config() -> Config:
    alembic_cfg = Config()
    # ConfigParser interpolation: "%" must be doubled
    alembic_cfg.set_main_option("script_location", str(SCRIPT_LOCATION).replace("%", "%%"))
    return alembic_cfg


def run_migrations(engine: Engine, revision: str = "head") -> None:
    """
    Run Alembic migrations up to `revision` on the given engine.

    Idempotent: Alembic records the applied revision, so calling this on
    every startup only applies what is missing.
    """
    alembic_cfg = get_alembic_config()
    alembic_cfg.set_main_option(
        "sqlalchemy.url", engine.url.render_as_string(hide_password=False).replace("%", "%%")
    )

    logger.info(f"Running alembic upgrade {revision}")
    with engine.begin() as connection:
        # env.py picks up the shared connection instead of opening its own
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, revision)
    logger.info("Migrations complete")
