"""
Local API for the Job Tracker desktop UI.

The store is opened when the app starts and closed when it stops; tests
and embedding code can hand in an already opened store instead.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobtracker import __version__
from jobtracker.api.routes import applications, health
from jobtracker.core import config
from jobtracker.core.logging_config import setup_logging
from jobtracker.services.store import JobStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[JobStore] = None) -> FastAPI:
    """Build the FastAPI app; without `store`, one is opened at config.DATABASE_PATH on startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = store is None
        app.state.store = JobStore.initialize(config.DATABASE_PATH) if owns_store else store
        try:
            yield
        finally:
            if owns_store:
                app.state.store.close()

    app = FastAPI(title="Job Tracker", version=__version__, lifespan=lifespan)
    if store is not None:
        app.state.store = store

    # ✅ Only the local desktop UI talks to this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost",
            "http://127.0.0.1",
        ],
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type"],
    )

    app.include_router(applications.router)
    app.include_router(health.router)

    @app.get("/")
    def root():
        return {"status": "Job Tracker API running"}

    return app


app = create_app()


def run():
    """Console entry point: start the local API."""
    setup_logging(config.LOG_LEVEL)
    logger.info(f"Starting Job Tracker API on {config.API_HOST}:{config.API_PORT}")
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    run()
