"""
Health check endpoint used by the desktop UI on startup.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from jobtracker import __version__
from jobtracker.api.deps import get_store
from jobtracker.services.store import JobStore

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_check(store: JobStore = Depends(get_store)):
    """
    Returns 200 with "healthy" when the database answers, "degraded" otherwise.
    """
    db_ok = store.ping()
    return {
        "status": "healthy" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if db_ok else "error",
        "version": __version__,
    }
