from fastapi import Request

from jobtracker.services.store import JobStore


def get_store(request: Request) -> JobStore:
    """Store dependency: the handle opened at application startup."""
    return request.app.state.store
