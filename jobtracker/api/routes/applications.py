"""
Job application endpoints for the desktop UI.

Thin layer over JobStore: each route makes one store call and maps the
tracker errors onto HTTP status codes.
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from jobtracker.api.deps import get_store
from jobtracker.core.errors import NotFoundError, StorageError, TrackerError, ValidationError
from jobtracker.schemas.job_application import (
    ApplicationFilter,
    JobApplication,
    JobApplicationCreate,
    JobApplicationListResponse,
    JobApplicationUpdate,
    StatusKind,
    StatusStats,
)
from jobtracker.services.store import JobStore

router = APIRouter(prefix="/applications", tags=["Applications"])


def to_http_exception(error: TrackerError) -> HTTPException:
    """Map a tracker error onto the matching HTTP error."""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=422, detail=error.errors)
    if isinstance(error, StorageError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Unexpected error")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobApplication)
def create_application(
    application: JobApplicationCreate,
    store: JobStore = Depends(get_store),
):
    """Create a new job application and return it with its assigned id."""
    try:
        application_id = store.create(application)
        return store.get(application_id)
    except TrackerError as e:
        raise to_http_exception(e)


@router.get("", response_model=JobApplicationListResponse)
def list_applications(
    status_kind: Optional[StatusKind] = Query(None, alias="status", description="Filter by status"),
    company_contains: Optional[str] = Query(None, description="Company name substring (case-insensitive)"),
    date_from: Optional[date] = Query(None, description="Applied on or after"),
    date_to: Optional[date] = Query(None, description="Applied on or before"),
    store: JobStore = Depends(get_store),
):
    """
    List job applications, newest first.

    Every query parameter is optional; none given lists everything.
    """
    filters = ApplicationFilter(
        status=status_kind,
        company_contains=company_contains,
        date_from=date_from,
        date_to=date_to,
    )
    try:
        applications = store.list(filters)
    except TrackerError as e:
        raise to_http_exception(e)
    return JobApplicationListResponse(applications=applications, total=len(applications))


@router.delete("")
def clear_applications(store: JobStore = Depends(get_store)):
    """Delete every job application."""
    try:
        removed = store.clear()
    except TrackerError as e:
        raise to_http_exception(e)
    return {"deleted": removed}


@router.get("/stats", response_model=StatusStats)
def application_stats(store: JobStore = Depends(get_store)):
    try:
        return store.stats()
    except TrackerError as e:
        raise to_http_exception(e)


@router.get("/{application_id}", response_model=JobApplication)
def get_application(application_id: int, store: JobStore = Depends(get_store)):
    try:
        return store.get(application_id)
    except TrackerError as e:
        raise to_http_exception(e)


@router.patch("/{application_id}", response_model=JobApplication)
def update_application(
    application_id: int,
    changes: JobApplicationUpdate,
    store: JobStore = Depends(get_store),
):
    """Apply only the supplied fields; the merged record is validated again."""
    try:
        return store.update(application_id, changes)
    except TrackerError as e:
        raise to_http_exception(e)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(application_id: int, store: JobStore = Depends(get_store)):
    try:
        store.delete(application_id)
    except TrackerError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
