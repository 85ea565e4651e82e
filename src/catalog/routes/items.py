"""Catalog record endpoints."""

from fastapi import APIRouter, HTTPException, Request, Response, status

from catalog.records import Record, RecordCreate, RecordStore

router = APIRouter(prefix="/items", tags=["items"])

LIST_CACHE_CONTROL = "public, max-age=300, stale-while-revalidate=3600"


def _store(request: Request) -> RecordStore:
    return request.app.state.record_store


@router.get(
    "",
    response_model=list[Record],
    summary="List all records",
    description="Returns every record in insertion order.",
)
async def list_items(request: Request, response: Response) -> list[Record] | Response:
    """List all catalog records.

    The ETag changes whenever a record is appended; a matching
    If-None-Match header yields 304 Not Modified.

    Returns:
        Records in insertion order.
    """
    store = _store(request)
    etag = f'"items-{store.version}"'
    headers = {"Cache-Control": LIST_CACHE_CONTROL, "ETag": etag}

    if request.headers.get("if-none-match") == etag:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers=headers)

    response.headers.update(headers)
    return list(store.list_records())


@router.get(
    "/{record_id}",
    response_model=Record,
    responses={404: {"description": "Record not found"}},
)
async def get_item(request: Request, record_id: int) -> Record:
    """Retrieve one record by id.

    Raises:
        HTTPException: 404 if no record has this id.
    """
    record = _store(request).get_record(record_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Record not found",
        )
    return record


@router.post(
    "",
    response_model=Record,
    status_code=status.HTTP_201_CREATED,
    summary="Add a record",
)
async def create_item(
    request: Request, response: Response, payload: RecordCreate
) -> Record:
    """Append a record to the catalog.

    Args:
        request: FastAPI request (provides access to app state).
        response: Outgoing response, used to disable caching.
        payload: Title, description, tags and date of the new record.

    Returns:
        The stored record with its assigned id.
    """
    record = _store(request).add_record(payload)
    response.headers["Cache-Control"] = "no-cache"
    return record
