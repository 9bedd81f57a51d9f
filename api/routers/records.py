"""
Records router.

This router contains endpoints for:
- POST /records - Create a record, returning its assigned ID
- GET /records - List all records as a JSON array
- GET /records/stream - Stream all records as newline-delimited JSON

Storage failures surface as 503, except once a stream has started, where
the failure aborts the response. Request bodies are validated by FastAPI
against RecordDTO (422 on a missing or non-string ``information``).
"""

import logging
from typing import AsyncIterator, List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from api.deps import get_create_record_use_case, get_list_records_use_case
from application.exceptions import RecordStorageError
from application.use_cases import CreateRecordUseCase, ListRecordsUseCase
from domain.models import RecordDTO

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/records",
    tags=["Records"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateRecordResponse(BaseModel):
    """Response for a created record."""
    id: str


# =============================================================================
# Record Endpoints
# =============================================================================


@router.post(
    "",
    response_model=CreateRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_record_endpoint(
    request: RecordDTO,
    use_case: CreateRecordUseCase = Depends(get_create_record_use_case),
):
    """
    Create a record.

    Any ``id`` in the body is ignored; storage assigns a fresh one.

    Returns:
        The identifier of the stored record
    """
    try:
        record_id = await use_case.execute(request)
    except RecordStorageError as e:
        logger.error(f"Failed to create record: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    return CreateRecordResponse(id=record_id)


@router.get("", response_model=List[RecordDTO])
async def list_records_endpoint(
    use_case: ListRecordsUseCase = Depends(get_list_records_use_case),
):
    """
    List all records.

    Returns:
        Every stored record, in the order storage returns them
    """
    try:
        return [dto async for dto in use_case.execute()]
    except RecordStorageError as e:
        logger.error(f"Failed to list records: {e}")
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/stream")
async def stream_records_endpoint(
    use_case: ListRecordsUseCase = Depends(get_list_records_use_case),
) -> StreamingResponse:
    """
    Stream all records as newline-delimited JSON.

    The first record is fetched before the response starts so a storage
    failure can still be reported as 503. A failure after that point is
    re-raised and aborts the response, so the client never sees a short
    listing as a complete one.

    Returns:
        StreamingResponse with one RecordDTO JSON object per line
    """
    records = use_case.execute()
    try:
        first = await anext(records, None)
    except RecordStorageError as e:
        logger.error(f"Failed to stream records: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    async def ndjson_stream() -> AsyncIterator[str]:
        if first is None:
            return
        yield first.model_dump_json() + "\n"
        try:
            async for dto in records:
                yield dto.model_dump_json() + "\n"
        except RecordStorageError as e:
            logger.error(f"Record stream interrupted: {e}")
            raise

    return StreamingResponse(
        ndjson_stream(),
        media_type="application/x-ndjson",
    )
