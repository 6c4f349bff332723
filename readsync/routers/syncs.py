"""Progress routes: push and pull the reading position of a document."""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from readsync.routers.deps import Credentials, get_credentials, get_sync_service
from readsync.schemas import ProgressAckSchema, ProgressPushSchema, decode_body
from readsync.services.sync import SyncService

router = APIRouter(prefix="/syncs", tags=["syncs"])


@router.put("/progress", status_code=201, response_model=ProgressAckSchema)
async def push_progress(
    request: Request,
    credentials: Annotated[Credentials, Depends(get_credentials)],
    service: Annotated[SyncService, Depends(get_sync_service)],
):
    """Replace the caller's stored progress for the document in the body."""
    # body is validated before the credentials are checked
    payload = decode_body(ProgressPushSchema, await request.body())
    return await service.push_progress(credentials.username, credentials.key, payload)


@router.get("/progress/{document}")
async def pull_progress(
    document: str,
    credentials: Annotated[Credentials, Depends(get_credentials)],
    service: Annotated[SyncService, Depends(get_sync_service)],
):
    """Stored progress for document, or {} if nothing was pushed yet."""
    record = await service.pull_progress(credentials.username, credentials.key, document)
    return JSONResponse(content=record.to_wire())
