"""Account routes: create and auth check."""
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from readsync.routers.deps import Credentials, get_credentials, get_sync_service
from readsync.schemas import UserCreateSchema, decode_body
from readsync.services.sync import SyncService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/create", status_code=201)
async def create_user(
    request: Request,
    service: Annotated[SyncService, Depends(get_sync_service)],
):
    """Register a username/key pair."""
    form = decode_body(UserCreateSchema, await request.body())
    username = await service.create_account(form.username, form.password)
    return {"username": username}


@router.get("/auth")
async def auth_user(
    credentials: Annotated[Credentials, Depends(get_credentials)],
    service: Annotated[SyncService, Depends(get_sync_service)],
):
    await service.check_auth(credentials.username, credentials.key)
    return {"authorized": "OK"}
