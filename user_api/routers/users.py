from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

from user_api.domain.errors import UserNotFoundError
from user_api.domain.projection import projection_from_fields
from user_api.domain.updates import UserUpdate
from user_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

FIELDS_HELP = "Comma separated list of fields to return (default: all)."


class UserCreate(BaseModel):
    name: str
    email: str


class UserPatch(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class UserOut(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    deleted: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BulkDeleteRequest(BaseModel):
    ids: list[int]


class BulkDeleteResponse(BaseModel):
    deleted: bool


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


@router.get("", response_model=list[UserOut], response_model_exclude_unset=True)
def list_users(
    request: Request,
    page: int = 1,
    limit: Optional[int] = None,
    fields: Optional[str] = Query(None, description=FIELDS_HELP),
):
    svc = _get_user_service(request)
    return svc.list_users(page, limit, projection_from_fields(fields))


@router.post("/bulk-delete", response_model=BulkDeleteResponse)
def bulk_delete_users(payload: BulkDeleteRequest, request: Request):
    """Soft-delete many users at once.

    ``deleted`` is true when at least one active user was transitioned; ids that
    are missing or already deleted are ignored and not reported individually.
    """
    svc = _get_user_service(request)
    return {"deleted": svc.delete_users(payload.ids)}


@router.get("/{user_id}", response_model=UserOut, response_model_exclude_unset=True)
def get_user(user_id: int, request: Request, fields: Optional[str] = Query(None, description=FIELDS_HELP)):
    svc = _get_user_service(request)
    user = svc.get_user(user_id, projection_from_fields(fields))
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post("", response_model=UserOut, response_model_exclude_unset=True, status_code=201)
def create_user(payload: UserCreate, request: Request, fields: Optional[str] = Query(None, description=FIELDS_HELP)):
    svc = _get_user_service(request)
    return svc.create_user(payload.name, payload.email, projection_from_fields(fields))


@router.patch("/{user_id}", response_model=UserOut, response_model_exclude_unset=True)
def update_user(
    user_id: int,
    payload: UserPatch,
    request: Request,
    fields: Optional[str] = Query(None, description=FIELDS_HELP),
):
    svc = _get_user_service(request)
    update = UserUpdate.from_mapping(payload.model_dump(exclude_unset=True))
    return svc.update_user(user_id, update, projection_from_fields(fields))


@router.delete("/{user_id}", response_model=UserOut, response_model_exclude_unset=True)
def delete_user(user_id: int, request: Request, fields: Optional[str] = Query(None, description=FIELDS_HELP)):
    svc = _get_user_service(request)
    return svc.delete_user(user_id, projection_from_fields(fields))


@router.post("/{user_id}/restore", response_model=UserOut, response_model_exclude_unset=True)
def restore_user(user_id: int, request: Request, fields: Optional[str] = Query(None, description=FIELDS_HELP)):
    svc = _get_user_service(request)
    return svc.restore_user(user_id, projection_from_fields(fields))
