from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import JSONResponse

from ....application.validation import Invalid, validate_new_user
from ....infrastructure.metrics import (
    users_created_total,
    users_deleted_total,
    user_validation_failures_total,
    users_stored,
)
from ....infrastructure.store import UserStore
from ..deps import get_store
from ..schemas import ErrorOut, UserListOut, UserOut

router = APIRouter(prefix="/api/users", tags=["users"])
logger = structlog.get_logger()

NOT_FOUND = {"error": "User not found"}

def _parse_id(raw: str) -> int | None:
    # Нечисловой id ведёт себя как промах поиска
    if not raw.isascii() or not raw.isdigit():
        return None
    try:
        return int(raw)
    except ValueError:
        # Слишком длинное число (лимит цифр int)
        return None

def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)

@router.get("", response_model=UserListOut)
def list_users(store: UserStore = Depends(get_store)):
    users, count = store.list()
    return UserListOut(count=count, data=[UserOut.model_validate(u) for u in users])

@router.get("/{user_id}", response_model=UserOut, responses={404: {"model": ErrorOut}})
def get_user(user_id: str, store: UserStore = Depends(get_store)):
    uid = _parse_id(user_id)
    user = store.get_by_id(uid) if uid is not None else None
    if user is None:
        return _not_found()
    return UserOut.model_validate(user)

@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED, responses={400: {"model": ErrorOut}})
def create_user(payload: Any = Body(None), store: UserStore = Depends(get_store)):
    result = validate_new_user(payload)
    if isinstance(result, Invalid):
        user_validation_failures_total.inc()
        logger.info("user_validation_failed", fields=[".".join(map(str, i.path)) for i in result.issues])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": [i.to_dict() for i in result.issues]},
        )

    new = result.value
    user = store.create(new.name, new.email, new.role)
    users_created_total.inc()
    users_stored.set(len(store))
    logger.info("user_created", user_id=user.id, role=user.role)
    return UserOut.model_validate(user)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"model": ErrorOut}})
def delete_user(user_id: str, store: UserStore = Depends(get_store)):
    uid = _parse_id(user_id)
    if uid is None or not store.delete_by_id(uid):
        return _not_found()
    users_deleted_total.inc()
    users_stored.set(len(store))
    logger.info("user_deleted", user_id=uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
