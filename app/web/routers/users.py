from __future__ import annotations
import logging
from typing import Any

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from app.service.user_service import (
    InvalidUserIdError,
    UpsertedUnknownUserError,
    UserNotFoundError,
    UserService,
)
from app.service.validation import RequestBodyError
from app.web.dependencies import get_user_service, read_body

router = APIRouter()
logger = logging.getLogger(__name__)

INVALID_ID = "Invalid ID"
NOT_FOUND = "User not found"
INVALID_BODY = "Invalid request body"


def _error(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def _json(payload: Any, status_code: int, error_message: str) -> Response:
    try:
        return JSONResponse(payload, status_code=status_code)
    except (TypeError, ValueError):
        logger.exception("failed to serialize response")
        return _error(error_message, 500)


@router.get("/users")
def list_users(service: UserService = Depends(get_user_service)):
    records = service.list_users()
    return _json([r.to_dict() for r in records], 200, "Error parsing response")


@router.get("/users/{user_id}")
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    try:
        record = service.get_user(user_id)
    except InvalidUserIdError:
        return _error(INVALID_ID, 400)
    except UserNotFoundError:
        return _error(NOT_FOUND, 404)
    return _json(record.to_dict(), 200, "Error parsing response")


@router.post("/users")
def create_user(body: bytes = Depends(read_body), service: UserService = Depends(get_user_service)):
    try:
        record = service.create_user(body)
    except RequestBodyError:
        return _error(INVALID_BODY, 400)
    return _json(record.to_dict(), 201, "Error while parsing the response")


@router.put("/users/{user_id}")
def update_user(
    user_id: str,
    body: bytes = Depends(read_body),
    service: UserService = Depends(get_user_service),
):
    try:
        record = service.update_user(user_id, body)
    except InvalidUserIdError:
        return _error(INVALID_ID, 400)
    except RequestBodyError:
        return _error(INVALID_BODY, 400)
    except UpsertedUnknownUserError:
        # The user was stored anyway; the caller only learns the id was new.
        return _error(NOT_FOUND, 404)
    return _json(record.to_dict(), 200, "Error while parsing the response")


@router.delete("/users/{user_id}")
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    try:
        service.delete_user(user_id)
    except InvalidUserIdError:
        return _error(INVALID_ID, 400)
    except UserNotFoundError:
        return _error(NOT_FOUND, 404)
    return Response(status_code=204)
