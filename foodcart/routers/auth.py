from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Request

from foodcart.core.errors import StorageError
from foodcart.core.responses import failure, ok
from foodcart.services.auth_service import AuthService

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


def _auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


@router.post("/login")
def login(request: Request, payload: Optional[dict] = Body(None)):
    data = payload or {}
    try:
        _auth_service(request).login(data.get("username"), data.get("password"))
    except StorageError:
        logger.exception("Login error")
        return failure(500, "Server error")
    return ok()


@router.post("/register")
def register(request: Request, payload: Optional[dict] = Body(None)):
    data = payload or {}
    try:
        _auth_service(request).register(data.get("username"), data.get("password"))
    except StorageError:
        logger.exception("Registration error")
        return failure(500, "Server error")
    return ok()


@router.get("/users")
def users(request: Request):
    """Registered usernames; password fields never leave the store."""
    try:
        listing = _auth_service(request).list_users()
    except StorageError:
        logger.exception("Error listing users")
        return failure(500, "Error reading users")
    return ok(users=listing)
