from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Request

from foodcart.core.errors import StorageError
from foodcart.core.responses import failure, ok
from foodcart.services.cart_service import CartService

router = APIRouter(tags=["cart"])
logger = logging.getLogger(__name__)


def _cart_service(request: Request) -> CartService:
    return request.app.state.cart_service


@router.get("/cart/{username}")
def get_cart(request: Request, username: str):
    try:
        cart = _cart_service(request).get_cart(username)
    except StorageError:
        logger.exception("Error reading cart")
        return failure(500, "Error reading cart")
    return ok(cart=cart)


@router.post("/cart/{username}/update")
def update_cart_item(request: Request, username: str, payload: Optional[dict] = Body(None)):
    data = payload or {}
    try:
        cart = _cart_service(request).update_item(username, data.get("item"), data.get("quantity"))
    except StorageError:
        logger.exception("Error updating cart")
        return failure(500, "Error updating cart")
    return ok(cart=cart)


@router.post("/cart")
def replace_cart(request: Request, payload: Optional[dict] = Body(None)):
    data = payload or {}
    try:
        cart = _cart_service(request).replace_cart(data.get("username"), data.get("cart"))
    except StorageError:
        logger.exception("Error replacing cart")
        return failure(500, "Error updating cart")
    return ok(cart=cart)


@router.post("/purchase")
def purchase(request: Request, payload: Optional[dict] = Body(None)):
    data = payload or {}
    try:
        _cart_service(request).purchase(data.get("username"))
    except StorageError:
        logger.exception("Purchase error")
        return failure(500, "Error completing purchase")
    return ok()
