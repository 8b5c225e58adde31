from fastapi import APIRouter

from foodcart.core.responses import ok
from foodcart.domain.catalog import list_catalog

router = APIRouter(tags=["catalog"])


@router.get("/")
def health():
    return {"message": "Server is running"}


@router.get("/food-items")
def food_items():
    return ok(foodItems=list_catalog())
