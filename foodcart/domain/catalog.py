"""Static food catalog served by GET /food-items."""

from __future__ import annotations

import copy

FOOD_ITEMS: dict[str, dict] = {
    "Vegetable Curry": {
        "price": 120,
        "image": "./images/vb.jpg",
        "description": "A delicious mix of fresh vegetables in aromatic curry sauce.",
    },
    "Chicken Biryani": {
        "price": 150,
        "image": "./images/cb.jpg",
        "description": "Fragrant basmati rice cooked with tender chicken and aromatic spices.",
    },
    "Paneer Butter Masala": {
        "price": 130,
        "image": "./images/pb.jpg",
        "description": "Cottage cheese cubes in rich, creamy tomato gravy.",
    },
}


def list_catalog() -> dict[str, dict]:
    """Return a copy of the catalog; the module-level mapping never changes."""
    return copy.deepcopy(FOOD_ITEMS)
