from foodcart.domain.catalog import FOOD_ITEMS, list_catalog


def test_catalog_contents():
    catalog = list_catalog()
    assert set(catalog) == {"Vegetable Curry", "Chicken Biryani", "Paneer Butter Masala"}
    assert catalog["Chicken Biryani"] == {
        "price": 150,
        "image": "./images/cb.jpg",
        "description": "Fragrant basmati rice cooked with tender chicken and aromatic spices.",
    }


def test_catalog_copies_cannot_mutate_the_catalog():
    catalog = list_catalog()
    catalog["Vegetable Curry"]["price"] = 1
    del catalog["Chicken Biryani"]
    assert FOOD_ITEMS["Vegetable Curry"]["price"] == 120
    assert "Chicken Biryani" in list_catalog()
