from app.catalog.item_category import is_drinks_category, item_type_from_category
from app.catalog.menu import (
    build_menu_item,
    build_menu_items,
    categories_in_use,
    filter_by_category,
    menu_categories,
)
from app.catalog.models import CatalogItem, MenuItem, NormalizedItem
from app.catalog.parser import normalize_catalog, separate_catalog_objects
from app.square.money import dollars_to_square_money, square_money_to_dollars
from conftest import item


def menu_from(objects, disabled_ids=frozenset()):
    catalog = separate_catalog_objects(objects)
    category_map, normalized = normalize_catalog(catalog)
    return category_map, build_menu_items(catalog.items, normalized, catalog.images, disabled_ids)


def test_menu_items_get_price_category_and_image(cafe_catalog):
    _, items = menu_from(cafe_catalog)
    by_id = {i.id: i for i in items}

    latte = by_id["I1"]
    assert latte.price == 4.5
    assert latte.category == "Coffee"
    assert latte.category_id == "C1"
    assert latte.image_url == "https://img.example/latte.jpg"
    assert latte.item_type == "drinks"
    assert latte.available is True

    assert by_id["I2"].price == 3.25
    assert by_id["I2"].category == "Pastries"
    assert by_id["I2"].item_type == "food"


def test_item_without_category_or_variation(cafe_catalog):
    _, items = menu_from(cafe_catalog)
    mystery = next(i for i in items if i.id == "I4")

    assert mystery.category == "Uncategorized"
    assert mystery.category_id is None
    assert mystery.price == 0.0
    assert mystery.image_url is None


def test_unmapped_category_id_is_uncategorized_but_kept():
    _, items = menu_from([item("I5", "Scone", categories=[{"id": "C9"}])])
    assert items[0].category == "Uncategorized"
    assert items[0].category_id == "C9"


def test_disabled_and_deleted_items_are_unavailable(cafe_catalog):
    objects = cafe_catalog + [item("I7", "Old Muffin", isDeleted=True)]
    _, items = menu_from(objects, disabled_ids={"I2"})
    availability = {i.id: i.available for i in items}

    assert availability["I1"] is True
    assert availability["I2"] is False
    assert availability["I7"] is False


def test_display_category_is_the_resolved_name_as_given():
    normalized = NormalizedItem(id="I1", name="Latte", category_ids=("C1",), category_names=("Coffee ",))
    menu_item = build_menu_item(CatalogItem(item("I1", "Latte")), normalized, {}, frozenset())
    assert menu_item.category == "Coffee "


def test_menu_categories_sorted_with_uncategorized_last(cafe_catalog):
    category_map, items = menu_from(cafe_catalog + [item("I8", "Loose Leaf", categories=["C10"])])
    assert menu_categories(items, {**category_map, "C10": " Tea "}) == [
        "Coffee",
        "Pastries",
        "Sandwiches",
        "Tea",
        "Uncategorized",
    ]


def test_categories_in_use_only_lists_assigned_categories():
    items = [
        MenuItem(id="1", name="a", category="Tea"),
        MenuItem(id="2", name="b", category="Coffee"),
        MenuItem(id="3", name="c", category="Tea"),
    ]
    assert categories_in_use(items) == ["Coffee", "Tea"]


def test_filter_by_category():
    items = [
        MenuItem(id="1", name="a", category="Tea"),
        MenuItem(id="2", name="b", category="Coffee"),
    ]
    assert filter_by_category(items, None) == items
    assert filter_by_category(items, "all") == items
    assert [i.id for i in filter_by_category(items, " Tea ")] == ["1"]
    assert filter_by_category(items, "Juice") == []


def test_drinks_classification():
    assert is_drinks_category("Iced Coffee")
    assert is_drinks_category("  HOT DRINKS ")
    assert not is_drinks_category("Pastries")
    assert not is_drinks_category(None)
    assert item_type_from_category("Green Tea") == "drinks"
    assert item_type_from_category("Sandwiches") == "food"


def test_money_conversion():
    assert square_money_to_dollars(None) == 0.0
    assert square_money_to_dollars(0) == 0.0
    assert square_money_to_dollars(450) == 4.5
    assert square_money_to_dollars("1299") == 12.99
    assert dollars_to_square_money(4.5) == 450
    assert dollars_to_square_money(19.995) == 2000
