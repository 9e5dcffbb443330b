import logging

from app.catalog.menu import (
    build_menu_items,
    categories_in_use,
    filter_by_category,
    menu_categories,
)
from app.catalog.parser import normalize_catalog, separate_catalog_objects
from app.square.client import SquareClient
from app.square.fetch_catalog import fetch_all_catalog_objects

logger = logging.getLogger(__name__)


async def load_catalog(square_client: SquareClient | None = None):
    """
    Fetch the full Square catalog and run it through the parser.

    Returns (partitioned catalog, category map, normalized items).
    """
    objects = await fetch_all_catalog_objects(square_client)
    catalog = separate_catalog_objects(objects)
    category_map, normalized = normalize_catalog(catalog)

    logger.info(
        f"Catalog loaded: {len(catalog.items)} items, {len(catalog.categories)} categories, "
        f"{len(catalog.item_variations)} variations"
    )
    return catalog, category_map, normalized


async def build_menu(square_client=None, disabled_ids=frozenset(), category=None) -> dict:
    """
    Build the public menu: every Square item with price, availability and
    display category, plus the list of menu categories.
    """
    catalog, category_map, normalized = await load_catalog(square_client)

    if not catalog.items:
        return {
            "items": [],
            "categories": menu_categories([], category_map),
            "source": "square",
            "count": 0,
            "warning": "Square catalog is empty or has no ITEM type objects",
        }

    items = build_menu_items(
        catalog.items,
        normalized,
        catalog.images,
        disabled_ids,
        modifier_lists=catalog.modifier_lists,
        modifiers=catalog.modifiers,
    )
    categories = menu_categories(items, category_map)

    uncategorized = sum(1 for i in items if i.category == "Uncategorized")
    logger.info(
        f"✔ Menu built → {len(items)} items, {len(categories)} categories, "
        f"{uncategorized} uncategorized"
    )

    items = filter_by_category(items, category)
    if category and category != "all":
        logger.info(f"Filtered items by category \"{category.strip()}\": {len(items)} items")

    return {
        "items": [i.model_dump() for i in items],
        "categories": categories,
        "source": "square",
        "count": len(items),
    }


async def list_categories_from_square(square_client=None, disabled_ids=frozenset()) -> dict:
    """Unique display categories actually assigned to Square items."""
    catalog, _category_map, normalized = await load_catalog(square_client)
    items = build_menu_items(
        catalog.items,
        normalized,
        catalog.images,
        disabled_ids,
        modifier_lists=catalog.modifier_lists,
        modifiers=catalog.modifiers,
    )
    categories = categories_in_use(items)
    return {"categories": categories, "count": len(categories)}


async def normalized_catalog_view(square_client=None) -> dict:
    catalog, category_map, normalized = await load_catalog(square_client)
    return {
        "categoryMap": dict(category_map),
        "items": [n.model_dump(by_alias=True) for n in normalized],
        "count": len(normalized),
    }
