import logging
from collections.abc import Collection, Iterable, Mapping, Sequence
from typing import Optional

from app.catalog.item_category import item_type_from_category
from app.catalog.models import (
    CatalogImage,
    CatalogItem,
    CatalogModifier,
    CatalogModifierList,
    MenuItem,
    ModifierList,
    NormalizedItem,
)
from app.catalog.modifiers import build_modifier_list_map, build_modifier_map, item_modifier_lists
from app.square.money import square_money_to_dollars

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"


def build_image_map(images: Iterable[CatalogImage]) -> dict[str, str]:
    image_map: dict[str, str] = {}
    for img in images:
        url = img.url
        if img.id and isinstance(url, str) and url:
            image_map[img.id] = url
    return image_map


def item_price(item: CatalogItem) -> float:
    variations = item.variations
    if not variations:
        return 0.0
    return square_money_to_dollars(variations[0].price_amount)


def item_image_url(item: CatalogItem, image_map: Mapping[str, str]) -> Optional[str]:
    image_ids = item.image_ids
    if not image_ids:
        variations = item.variations
        image_ids = variations[0].image_ids if variations else []
    if not image_ids:
        return None
    first = image_ids[0]
    return image_map.get(first) if isinstance(first, str) else None


def build_menu_item(
    item: CatalogItem,
    normalized: NormalizedItem,
    image_map: Mapping[str, str],
    disabled_ids: Collection[str],
    modifier_list_map: Optional[Mapping[str, ModifierList]] = None,
    log: logging.Logger = logger,
) -> MenuItem:
    """
    Attach price, availability and presentation fields to a normalized item.

    The first resolved category name is the display category; items with
    none land in "Uncategorized".
    """
    if normalized.category_names:
        category = normalized.category_names[0]
    else:
        category = UNCATEGORIZED
        if normalized.category_ids:
            log.debug(
                'Item "%s" has category ids %s but none are in the category map',
                normalized.name,
                list(normalized.category_ids),
            )

    if not item.variations:
        log.debug('Item "%s" (%s) has no variations', normalized.name, item.id)

    description = item.description
    if not isinstance(description, str) or not description:
        description = None

    is_disabled = bool(item.id) and item.id in disabled_ids

    return MenuItem(
        id=item.id,
        name=normalized.name,
        description=description,
        price=item_price(item),
        category=category,
        category_id=normalized.category_ids[0] if normalized.category_ids else None,
        image_url=item_image_url(item, image_map),
        available=not item.is_deleted and not is_disabled,
        square_id=item.id,
        item_type=item_type_from_category(category),
        modifier_lists=item_modifier_lists(item, modifier_list_map or {}, log=log),
    )


def build_menu_items(
    items: Sequence[CatalogItem],
    normalized: Sequence[NormalizedItem],
    images: Iterable[CatalogImage] = (),
    disabled_ids: Collection[str] = frozenset(),
    modifier_lists: Iterable[CatalogModifierList] = (),
    modifiers: Iterable[CatalogModifier] = (),
    log: logging.Logger = logger,
) -> list[MenuItem]:
    image_map = build_image_map(images)
    modifier_list_map = build_modifier_list_map(
        modifier_lists, build_modifier_map(modifiers, log=log), log=log
    )
    return [
        build_menu_item(item, norm, image_map, disabled_ids, modifier_list_map, log=log)
        for item, norm in zip(items, normalized)
    ]


def _sort_categories(names: Iterable[str]) -> list[str]:
    unique = {n.strip() for n in names if n and n.strip()}
    return sorted(unique, key=lambda n: (n == UNCATEGORIZED, n))


def menu_categories(menu_items: Iterable[MenuItem], category_map: Mapping[str, str]) -> list[str]:
    """Categories used by items plus every category in the catalog, "Uncategorized" last."""
    from_items = [m.category for m in menu_items]
    return _sort_categories([*from_items, *category_map.values()])


def categories_in_use(menu_items: Iterable[MenuItem]) -> list[str]:
    return sorted({m.category.strip() for m in menu_items if m.category and m.category.strip()})


def filter_by_category(menu_items: Iterable[MenuItem], category: Optional[str]) -> list[MenuItem]:
    if not category or category == "all":
        return list(menu_items)
    wanted = category.strip()
    return [m for m in menu_items if m.category.strip() == wanted]
