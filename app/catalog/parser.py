"""
Square catalog parser.

Turns a flat list of catalog objects (as returned page by page from the
catalog search endpoint) into a category map and a list of normalized
items with resolved category ids and names.

Category resolution order for an item:
  1. the item's own categories array
  2. the first embedded variation carrying a category id
  3. the first top-level ITEM_VARIATION for this item carrying a category id
The first rule that yields anything wins; rules are never merged.
"""
import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Optional

from app.catalog.models import (
    CatalogCategory,
    CatalogImage,
    CatalogItem,
    CatalogItemVariation,
    CatalogModifier,
    CatalogModifierList,
    CatalogObject,
    NormalizedItem,
    PartitionedCatalog,
)

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_NAME = "Unknown"

CategoryMap = Mapping[str, str]

_OBJECT_TYPES = {
    "ITEM": CatalogItem,
    "CATEGORY": CatalogCategory,
    "ITEM_VARIATION": CatalogItemVariation,
    "IMAGE": CatalogImage,
    "MODIFIER": CatalogModifier,
    "MODIFIER_LIST": CatalogModifierList,
}


def separate_catalog_objects(
    all_objects: Iterable[dict[str, Any]],
    log: logging.Logger = logger,
) -> PartitionedCatalog:
    """Split catalog objects into typed buckets, keeping input order."""
    buckets: dict[str, list[CatalogObject]] = {t: [] for t in _OBJECT_TYPES}
    dropped = 0

    for obj in all_objects:
        obj_type = obj.get("type") if isinstance(obj, dict) else None
        wrapper = _OBJECT_TYPES.get(obj_type) if isinstance(obj_type, str) else None
        if wrapper is None:
            dropped += 1
            continue
        buckets[obj_type].append(wrapper(obj))

    if dropped:
        log.debug("Dropped %d catalog objects of unhandled type", dropped)

    return PartitionedCatalog(
        items=buckets["ITEM"],
        categories=buckets["CATEGORY"],
        item_variations=buckets["ITEM_VARIATION"],
        images=buckets["IMAGE"],
        modifiers=buckets["MODIFIER"],
        modifier_lists=buckets["MODIFIER_LIST"],
    )


def build_category_map(
    categories: Iterable[CatalogCategory],
    log: logging.Logger = logger,
) -> CategoryMap:
    """
    Build categoryId -> display name.

    Categories without an id or a usable name are skipped. Later
    duplicates overwrite earlier ones.
    """
    category_map: dict[str, str] = {}

    for cat in categories:
        name = cat.name
        if not isinstance(name, str) or not cat.id:
            continue
        name = name.strip()
        if not name:
            continue
        category_map[cat.id] = name
        log.debug('Mapped category: %s -> "%s"', cat.id, name)

    log.debug("Category map built: %d categories", len(category_map))
    return MappingProxyType(category_map)


def index_variations_by_item(
    variations: Iterable[CatalogItemVariation],
) -> dict[Any, list[CatalogItemVariation]]:
    """Group top-level variations by the item they reference, keeping order."""
    index: dict[Any, list[CatalogItemVariation]] = {}
    for variation in variations:
        item_id = variation.item_id
        if not isinstance(item_id, str):
            continue
        index.setdefault(item_id, []).append(variation)
    return index


def _ids_from_categories_array(categories: Any) -> list[str]:
    if not isinstance(categories, list) or not categories:
        return []
    ids = []
    for entry in categories:
        if isinstance(entry, dict):
            entry = entry.get("id")
        if isinstance(entry, str):
            ids.append(entry)
    return ids


def _first_variation_category(variations: Iterable[CatalogItemVariation]) -> Optional[str]:
    for variation in variations:
        category_id = variation.category_id
        if category_id:
            return category_id
    return None


def extract_category_ids(
    item: CatalogItem,
    item_variations: Sequence[CatalogItemVariation],
    variations_by_item: Optional[Mapping[Any, list[CatalogItemVariation]]] = None,
    log: logging.Logger = logger,
) -> list[str]:
    # Rule 1: categories array on the item itself
    ids = _ids_from_categories_array(item.categories)
    if ids:
        log.debug('Item "%s" has categories array: %s', item.name or item.id, ids)
        return ids

    # Rule 2: embedded variations
    category_id = _first_variation_category(item.variations)
    if category_id:
        log.debug("Found category in embedded variation: %s", category_id)
        return [category_id]

    # Rule 3: top-level ITEM_VARIATION objects referencing this item
    if not item_variations:
        return []

    if variations_by_item is not None:
        own_variations = variations_by_item.get(item.id, []) if item.id else []
    else:
        own_variations = [
            v for v in item_variations
            if isinstance(v.item_id, str) and v.item_id == item.id
        ]

    category_id = _first_variation_category(own_variations)
    if category_id:
        log.debug("Found category in separate variation object: %s", category_id)
        return [category_id]

    return []


def resolve_category_names(category_ids: Iterable[str], category_map: CategoryMap) -> list[str]:
    return [category_map[cid] for cid in category_ids if cid in category_map]


def resolve_item_name(item: CatalogItem) -> str:
    for candidate in (item.name, item.id):
        if isinstance(candidate, str) and candidate:
            return candidate
    return UNKNOWN_ITEM_NAME


def normalize_item(
    item: CatalogItem,
    category_map: CategoryMap,
    item_variations: Sequence[CatalogItemVariation],
    variations_by_item: Optional[Mapping[Any, list[CatalogItemVariation]]] = None,
    log: logging.Logger = logger,
) -> NormalizedItem:
    category_ids = extract_category_ids(item, item_variations, variations_by_item, log=log)
    category_names = resolve_category_names(category_ids, category_map)

    return NormalizedItem(
        id=item.id,
        name=resolve_item_name(item),
        category_ids=tuple(category_ids),
        category_names=tuple(category_names),
    )


def normalize_catalog(
    catalog: PartitionedCatalog,
    log: logging.Logger = logger,
) -> tuple[CategoryMap, list[NormalizedItem]]:
    """Category map plus one normalized item per ITEM object, in input order."""
    category_map = build_category_map(catalog.categories, log=log)
    variations_by_item = index_variations_by_item(catalog.item_variations)

    normalized = [
        normalize_item(item, category_map, catalog.item_variations, variations_by_item, log=log)
        for item in catalog.items
    ]

    log.debug(
        "Normalized %d items (%d with categories)",
        len(normalized),
        sum(1 for n in normalized if n.category_names),
    )
    return category_map, normalized
