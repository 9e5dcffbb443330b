"""
Field access for Square catalog payloads.

The same fact can live under a camelCase path (SDK objects) or a
snake_case path (raw REST JSON). Every logical field is an ordered
tuple of paths; `probe` returns the value at the first path that
resolves to something other than None.
"""
from typing import Any

Path = tuple[str, ...]


def get_path(obj: Any, path: Path) -> Any:
    current = obj
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def probe(obj: Any, paths: tuple[Path, ...]) -> Any:
    for path in paths:
        value = get_path(obj, path)
        if value is not None:
            return value
    return None


# ----------------------------
# Probe lists, in priority order
# ----------------------------

CATEGORY_NAME: tuple[Path, ...] = (
    ("categoryData", "name"),
    ("category_data", "name"),
)

ITEM_NAME: tuple[Path, ...] = (
    ("itemData", "name"),
    ("item_data", "name"),
)

ITEM_DESCRIPTION: tuple[Path, ...] = (
    ("itemData", "description"),
    ("item_data", "description"),
)

ITEM_CATEGORIES: tuple[Path, ...] = (
    ("itemData", "categories"),
    ("item_data", "categories"),
)

ITEM_VARIATIONS: tuple[Path, ...] = (
    ("itemData", "variations"),
    ("item_data", "variations"),
)

ITEM_IMAGE_IDS: tuple[Path, ...] = (
    ("itemData", "imageIds"),
    ("item_data", "image_ids"),
)

VARIATION_CATEGORY_ID: tuple[Path, ...] = (
    ("item_variation_data", "category_id"),
    ("itemVariationData", "categoryId"),
    ("itemVariationData", "category_id"),
)

VARIATION_ITEM_ID: tuple[Path, ...] = (
    ("item_variation_data", "item_id"),
    ("itemVariationData", "itemId"),
    ("itemVariationData", "item_id"),
)

VARIATION_PRICE_AMOUNT: tuple[Path, ...] = (
    ("itemVariationData", "priceMoney", "amount"),
    ("item_variation_data", "price_money", "amount"),
)

VARIATION_IMAGE_IDS: tuple[Path, ...] = (
    ("itemVariationData", "imageIds"),
    ("item_variation_data", "image_ids"),
)

IMAGE_URL: tuple[Path, ...] = (
    ("imageData", "url"),
    ("image_data", "url"),
    ("url",),
)

IS_DELETED: tuple[Path, ...] = (
    ("isDeleted",),
    ("is_deleted",),
)

# Modifiers. Item entries may also be a bare list id string.

ITEM_MODIFIER_LIST_INFO: tuple[Path, ...] = (
    ("itemData", "modifierListInfo"),
    ("item_data", "modifier_list_info"),
)

ITEM_MODIFIER_LISTS: tuple[Path, ...] = (
    ("itemData", "modifierLists"),
    ("item_data", "modifier_lists"),
)

MODIFIER_LIST_REF_ID: tuple[Path, ...] = (
    ("modifierListId",),
    ("modifier_list_id",),
    ("id",),
)

MODIFIER_LIST_REF_MIN_SELECTED: tuple[Path, ...] = (
    ("minSelectedModifiers",),
    ("min_selected_modifiers",),
)

MODIFIER_LIST_NAME: tuple[Path, ...] = (
    ("modifierListData", "name"),
    ("modifier_list_data", "name"),
)

MODIFIER_LIST_SELECTION_TYPE: tuple[Path, ...] = (
    ("modifierListData", "selectionType"),
    ("modifier_list_data", "selection_type"),
)

MODIFIER_LIST_MODIFIERS: tuple[Path, ...] = (
    ("modifierListData", "modifiers"),
    ("modifier_list_data", "modifiers"),
)

MODIFIER_REF_ID: tuple[Path, ...] = (
    ("modifierId",),
    ("modifier_id",),
    ("id",),
)

MODIFIER_DATA: tuple[Path, ...] = (
    ("modifierData",),
    ("modifier_data",),
)

MODIFIER_PRICE_AMOUNT: tuple[Path, ...] = (
    ("priceMoney", "amount"),
    ("price_money", "amount"),
)
