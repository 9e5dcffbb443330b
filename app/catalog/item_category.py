"""Classify menu categories as food or drinks."""

# Matched case-insensitively as substrings of the category name
DRINKS_CATEGORIES = [
    "Coffee",
    "Tea",
    "Beverages",
    "Drinks",
    "Juice",
    "Smoothie",
    "Cold Drinks",
    "Hot Drinks",
    "Iced Drinks",
]


def is_drinks_category(category: str | None) -> bool:
    if not category:
        return False
    normalized = category.lower().strip()
    return any(dc.lower() in normalized for dc in DRINKS_CATEGORIES)


def item_type_from_category(category: str | None) -> str:
    return "drinks" if is_drinks_category(category) else "food"
