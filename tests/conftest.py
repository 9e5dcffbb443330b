"""Shared fixtures: sample Square catalog payloads and fakes for collaborators."""

import pytest


class FakeSquareClient:
    """Serves pre-built catalog pages; records the cursors it was asked for."""

    def __init__(self, pages=None, error=None, locations=None):
        self.pages = pages or [[]]
        self.error = error
        self.locations = locations or []
        self.calls = []
        self.environment = "sandbox"

    def search_catalog_objects(self, types, cursor=None, include_related_objects=False):
        self.calls.append(cursor)
        if self.error is not None:
            raise self.error
        index = int(cursor) if cursor else 0
        next_cursor = str(index + 1) if index + 1 < len(self.pages) else None
        return {"objects": self.pages[index], "cursor": next_cursor}

    def get_location(self, location_id):
        for location in self.locations:
            if location.get("id") == location_id:
                return location
        return None


class FakeDisabledStore:
    def __init__(self, ids=None):
        self.ids = set(ids or [])

    async def square_ids(self):
        return set(self.ids)

    async def disable(self, square_id):
        self.ids.add(square_id)

    async def enable(self, square_id):
        if square_id in self.ids:
            self.ids.discard(square_id)
            return True
        return False


def category(cid, name, snake=False):
    key = "category_data" if snake else "categoryData"
    return {"type": "CATEGORY", "id": cid, key: {"name": name}}


def item(iid, name=None, categories=None, variations=None, image_ids=None, modifier_lists=None, **extra):
    data = {}
    if name is not None:
        data["name"] = name
    if categories is not None:
        data["categories"] = categories
    if variations is not None:
        data["variations"] = variations
    if image_ids is not None:
        data["imageIds"] = image_ids
    if modifier_lists is not None:
        data["modifierListInfo"] = {"modifierLists": modifier_lists}
    obj = {"type": "ITEM", "id": iid, **extra}
    if data:
        obj["itemData"] = data
    return obj


def modifier(mid, name, price=None):
    data = {"name": name}
    if price is not None:
        data["priceMoney"] = {"amount": price, "currency": "USD"}
    return {"type": "MODIFIER", "id": mid, "modifierData": data}


def modifier_list(lid, name, modifiers=(), selection_type=None):
    data = {"name": name, "modifiers": list(modifiers)}
    if selection_type is not None:
        data["selectionType"] = selection_type
    return {"type": "MODIFIER_LIST", "id": lid, "modifierListData": data}


def variation(vid, item_id=None, category_id=None, price=None):
    data = {}
    if item_id is not None:
        data["itemId"] = item_id
    if category_id is not None:
        data["categoryId"] = category_id
    if price is not None:
        data["priceMoney"] = {"amount": price, "currency": "USD"}
    return {"type": "ITEM_VARIATION", "id": vid, "itemVariationData": data}


@pytest.fixture
def cafe_catalog():
    """A small catalog exercising every category resolution path."""
    return [
        category("C1", " Coffee "),
        category("C2", "Pastries", snake=True),
        category("C3", "Sandwiches"),
        item(
            "I1",
            "Latte",
            categories=[{"id": "C1"}],
            variations=[variation("V1", "I1", price=450)],
            image_ids=["IMG1"],
            modifier_lists=[{"modifierListId": "ML1", "enabled": True}],
        ),
        item("I2", "Croissant", variations=[variation("V2", "I2", category_id="C2", price=325)]),
        item("I3", "Club Sandwich"),
        variation("V3", "I3", category_id="C3", price=900),
        item("I4", "Mystery"),
        {"type": "IMAGE", "id": "IMG1", "imageData": {"url": "https://img.example/latte.jpg"}},
        modifier_list("ML1", "Milk", [{"modifierId": "M1"}]),
        modifier("M1", "Oat Milk", price=75),
        {"type": "TAX", "id": "T1"},
    ]
