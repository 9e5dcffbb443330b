import pytest

from app.services.disabled_items import DisabledItemStore


class FakeCursor:
    def __init__(self, docs):
        self.docs = list(docs)

    def __aiter__(self):
        self._it = iter(self.docs)
        return self

    async def __anext__(self):
        try:
            return next(self._it)
        except StopIteration:
            raise StopAsyncIteration


class FakeDeleteResult:
    def __init__(self, deleted_count):
        self.deleted_count = deleted_count


class FakeCollection:
    def __init__(self):
        self.docs = {}

    def find(self, query, projection=None):
        return FakeCursor(self.docs.values())

    async def update_one(self, query, update, upsert=False):
        doc = self.docs.setdefault(query["_id"], {"_id": query["_id"], **update.get("$setOnInsert", {})})
        doc.update(update["$set"])

    async def delete_one(self, query):
        return FakeDeleteResult(1 if self.docs.pop(query["_id"], None) else 0)


class FakeDatabase:
    def __init__(self):
        self.disabled_menu_items = FakeCollection()


@pytest.mark.asyncio
async def test_disable_enable_roundtrip():
    store = DisabledItemStore(FakeDatabase())

    await store.disable("I1")
    await store.disable("I2")
    await store.disable("I1")
    assert await store.square_ids() == {"I1", "I2"}

    assert await store.enable("I1") is True
    assert await store.enable("I1") is False
    assert await store.square_ids() == {"I2"}


@pytest.mark.asyncio
async def test_disable_keeps_first_timestamp():
    database = FakeDatabase()
    store = DisabledItemStore(database)

    await store.disable("I1")
    first = database.disabled_menu_items.docs["I1"]["disabled_at"]
    await store.disable("I1")

    assert database.disabled_menu_items.docs["I1"]["disabled_at"] == first
