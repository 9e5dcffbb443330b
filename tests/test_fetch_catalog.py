import asyncio
import time

import pytest

from app.square.client import SquareApiError
from app.square.fetch_catalog import fetch_all_catalog_objects
from conftest import FakeSquareClient


@pytest.mark.asyncio
async def test_fetches_every_page_in_order():
    client = FakeSquareClient(pages=[[{"id": "a"}, {"id": "b"}], [], [{"id": "c"}]])

    objects = await fetch_all_catalog_objects(client, max_pages=10)

    assert [o["id"] for o in objects] == ["a", "b", "c"]
    assert client.calls == [None, "1", "2"]


@pytest.mark.asyncio
async def test_single_page_without_cursor():
    client = FakeSquareClient(pages=[[{"id": "a"}]])
    assert await fetch_all_catalog_objects(client, max_pages=10) == [{"id": "a"}]
    assert client.calls == [None]


@pytest.mark.asyncio
async def test_stops_at_max_pages(caplog):
    client = FakeSquareClient(pages=[[{"id": str(i)}] for i in range(5)])

    objects = await fetch_all_catalog_objects(client, max_pages=2)

    assert [o["id"] for o in objects] == ["0", "1"]
    assert len(client.calls) == 2
    assert any("max pages" in r.message for r in caplog.records)


@pytest.mark.asyncio
async def test_page_failure_propagates():
    client = FakeSquareClient(error=SquareApiError("Unauthorized", status_code=401))
    with pytest.raises(SquareApiError):
        await fetch_all_catalog_objects(client, max_pages=10)


class SlowSquareClient(FakeSquareClient):
    def search_catalog_objects(self, types, cursor=None, include_related_objects=False):
        time.sleep(0.3)
        return super().search_catalog_objects(types, cursor, include_related_objects)


@pytest.mark.asyncio
async def test_page_requests_do_not_block_the_event_loop():
    client = SlowSquareClient(pages=[[{"id": "a"}], [{"id": "b"}]])
    gaps = []

    async def ticker():
        last = time.monotonic()
        for _ in range(10):
            await asyncio.sleep(0.05)
            now = time.monotonic()
            gaps.append(now - last)
            last = now

    objects, _ = await asyncio.gather(fetch_all_catalog_objects(client, max_pages=10), ticker())

    assert [o["id"] for o in objects] == ["a", "b"]
    assert max(gaps) < 0.2
