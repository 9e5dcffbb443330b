import asyncio
import logging

from app.config import settings
from app.square.client import SquareClient

logger = logging.getLogger(__name__)

MENU_OBJECT_TYPES = ("ITEM", "CATEGORY", "ITEM_VARIATION", "IMAGE", "MODIFIER_LIST", "MODIFIER")


async def fetch_all_catalog_objects(
    client: SquareClient | None = None,
    types=MENU_OBJECT_TYPES,
    include_related_objects: bool = True,
    max_pages: int | None = None,
) -> list[dict]:
    """
    Fetch ALL catalog objects of the given types, following the cursor
    over every page. Objects come back first-page-first.

    Any page failure raises; a partial catalog is never returned.
    """
    if client is None:
        client = SquareClient()
    if max_pages is None:
        max_pages = settings.SQUARE_MAX_PAGES

    objects = []
    cursor = None
    page_number = 0

    while True:
        page_number += 1
        if page_number > max_pages:
            logger.warning(f"Reached max pages ({max_pages}) for catalog fetch, stopping pagination")
            break

        # requests blocks, so each page is fetched off the event loop
        page = await asyncio.to_thread(
            client.search_catalog_objects,
            types,
            cursor=cursor,
            include_related_objects=include_related_objects,
        )
        page_objects = page.get("objects") or []
        objects.extend(page_objects)

        logger.debug(f"Catalog page {page_number}: {len(page_objects)} objects (total: {len(objects)})")

        cursor = page.get("cursor")
        if not cursor:
            break

    logger.info(f"Fetched {len(objects)} catalog objects across {min(page_number, max_pages)} page(s)")
    return objects
