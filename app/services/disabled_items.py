import logging
from datetime import datetime, timezone

from app.database.mongo import db

logger = logging.getLogger(__name__)


class DisabledItemStore:
    """Square item ids hidden from the public menu, kept in Mongo."""

    def __init__(self, database=None):
        self.collection = (database if database is not None else db).disabled_menu_items

    async def square_ids(self) -> set[str]:
        ids = set()
        async for doc in self.collection.find({}, {"square_id": 1}):
            square_id = doc.get("square_id")
            if square_id:
                ids.add(square_id)
        return ids

    async def disable(self, square_id: str) -> None:
        await self.collection.update_one(
            {"_id": square_id},
            {
                "$set": {"square_id": square_id},
                "$setOnInsert": {"disabled_at": datetime.now(timezone.utc)},
            },
            upsert=True,
        )
        logger.info(f"Disabled menu item {square_id}")

    async def enable(self, square_id: str) -> bool:
        result = await self.collection.delete_one({"_id": square_id})
        if result.deleted_count:
            logger.info(f"Re-enabled menu item {square_id}")
        return bool(result.deleted_count)
