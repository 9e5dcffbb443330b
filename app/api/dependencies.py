from fastapi import Header, HTTPException

from app.config import settings
from app.services.disabled_items import DisabledItemStore
from app.square.client import SquareClient


def get_square_client() -> SquareClient:
    return SquareClient()


def get_disabled_item_store() -> DisabledItemStore:
    return DisabledItemStore()


def require_admin(x_admin_key: str | None = Header(default=None)):
    # Without a configured key the admin routes stay closed
    if not settings.ADMIN_API_KEY:
        raise HTTPException(status_code=503, detail="Admin access is not configured")
    if x_admin_key != settings.ADMIN_API_KEY:
        raise HTTPException(status_code=401, detail="Admin access required")
