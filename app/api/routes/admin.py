from fastapi import APIRouter, Depends

from app.api.dependencies import get_disabled_item_store, get_square_client, require_admin
from app.api.errors import fatal_error_response, square_error_response, square_not_configured
from app.config import is_square_configured
from app.services.menu_service import list_categories_from_square
from app.square.client import SquareApiError

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/categories-from-square")
async def categories_from_square(
    square_client=Depends(get_square_client),
    disabled_store=Depends(get_disabled_item_store),
):
    if not is_square_configured():
        return square_not_configured(categories=[])

    try:
        disabled_ids = await disabled_store.square_ids()
        return await list_categories_from_square(square_client, disabled_ids)
    except SquareApiError as e:
        return square_error_response(e, categories=[])
    except Exception as e:
        return fatal_error_response("Failed to fetch categories from menu items", e, categories=[])


@router.get("/disabled-items")
async def list_disabled_items(disabled_store=Depends(get_disabled_item_store)):
    ids = sorted(await disabled_store.square_ids())
    return {"square_ids": ids, "count": len(ids)}


@router.post("/disabled-items/{square_id}")
async def disable_item(square_id: str, disabled_store=Depends(get_disabled_item_store)):
    await disabled_store.disable(square_id)
    return {"square_id": square_id, "available": False}


@router.delete("/disabled-items/{square_id}")
async def enable_item(square_id: str, disabled_store=Depends(get_disabled_item_store)):
    removed = await disabled_store.enable(square_id)
    return {"square_id": square_id, "available": True, "removed": removed}
