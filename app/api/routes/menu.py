from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_disabled_item_store, get_square_client
from app.api.errors import fatal_error_response, square_error_response, square_not_configured
from app.config import is_square_configured
from app.services.menu_service import build_menu
from app.square.client import SquareApiError

router = APIRouter()

EMPTY = {"items": [], "count": 0}


@router.get("/")
async def get_menu(
    category: str | None = None,
    square_client=Depends(get_square_client),
    disabled_store=Depends(get_disabled_item_store),
):
    """
    Menu items from the Square catalog, optionally filtered by category.
    Items disabled by an admin are returned with available=false.
    """
    if not is_square_configured():
        return square_not_configured(**EMPTY)

    try:
        disabled_ids = await disabled_store.square_ids()
        return await build_menu(square_client, disabled_ids, category)
    except SquareApiError as e:
        return square_error_response(e, **EMPTY)
    except Exception as e:
        return fatal_error_response("Failed to fetch menu items", e, **EMPTY)


@router.post("/")
async def create_menu_item():
    return JSONResponse(
        {"error": "Menu items are managed through Square POS. Use Square Dashboard to add/edit items."},
        status_code=405,
    )
