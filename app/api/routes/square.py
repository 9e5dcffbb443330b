import asyncio

from fastapi import APIRouter, Depends

from app.api.dependencies import get_square_client
from app.api.errors import fatal_error_response, square_error_response, square_not_configured
from app.config import is_square_configured, settings
from app.services.menu_service import normalized_catalog_view
from app.square.client import SquareApiError

router = APIRouter()


@router.get("/catalog/normalized")
async def get_normalized_catalog(square_client=Depends(get_square_client)):
    """Category map and normalized items exactly as the parser produced them."""
    if not is_square_configured():
        return square_not_configured(items=[], count=0)

    try:
        return await normalized_catalog_view(square_client)
    except SquareApiError as e:
        return square_error_response(e, items=[], count=0)
    except Exception as e:
        return fatal_error_response("Failed to fetch catalog", e, items=[], count=0)


@router.get("/location")
async def get_location(square_client=Depends(get_square_client)):
    if not is_square_configured():
        return square_not_configured()

    try:
        location = await asyncio.to_thread(square_client.get_location, settings.SQUARE_LOCATION_ID)
    except SquareApiError as e:
        return square_error_response(e)

    return {"location": location, "environment": square_client.environment}
