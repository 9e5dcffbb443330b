import logging
from fastapi.responses import JSONResponse

from app.square.client import SquareApiError

logger = logging.getLogger(__name__)


def square_not_configured(**extra) -> JSONResponse:
    return JSONResponse(
        {"error": True, "message": "Square POS is not configured", "source": "square", **extra},
        status_code=503,
    )


def square_error_response(e: SquareApiError, **extra) -> JSONResponse:
    logger.error(f"Square API Error: {e.message} (status {e.status_code}) {e.errors}")
    return JSONResponse(
        {
            "error": True,
            "source": "square",
            "message": e.message or "Square API error",
            "errors": e.errors,
            "statusCode": e.status_code,
            **extra,
        },
        status_code=e.status_code or 500,
    )


def fatal_error_response(message: str, e: Exception, **extra) -> JSONResponse:
    logger.exception(f"{message}: {e}")
    return JSONResponse(
        {"error": True, "message": message, "details": str(e) or "Unknown error", **extra},
        status_code=500,
    )
