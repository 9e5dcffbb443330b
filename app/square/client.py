import logging
import requests
from app.config import settings

logger = logging.getLogger(__name__)

SQUARE_PRODUCTION_URL = "https://connect.squareup.com"
SQUARE_SANDBOX_URL = "https://connect.squareupsandbox.com"
REQUEST_TIMEOUT = 30


class SquareApiError(Exception):
    def __init__(self, message: str, status_code: int = 500, errors: list | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "statusCode": self.status_code,
            "errors": self.errors,
        }


def detect_square_environment(token: str | None = None, explicit: str | None = None, app_env: str | None = None) -> str:
    """
    Explicit setting wins, then the token prefix, then the app environment.
    Sandbox tokens look like "EAAAl..." or "sandbox-...", production ones
    like "sq0at-..." or any other "EAAA...".
    """
    if explicit:
        return "production" if explicit.lower() == "production" else "sandbox"

    token = token or ""
    if token.startswith("sandbox-") or token.startswith("EAAAl"):
        return "sandbox"
    if token.startswith("sq0at-") or token.startswith("EAAA"):
        return "production"

    return "production" if app_env == "production" else "sandbox"


class SquareClient:
    def __init__(self, access_token=None, environment=None, base_url=None, session=None):
        self.token = access_token or settings.SQUARE_ACCESS_TOKEN or ""
        self.environment = environment or detect_square_environment(
            self.token,
            explicit=settings.SQUARE_ENVIRONMENT,
            app_env=settings.ENVIRONMENT,
        )
        self.base_url = base_url or (
            SQUARE_PRODUCTION_URL if self.environment == "production" else SQUARE_SANDBOX_URL
        )
        self.session = session or requests.Session()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Square-Version": settings.SQUARE_API_VERSION,
        }

    def _request(self, method: str, endpoint: str, params=None, payload=None) -> dict:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                params=params,
                json=payload,
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error(f"Square API request failed ({method} {endpoint}): {e}")
            raise SquareApiError(f"Square API request failed: {e}", status_code=502) from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code >= 400:
            errors = body.get("errors", []) if isinstance(body, dict) else []
            detail = errors[0].get("detail") if errors and isinstance(errors[0], dict) else None
            logger.error(f"Square API Error (status {response.status_code}): {response.text}")
            raise SquareApiError(
                detail or f"Square API error (status {response.status_code})",
                status_code=response.status_code,
                errors=errors,
            )

        return body if isinstance(body, dict) else {}

    @staticmethod
    def _page(body: dict) -> dict:
        return {
            "objects": body.get("objects") or [],
            "cursor": body.get("cursor") or body.get("next_cursor") or None,
        }

    def search_catalog_objects(self, types, cursor=None, include_related_objects=False) -> dict:
        """
        POST /v2/catalog/search for one page of catalog objects.
        """
        payload = {
            "object_types": list(types),
            "include_related_objects": include_related_objects,
        }
        if cursor:
            payload["cursor"] = cursor

        logger.debug(f"Square catalog search: types={payload['object_types']} cursor={cursor or 'none'}")
        return self._page(self._request("POST", "/v2/catalog/search", payload=payload))

    def list_catalog(self, types, cursor=None) -> dict:
        params = {"types": ",".join(types) if not isinstance(types, str) else types}
        if cursor:
            params["cursor"] = cursor
        return self._page(self._request("GET", "/v2/catalog/list", params=params))

    def list_locations(self) -> list:
        body = self._request("GET", "/v2/locations")
        return body.get("locations") or []

    def get_location(self, location_id: str) -> dict | None:
        for location in self.list_locations():
            if location.get("id") == location_id:
                return location
        return None
