"""Client for the centers REST API."""
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

import requests

from center_locator.core.config import API_URL, REQUEST_TIMEOUT
from center_locator.core.models import (
    Center,
    Country,
    District,
    FetchError,
    FetchResult,
    State,
)
from center_locator.utils.logging import log_error
from center_locator.utils.timing import Timer


class CenterApiError(Exception):
    """Raised when a centers API call fails for any reason."""

    def __init__(self, message: str, status_code: Optional[int] = None, path: str = ""):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.path = path


class CenterService:
    """Read operations against the centers API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the service.

        Args:
            base_url: API root (defaults to API_URL)
            session: HTTP session; one is created when omitted so cookies persist
            timeout: Per-request timeout in seconds
        """
        self.base_url = (base_url or API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or REQUEST_TIMEOUT

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Issue a request and return the ``data`` member of the envelope."""
        url = f"{self.base_url}{path}"
        try:
            with Timer("centers_api", method=method, path=path):
                response = self.session.request(
                    method, url, json=json, params=params, timeout=self.timeout
                )
                response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise CenterApiError(f"{method} {path} returned HTTP {status}", status, path) from e
        except requests.exceptions.RequestException as e:
            raise CenterApiError(f"{method} {path} failed: {e}", None, path) from e

        try:
            body = response.json()
        except ValueError as e:
            raise CenterApiError(f"{method} {path} returned invalid JSON", response.status_code, path) from e

        if not isinstance(body, dict) or body.get("success") is False:
            message = body.get("message") if isinstance(body, dict) else None
            raise CenterApiError(message or f"{method} {path} was not successful", response.status_code, path)

        return body.get("data")

    def _decode(self, path: str, data: Any, member: str, factory: Callable[[Dict[str, Any]], Any]) -> List[Any]:
        """Build ``factory`` objects from ``data[member]``, rejecting malformed payloads."""
        try:
            return [factory(item) for item in (data or {}).get(member) or []]
        except (ValueError, TypeError, AttributeError) as e:
            raise CenterApiError(f"{path} returned malformed {member}: {e}", None, path) from e

    def list_countries(self) -> List[Country]:
        """Get all countries with their center counts."""
        path = "/centers/countries"
        return self._decode(path, self._request("GET", path), "countries", Country.from_dict)

    def list_states(self, country: str) -> List[State]:
        """Get the states of a country with their center counts."""
        path = f"/centers/countries-with-states/{quote(country, safe='')}"
        return self._decode(path, self._request("GET", path), "states", State.from_dict)

    def list_districts(self, country: str, state: str) -> List[District]:
        """Get the districts of a state with their center counts."""
        path = "/centers/districts"
        data = self._request("POST", path, json={"country": country, "state": state})
        return self._decode(path, data, "districts", District.from_dict)

    def list_centers_in_district(self, country: str, state: str, district: str) -> List[Center]:
        """Get every center in a district."""
        path = "/centers/district/center-list"
        data = self._request(
            "POST", path, json={"country": country, "state": state, "district": district}
        )
        return self._decode(path, data, "centers", Center.from_dict)

    def get_center(self, center_id: str) -> Center:
        """Get a single center by id."""
        data = self._request("GET", f"/centers/center/{quote(str(center_id), safe='')}")
        if not isinstance(data, dict):
            raise CenterApiError(f"Center {center_id} not found", 404, "/centers/center")
        return Center.from_dict(data)

    def find_nearby_centers(self, latitude: float, longitude: float) -> List[Center]:
        """
        Find centers near a point.

        The backend searches a fixed radius and falls back to the single
        nearest center when nothing lies inside it.
        """
        path = "/centers/find-centers-nearby"
        data = self._request("POST", path, json={"latitude": latitude, "longitude": longitude})
        return self._decode(path, data, "centers", Center.from_dict)

    def search_centers(self, query: str, **filters: Any) -> List[Center]:
        """Full-text search over centers, optionally narrowed by filters."""
        params = {"q": query}
        params.update({k: v for k, v in filters.items() if v not in (None, "")})
        path = "/centers/search"
        return self._decode(path, self._request("GET", path, params=params), "results", Center.from_dict)


def fetch(operation: Callable[..., Any], *args: Any, error_message: str = "Request failed. Please try again.", **kwargs: Any) -> FetchResult:
    """
    Run a service operation and fold its outcome into a FetchResult.

    Args:
        operation: Bound CenterService method (or any callable raising CenterApiError)
        *args: Positional arguments for the operation
        error_message: User-facing message used when the call fails
        **kwargs: Keyword arguments for the operation

    Returns:
        FetchResult with ``data`` on success or ``error`` on failure
    """
    try:
        return FetchResult.success(operation(*args, **kwargs))
    except CenterApiError as e:
        log_error(e, {
            "operation": getattr(operation, "__name__", "unknown"),
            "path": e.path,
            "status_code": e.status_code,
        })
        return FetchResult.failure(FetchError(message=error_message, detail=e.message, status_code=e.status_code))
