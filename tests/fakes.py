"""Fake HTTP session and API payloads shared by the tests."""
from typing import Any, Callable, Dict, List, Tuple

import requests

BASE_URL = "http://api.test"
INVALID_JSON = object()


def envelope(data: Any, success: bool = True, message: str = "OK") -> Dict[str, Any]:
    """Wrap ``data`` the way the centers API does."""
    return {"statusCode": 200, "success": success, "message": message, "data": data}


class FakeResponse:
    """Just enough of requests.Response for the clients."""

    def __init__(self, payload: Any = None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.payload is INVALID_JSON:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """
    Routes requests to canned responses by (method, path).

    A route may be a FakeResponse, an exception to raise, or a callable
    taking ``(json, params)`` and returning either.
    """

    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.routes: Dict[Tuple[str, str], Any] = {}
        self.calls: List[Dict[str, Any]] = []
        self.headers: Dict[str, str] = {}

    def add(self, method: str, path: str, payload: Any = None, status_code: int = 200):
        self.routes[(method, path)] = FakeResponse(payload, status_code)

    def add_error(self, method: str, path: str, error: Exception):
        self.routes[(method, path)] = error

    def add_handler(self, method: str, path: str, handler: Callable[..., Any]):
        self.routes[(method, path)] = handler

    def calls_to(self, method: str, path: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["method"] == method and c["path"] == path]

    def request(self, method: str, url: str, json=None, params=None, timeout=None):
        path = url[len(self.base_url):]
        self.calls.append({"method": method, "path": path, "json": json, "params": params, "timeout": timeout})

        route = self.routes.get((method, path))
        if route is None:
            return FakeResponse({"success": False, "message": "Not found"}, 404)
        if callable(route) and not isinstance(route, FakeResponse):
            route = route(json, params)
        if isinstance(route, Exception):
            raise route
        return route

    def get(self, url: str, params=None, timeout=None):
        return self.request("GET", url, params=params, timeout=timeout)




def center_payload(index: int, district: str = "Bengaluru", **overrides) -> Dict[str, Any]:
    payload = {
        "id": f"c{index}",
        "Country": "India",
        "State": "Karnataka",
        "District": district,
        "schedule": "Sunday 10:00\nWednesday 18:30",
        "Address": f"Center {index}, MG Road, {district}",
        "Description": "Weekly meditation program",
        "coordinators": [{"name": "Asha", "phone": "+91 90000 00000", "email": "asha@example.org"}],
        "latitude": 12.97 + index / 1000,
        "longitude": 77.59,
        "centerImage": None,
        "createdAt": {"_seconds": 1700000000, "_nanoseconds": 0},
    }
    payload.update(overrides)
    return payload
