"""Reverse geocoding through OpenStreetMap Nominatim."""
from typing import Optional

import requests

from center_locator.core.config import NOMINATIM_URL, NOMINATIM_USER_AGENT, REQUEST_TIMEOUT
from center_locator.core.models import ReverseGeocodeResult
from center_locator.utils.logging import log_structured
from center_locator.utils.timing import Timer


class ReverseGeocoder:
    """Turns a coordinate pair into country, state and district names."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or NOMINATIM_URL).rstrip("/")
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent or NOMINATIM_USER_AGENT
        self.timeout = timeout or REQUEST_TIMEOUT

    def reverse(self, latitude: float, longitude: float) -> Optional[ReverseGeocodeResult]:
        """
        Look up the address of a point.

        Returns:
            ReverseGeocodeResult, or None when the lookup fails
        """
        try:
            with Timer("nominatim_reverse", lat=latitude, lon=longitude):
                response = self.session.get(
                    f"{self.base_url}/reverse",
                    params={
                        "format": "jsonv2",
                        "lat": latitude,
                        "lon": longitude,
                        "accept-language": "en",
                    },
                    timeout=self.timeout,
                )
                response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            log_structured("warning", "Reverse geocoding failed", lat=latitude, lon=longitude, error=str(e))
            return None

        if not isinstance(data, dict) or "error" in data:
            log_structured("warning", "Reverse geocoding found no address", lat=latitude, lon=longitude)
            return None

        address = data.get("address") or {}
        return ReverseGeocodeResult(
            country=address.get("country", ""),
            state=_first(address, "state", "region", "state_district"),
            district=_first(address, "county", "city", "town", "village", "suburb"),
            full_address=data.get("display_name", ""),
        )


def _first(address: dict, *keys: str) -> str:
    for key in keys:
        if address.get(key):
            return address[key]
    return ""
