"""Nearby-centers search around a coordinate pair."""
from typing import Optional, Tuple

from center_locator.core.center_service import CenterService, fetch
from center_locator.core.geocoder import ReverseGeocoder
from center_locator.core.models import FetchError, FetchResult, ReverseGeocodeResult
from center_locator.core.proximity import annotate_distances

NEARBY_ERROR_MESSAGE = "Error finding nearby centers. Please try again."


class NearbyFinder:
    """Finds centers around a point and remembers the last point searched."""

    def __init__(self, service: CenterService, geocoder: Optional[ReverseGeocoder] = None):
        self.service = service
        self.geocoder = geocoder
        self.last_location: Optional[Tuple[float, float]] = None
        self.last_address: Optional[ReverseGeocodeResult] = None

    def find(self, latitude: float, longitude: float) -> FetchResult:
        """
        Search around ``(latitude, longitude)``.

        Returns:
            FetchResult whose data is the centers, nearest first
        """
        if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
            return FetchResult.failure(FetchError(
                message="Invalid coordinates. Latitude must be within ±90 and longitude within ±180.",
            ))

        if self.last_location != (latitude, longitude):
            self.last_address = self.geocoder.reverse(latitude, longitude) if self.geocoder else None
        self.last_location = (latitude, longitude)

        result = fetch(
            self.service.find_nearby_centers,
            latitude,
            longitude,
            error_message=NEARBY_ERROR_MESSAGE,
        )
        if result.ok:
            result.data = annotate_distances(result.data, latitude, longitude)
        return result

    def retry_last(self) -> FetchResult:
        """Repeat the previous search."""
        if self.last_location is None:
            return FetchResult.failure(FetchError(message="No previous location to search from."))
        return self.find(*self.last_location)

    def clear(self):
        self.last_location = None
        self.last_address = None
