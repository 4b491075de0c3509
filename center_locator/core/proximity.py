"""Distance helpers for nearby-center results."""
import math
from typing import List, Optional

from center_locator.core.models import Center

EARTH_RADIUS_KM = 6371.0


def calculate_distance_km(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Calculate distance between two points using Haversine formula.
    
    Args:
        lon1: Longitude of first point
        lat1: Latitude of first point
        lon2: Longitude of second point
        lat2: Latitude of second point
        
    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    
    a = math.sin(dlat/2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon/2)**2
    c = 2 * math.asin(math.sqrt(a))
    
    return EARTH_RADIUS_KM * c


def annotate_distances(centers: List[Center], latitude: float, longitude: float) -> List[Center]:
    """
    Set ``distance_km`` on each center with coordinates and order nearest first.

    Centers without coordinates keep ``distance_km = None`` and go last, in
    their original order.
    """
    for center in centers:
        if center.has_coordinates:
            center.distance_km = calculate_distance_km(
                longitude, latitude, center.longitude, center.latitude
            )
    return sorted(centers, key=_distance_sort_key)


def _distance_sort_key(center: Center):
    return (center.distance_km is None, center.distance_km or 0.0)


def format_distance(distance_km: Optional[float]) -> str:
    if distance_km is None:
        return "N/A"
    if distance_km < 1:
        return f"{distance_km * 1000:.0f} m"
    return f"{distance_km:.1f} km"
