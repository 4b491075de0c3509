"""Data models for the centers directory."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any, Generic, TypeVar

T = TypeVar("T")


class FlowStep(str, Enum):
    """Stage of the location drill-down."""
    COUNTRY = "country"
    STATE = "state"
    DISTRICT = "district"
    CENTERS = "centers"

    @property
    def order(self) -> int:
        return STEP_ORDER.index(self)


STEP_ORDER = [FlowStep.COUNTRY, FlowStep.STATE, FlowStep.DISTRICT, FlowStep.CENTERS]


@dataclass(frozen=True)
class Country:
    """Country name with its total center count."""
    country: str
    count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Country":
        return cls(country=data.get("country", ""), count=int(data.get("count") or 0))


@dataclass(frozen=True)
class State:
    """State within the selected country."""
    state: str
    total_centers: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "State":
        return cls(state=data.get("state", ""), total_centers=int(data.get("totalCenters") or 0))


@dataclass(frozen=True)
class District:
    """District within the selected (country, state) pair."""
    district: str
    total_centers: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "District":
        return cls(district=data.get("district", ""), total_centers=int(data.get("totalCenters") or 0))


@dataclass
class Coordinator:
    name: str = ""
    phone: str = ""
    email: str = ""


@dataclass
class Center:
    """
    A center record as returned by the API.

    Only the fields the UI displays are lifted out; the full payload stays in
    ``raw`` so the record can be handed on without loss.
    """
    id: str
    country: str = ""
    state: str = ""
    district: str = ""
    address: str = ""
    schedule: str = ""
    description: str = ""
    coordinators: List[Coordinator] = field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    center_image: Optional[str] = None
    created_at: Optional[int] = None
    distance_km: Optional[float] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Center":
        """Build a center from the backend's wire keys."""
        created = data.get("createdAt")
        coordinators = [
            Coordinator(
                name=c.get("name", ""),
                phone=c.get("phone", ""),
                email=c.get("email", ""),
            )
            for c in data.get("coordinators") or []
            if isinstance(c, dict)
        ]
        return cls(
            id=str(data.get("id") or data.get("_id") or ""),
            country=data.get("Country", ""),
            state=data.get("State", ""),
            district=data.get("District", ""),
            address=data.get("Address", ""),
            schedule=data.get("schedule", ""),
            description=data.get("Description", ""),
            coordinators=coordinators,
            latitude=_as_float(data.get("latitude")),
            longitude=_as_float(data.get("longitude")),
            center_image=data.get("centerImage"),
            created_at=created.get("_seconds") if isinstance(created, dict) else None,
            raw=data,
        )

    @property
    def name(self) -> str:
        """Display name: the first segment of the address."""
        return self.address.split(",")[0].strip() if self.address else ""

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary for tables and export."""
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "state": self.state,
            "district": self.district,
            "address": self.address,
            "schedule": self.schedule,
            "coordinators": "; ".join(
                f"{c.name} ({c.phone})" if c.phone else c.name for c in self.coordinators
            ),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "distance_km": self.distance_km,
        }


EXPORT_COLUMNS = [
    "id", "name", "country", "state", "district", "address",
    "schedule", "coordinators", "latitude", "longitude", "distance_km",
]


def _as_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class FetchError:
    """A failed fetch, shaped for display."""
    message: str
    detail: str = ""
    status_code: Optional[int] = None


@dataclass
class FetchResult(Generic[T]):
    """Either the data of a fetch or the error that replaced it."""
    data: Optional[T] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> "FetchResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        return cls(error=error)


@dataclass(frozen=True)
class ReverseGeocodeResult:
    """Address components for a coordinate pair."""
    country: str = ""
    state: str = ""
    district: str = ""
    full_address: str = ""
