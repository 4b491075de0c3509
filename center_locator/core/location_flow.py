"""Country → state → district → centers drill-down."""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from center_locator.core.center_service import CenterService, fetch
from center_locator.core.models import Center, Country, FetchError, FetchResult, FlowStep
from center_locator.core.progress import (
    BACK_TO_COUNTRIES,
    BACK_TO_DISTRICTS,
    BACK_TO_STATES,
    format_name,
)
from center_locator.utils.logging import log_structured

CENTERS_ERROR_MESSAGE = "Error fetching centers. Please try again."
COUNTRIES_ERROR_MESSAGE = "Could not load countries. Please try again."
STATES_ERROR_MESSAGE = "Could not load states. Please try again."
DISTRICTS_ERROR_MESSAGE = "Could not load districts. Please try again."


class InvalidTransitionError(Exception):
    """Raised when a drill-down action is invoked from a step that does not allow it."""


class DependentList:
    """
    A list fetched for one parent selection.

    Each load takes a new generation number; a result is applied only if its
    generation is still the latest, so a slow response for an old selection
    can never overwrite a newer one.
    """

    def __init__(self, name: str):
        self.name = name
        self.items: List[Any] = []
        self.key: Optional[Tuple[str, ...]] = None
        self.loading = False
        self.error: Optional[FetchError] = None
        self.generation = 0

    def begin(self, key: Tuple[str, ...]) -> int:
        """Start a load for ``key`` and return its generation."""
        self.generation += 1
        self.key = key
        self.items = []
        self.error = None
        self.loading = True
        return self.generation

    def apply(self, generation: int, result: FetchResult) -> bool:
        """Store ``result`` if ``generation`` is current. Returns whether it was applied."""
        if generation != self.generation:
            log_structured(
                "info",
                f"Discarded stale {self.name} response",
                list=self.name,
                generation=generation,
                latest_generation=self.generation,
            )
            return False

        self.loading = False
        if result.ok:
            self.items = list(result.data or [])
        else:
            self.error = result.error
        return True

    def discard(self):
        """Drop the items and invalidate any load in flight."""
        self.generation += 1
        self.key = None
        self.items = []
        self.error = None
        self.loading = False

    @property
    def loaded(self) -> bool:
        return self.key is not None and not self.loading and self.error is None


@dataclass(frozen=True)
class DistrictSummary:
    """Counts shown before confirming the district."""
    district: str
    country_total: int
    state_total: int
    district_total: int


class LocationFlow:
    """
    Four-step wizard for browsing centers by location.

    Transitions only change the selection; ``sync()`` performs the fetches the
    new selection needs. ``find_centers()`` is the explicit confirmation on
    the last step and hands its result to ``on_centers_found`` unchanged.
    """

    def __init__(
        self,
        service: CenterService,
        on_centers_found: Optional[Callable[[List[Center]], None]] = None,
    ):
        self.service = service
        self.on_centers_found = on_centers_found
        self.countries = DependentList("countries")
        self.states = DependentList("states")
        self.districts = DependentList("districts")
        self.centers_error: Optional[FetchError] = None
        self.finding_centers = False
        self._clear_selection()

    def _clear_selection(self):
        self.step = FlowStep.COUNTRY
        self.selected_country: Optional[Country] = None
        self.selected_state: Optional[str] = None
        self.selected_district: Optional[str] = None

    # Selection keys of the dependent lists; None when the parent is unset.
    def _states_key(self) -> Optional[Tuple[str, ...]]:
        if self.selected_country is None:
            return None
        return (self.selected_country.country,)

    def _districts_key(self) -> Optional[Tuple[str, ...]]:
        if self.selected_country is None or not self.selected_state:
            return None
        return (self.selected_country.country, self.selected_state)

    def _after_transition(self, action: str):
        self.centers_error = None
        if self.states.key is not None and self.states.key != self._states_key():
            self.states.discard()
        if self.districts.key is not None and self.districts.key != self._districts_key():
            self.districts.discard()
        log_structured("info", "Location flow transition", action=action, **self.snapshot())

    def _require(self, allowed: Tuple[FlowStep, ...], action: str):
        if self.step not in allowed:
            raise InvalidTransitionError(
                f"{action} is not allowed at step '{self.step.value}'"
            )

    def select_country(self, country: Country):
        self._require((FlowStep.COUNTRY,), "select_country")
        self.selected_country = country
        self.selected_state = None
        self.selected_district = None
        self.step = FlowStep.STATE
        self._after_transition("select_country")

    def select_state(self, state: str):
        self._require((FlowStep.STATE,), "select_state")
        if self.selected_country is None:
            raise InvalidTransitionError("select_state requires a selected country")
        self.selected_state = state
        self.selected_district = None
        self.step = FlowStep.DISTRICT
        self._after_transition("select_state")

    def select_district(self, district: str):
        self._require((FlowStep.DISTRICT,), "select_district")
        if not self.selected_state:
            raise InvalidTransitionError("select_district requires a selected state")
        self.selected_district = district
        self.step = FlowStep.CENTERS
        self._after_transition("select_district")

    def back_to_countries(self):
        self._clear_selection()
        self._after_transition("back_to_countries")

    def back_to_states(self):
        self._require((FlowStep.STATE, FlowStep.DISTRICT, FlowStep.CENTERS), "back_to_states")
        self.selected_state = None
        self.selected_district = None
        self.step = FlowStep.STATE
        self._after_transition("back_to_states")

    def back_to_districts(self):
        self._require((FlowStep.DISTRICT, FlowStep.CENTERS), "back_to_districts")
        self.selected_district = None
        self.step = FlowStep.DISTRICT
        self._after_transition("back_to_districts")

    def navigate(self, action: str):
        """Dispatch a breadcrumb action."""
        handlers = {
            BACK_TO_COUNTRIES: self.back_to_countries,
            BACK_TO_STATES: self.back_to_states,
            BACK_TO_DISTRICTS: self.back_to_districts,
        }
        if action not in handlers:
            raise ValueError(f"Unknown breadcrumb action: {action}")
        handlers[action]()

    def sync(self):
        """Load every dependent list the current selection needs and lacks."""
        if self.countries.key is None:
            self.load_countries()
        if self._states_key() is not None and self.states.key != self._states_key():
            self.load_states()
        if self._districts_key() is not None and self.districts.key != self._districts_key():
            self.load_districts()

    def load_countries(self) -> bool:
        generation = self.countries.begin(())
        result = fetch(self.service.list_countries, error_message=COUNTRIES_ERROR_MESSAGE)
        return self.countries.apply(generation, result)

    def load_states(self) -> bool:
        key = self._states_key()
        if key is None:
            return False
        generation = self.states.begin(key)
        result = fetch(self.service.list_states, *key, error_message=STATES_ERROR_MESSAGE)
        return self.states.apply(generation, result)

    def load_districts(self) -> bool:
        key = self._districts_key()
        if key is None:
            return False
        generation = self.districts.begin(key)
        result = fetch(self.service.list_districts, *key, error_message=DISTRICTS_ERROR_MESSAGE)
        return self.districts.apply(generation, result)

    def retry(self, name: str) -> bool:
        """Reload one dependent list after a failure."""
        loaders = {
            "countries": self.load_countries,
            "states": self.load_states,
            "districts": self.load_districts,
        }
        return loaders[name]()

    def dismiss_error(self, name: str):
        """Hide an error. A dismissed list is dropped so the next ``sync()`` loads it again."""
        if name == "centers":
            self.centers_error = None
        else:
            getattr(self, name).discard()

    def find_centers(self) -> FetchResult:
        """
        Fetch the centers of the selected district and hand them off.

        On failure the selection is kept so the user can confirm again.
        """
        self._require((FlowStep.CENTERS,), "find_centers")
        country, state, district = self.selected_country, self.selected_state, self.selected_district
        if country is None or not state or not district:
            raise InvalidTransitionError("find_centers requires a complete selection")

        self.centers_error = None
        self.finding_centers = True
        try:
            result = fetch(
                self.service.list_centers_in_district,
                country.country,
                state,
                district,
                error_message=CENTERS_ERROR_MESSAGE,
            )
        finally:
            self.finding_centers = False

        if result.ok:
            log_structured(
                "info",
                "Centers found in district",
                district=district,
                count=len(result.data),
            )
            if self.on_centers_found is not None:
                self.on_centers_found(result.data)
        else:
            self.centers_error = result.error
        return result

    def summary(self) -> Optional[DistrictSummary]:
        """Counts for the selected district, from the lists already in memory."""
        if self.step != FlowStep.CENTERS or self.selected_country is None or not self.selected_district:
            return None
        state_total = next(
            (s.total_centers for s in self.states.items if s.state == self.selected_state), 0
        )
        district_total = next(
            (d.total_centers for d in self.districts.items if d.district == self.selected_district), 0
        )
        return DistrictSummary(
            district=format_name(self.selected_district),
            country_total=self.selected_country.count,
            state_total=state_total,
            district_total=district_total,
        )

    def snapshot(self) -> Dict[str, Any]:
        """Current step and selections as plain values."""
        return {
            "step": self.step.value,
            "selected_country": self.selected_country.country if self.selected_country else None,
            "selected_state": self.selected_state,
            "selected_district": self.selected_district,
        }
