"""Progress and breadcrumb derivation for the location drill-down."""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from center_locator.core.models import Country, FlowStep, STEP_ORDER

STEP_PROGRESS = {
    FlowStep.COUNTRY: 25,
    FlowStep.STATE: 50,
    FlowStep.DISTRICT: 75,
    FlowStep.CENTERS: 100,
}

STEP_LABELS = {
    FlowStep.COUNTRY: "Country",
    FlowStep.STATE: "State",
    FlowStep.DISTRICT: "District",
    FlowStep.CENTERS: "Centers",
}

# Breadcrumb actions, dispatched by LocationFlow.navigate
BACK_TO_COUNTRIES = "countries"
BACK_TO_STATES = "states"
BACK_TO_DISTRICTS = "districts"


@dataclass(frozen=True)
class Crumb:
    """One breadcrumb entry; ``action`` is None for plain text."""
    label: str
    action: Optional[str] = None

    @property
    def clickable(self) -> bool:
        return self.action is not None


def format_name(name: str) -> str:
    """Names arrive with underscores for spaces."""
    return (name or "").replace("_", " ")


def step_progress(step: FlowStep) -> int:
    return STEP_PROGRESS[FlowStep(step)]


def step_number(step: FlowStep) -> int:
    """1-based position of the step, for "Step N of 4"."""
    return STEP_ORDER.index(FlowStep(step)) + 1


def breadcrumb(
    step: FlowStep,
    selected_country: Optional[Country],
    selected_state: Optional[str],
    selected_district: Optional[str],
) -> List[Crumb]:
    """
    Build the breadcrumb trail for the current drill-down state.

    The trail is empty on the first step before any country is chosen.
    "All Countries" always links back to the first step; the country links
    back to state selection and the state to district selection unless that
    is the step being shown; the district is plain text on the last step.
    """
    step = FlowStep(step)
    if step == FlowStep.COUNTRY and selected_country is None:
        return []

    crumbs = [Crumb("All Countries", BACK_TO_COUNTRIES)]

    if selected_country is not None:
        label = format_name(selected_country.country)
        crumbs.append(Crumb(label) if step == FlowStep.COUNTRY else Crumb(label, BACK_TO_STATES))

    if selected_state:
        label = format_name(selected_state)
        crumbs.append(Crumb(label) if step == FlowStep.STATE else Crumb(label, BACK_TO_DISTRICTS))

    if selected_district and step == FlowStep.CENTERS:
        crumbs.append(Crumb(format_name(selected_district)))

    return crumbs


def share_of_max(value: int, values: Sequence[int]) -> float:
    """Relative bar width (0-100) of ``value`` against the largest of ``values``."""
    largest = max(values, default=0)
    if largest <= 0:
        return 0.0
    return value / largest * 100
