"""Tests for drill-down progress and breadcrumbs."""
from center_locator.core.models import Country, FlowStep, STEP_ORDER
from center_locator.core.progress import (
    Crumb,
    breadcrumb,
    format_name,
    share_of_max,
    step_number,
    step_progress,
)

SRI_LANKA = Country("Sri_Lanka", 8)


def test_step_progress():
    assert [step_progress(step) for step in STEP_ORDER] == [25, 50, 75, 100]


def test_progress_strictly_increases_with_step_order():
    values = [step_progress(step) for step in STEP_ORDER]
    assert all(a < b for a, b in zip(values, values[1:]))
    assert [step.order for step in STEP_ORDER] == [0, 1, 2, 3]


def test_step_number_accepts_values():
    assert step_number(FlowStep.COUNTRY) == 1
    assert step_number("centers") == 4


def test_no_breadcrumb_on_first_step():
    assert breadcrumb(FlowStep.COUNTRY, None, None, None) == []


def test_breadcrumb_on_state_step():
    crumbs = breadcrumb(FlowStep.STATE, SRI_LANKA, None, None)

    assert crumbs == [Crumb("All Countries", "countries"), Crumb("Sri Lanka", "states")]


def test_breadcrumb_on_district_step():
    crumbs = breadcrumb(FlowStep.DISTRICT, SRI_LANKA, "North_Central", None)

    assert crumbs[-1] == Crumb("North Central", "districts")
    assert crumbs[-1].clickable


def test_breadcrumb_on_centers_step():
    crumbs = breadcrumb(FlowStep.CENTERS, SRI_LANKA, "Western", "Colombo")

    assert [c.label for c in crumbs] == ["All Countries", "Sri Lanka", "Western", "Colombo"]
    assert [c.action for c in crumbs] == ["countries", "states", "districts", None]


def test_district_hidden_before_centers_step():
    crumbs = breadcrumb(FlowStep.DISTRICT, SRI_LANKA, "Western", "Colombo")

    assert "Colombo" not in [c.label for c in crumbs]


def test_breadcrumb_is_independent_of_counts():
    a = breadcrumb(FlowStep.STATE, Country("India", 1), None, None)
    b = breadcrumb(FlowStep.STATE, Country("India", 500), None, None)
    assert a == b


def test_format_name():
    assert format_name("Andhra_Pradesh") == "Andhra Pradesh"
    assert format_name("") == ""
    assert format_name(None) == ""


def test_share_of_max():
    assert share_of_max(20, [10, 20, 40]) == 50
    assert share_of_max(40, [10, 20, 40]) == 100
    assert share_of_max(0, []) == 0
    assert share_of_max(0, [0, 0]) == 0
