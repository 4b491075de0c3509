"""Pytest configuration and fixtures."""
import pytest

from center_locator.core.center_service import CenterService
from center_locator.core.location_flow import LocationFlow
from fakes import BASE_URL, FakeResponse, FakeSession, center_payload, envelope


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def service(session):
    return CenterService(base_url=BASE_URL, session=session, timeout=5)


@pytest.fixture
def india_api(session):
    """API serving the India → Karnataka → Bengaluru hierarchy with 12 centers."""
    session.add("GET", "/centers/countries", envelope({
        "countries": [{"country": "India", "count": 120}, {"country": "Sri_Lanka", "count": 8}],
    }))
    session.add("GET", "/centers/countries-with-states/India", envelope({
        "country": "India",
        "states": [{"state": "Karnataka", "totalCenters": 40}, {"state": "Kerala", "totalCenters": 15}],
    }))
    session.add("GET", "/centers/countries-with-states/Sri_Lanka", envelope({
        "country": "Sri_Lanka",
        "states": [{"state": "Western", "totalCenters": 8}],
    }))

    def districts(json, params):
        by_state = {
            "Karnataka": [{"district": "Bengaluru", "totalCenters": 12}, {"district": "Mysuru", "totalCenters": 5}],
            "Kerala": [{"district": "Kochi", "totalCenters": 4}],
        }
        return FakeResponse(envelope({
            "country": json["country"],
            "state": json["state"],
            "districts": by_state.get(json["state"], []),
        }))

    session.add_handler("POST", "/centers/districts", districts)
    session.add("POST", "/centers/district/center-list", envelope({
        "centers": [center_payload(i) for i in range(12)],
        "totalCenters": 12,
    }))
    return session


@pytest.fixture
def found_centers():
    """Collects every list the drill-down hands off."""
    return []


@pytest.fixture
def flow(service, india_api, found_centers):
    return LocationFlow(service, on_centers_found=found_centers.append)


@pytest.fixture
def flow_at_centers(flow):
    """Flow driven through India → Karnataka → Bengaluru."""
    flow.sync()
    india = next(c for c in flow.countries.items if c.country == "India")
    flow.select_country(india)
    flow.sync()
    flow.select_state("Karnataka")
    flow.sync()
    flow.select_district("Bengaluru")
    flow.sync()
    return flow
