"""Session-scoped objects shared by the Streamlit pages."""
import streamlit as st

from center_locator.core.center_service import CenterService
from center_locator.core.geocoder import ReverseGeocoder
from center_locator.core.location_flow import LocationFlow
from center_locator.core.nearby import NearbyFinder
from center_locator.core.results import ResultsBoard, ResultsSource


def init_session_state():
    """Create the service, flows and results board once per browser session."""
    if "center_service" not in st.session_state:
        st.session_state.center_service = CenterService()

    if "reverse_geocoder" not in st.session_state:
        st.session_state.reverse_geocoder = ReverseGeocoder()

    if "results_board" not in st.session_state:
        service = st.session_state.center_service
        board = ResultsBoard()
        flow = LocationFlow(
            service,
            on_centers_found=lambda centers: board.publish(ResultsSource.DRILL_DOWN, centers),
        )
        nearby = NearbyFinder(service, st.session_state.reverse_geocoder)

        board.on_leave(ResultsSource.DRILL_DOWN, flow.back_to_countries)
        board.on_leave(ResultsSource.NEARBY, nearby.clear)

        st.session_state.results_board = board
        st.session_state.location_flow = flow
        st.session_state.nearby_finder = nearby
