"""Find Centers page: search, nearby and browse-by-location over one results list."""
import streamlit as st

from center_locator.core.config import NEARBY_RADIUS_KM
from center_locator.core.location_flow import LocationFlow
from center_locator.core.nearby import NearbyFinder
from center_locator.core.results import ResultsBoard, ResultsSource, run_search
from center_locator.ui.render import render_location_flow, render_results
from center_locator.ui.state import init_session_state
from center_locator.utils.error_handler import handle_streamlit_errors


def search_from_input(board: ResultsBoard):
    run_search(board, st.session_state.center_service, st.session_state.search_query)


def find_nearby(board: ResultsBoard, nearby: NearbyFinder, retry: bool = False):
    board.activate(ResultsSource.NEARBY)
    if retry:
        result = nearby.retry_last()
    else:
        result = nearby.find(st.session_state.nearby_lat, st.session_state.nearby_lon)
    board.record(ResultsSource.NEARBY, result)


def render_search_section(board: ResultsBoard):
    with st.container(border=True):
        st.subheader("Search Centers")
        with st.form("center_search"):
            st.text_input(
                "Search by name, keyword, or location",
                key="search_query",
                placeholder="Enter center name, location, or keywords...",
            )
            st.form_submit_button("Search", type="primary", on_click=search_from_input, args=(board,))


def render_nearby_section(board: ResultsBoard, nearby: NearbyFinder):
    with st.container(border=True):
        st.subheader("Find Centers Near You")
        st.caption(
            f"Discover centers within {NEARBY_RADIUS_KM:g} km of a location. If no centers are found "
            "nearby, we'll show you the closest available center."
        )
        col1, col2 = st.columns(2)
        with col1:
            st.number_input("Latitude", min_value=-90.0, max_value=90.0, value=0.0, format="%.6f", key="nearby_lat")
        with col2:
            st.number_input("Longitude", min_value=-180.0, max_value=180.0, value=0.0, format="%.6f", key="nearby_lon")

        col1, col2, _ = st.columns([1, 1, 3])
        with col1:
            st.button(
                "Update Location" if nearby.last_location else "Find Nearby Centers",
                type="primary",
                on_click=find_nearby,
                args=(board, nearby),
            )
        if nearby.last_location:
            with col2:
                st.button("Retry Search", on_click=find_nearby, args=(board, nearby, True))

        if nearby.last_address is not None and nearby.last_address.full_address:
            st.caption(f"📍 Searching near: {nearby.last_address.full_address}")
        st.caption("Your location is used only for this search and is not stored.")


@handle_streamlit_errors()
def render_page():
    init_session_state()

    board: ResultsBoard = st.session_state.results_board
    flow: LocationFlow = st.session_state.location_flow
    nearby: NearbyFinder = st.session_state.nearby_finder

    st.title("🔍 Find Centers")

    render_search_section(board)
    render_nearby_section(board, nearby)
    render_location_flow(flow)

    st.divider()
    render_results(board)


render_page()
