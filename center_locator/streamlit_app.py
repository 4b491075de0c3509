"""Main Streamlit application entry point."""
import streamlit as st

from center_locator.core.config import LOG_LEVEL, NEARBY_RADIUS_KM
from center_locator.ui.state import init_session_state
from center_locator.utils.error_tracking import setup_error_tracking
from center_locator.utils.logging import setup_logging

setup_logging(LOG_LEVEL)
setup_error_tracking()

init_session_state()

st.set_page_config(
    page_title="Center Locator",
    page_icon="🧘",
    layout="wide"
)

st.title("🧘 Find a Meditation Center")
st.markdown(
    "Search the directory, look for centers within "
    f"{NEARBY_RADIUS_KM:g} km of you, or browse country by country."
)
st.page_link("pages/1_Find_Centers.py", label="Find Centers", icon="🔍")
