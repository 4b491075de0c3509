"""Center details page."""
import streamlit as st

from center_locator.core.center_service import CenterService, fetch
from center_locator.core.progress import format_name
from center_locator.ui.render import centers_map, render_center_card
from center_locator.ui.state import init_session_state
from center_locator.utils.error_handler import handle_streamlit_errors


@handle_streamlit_errors()
def render_page():
    init_session_state()
    service: CenterService = st.session_state.center_service

    st.title("🏛️ Center Details")

    center_id = st.text_input("Center ID", value=st.query_params.get("id", ""))
    if not center_id:
        st.info("Open a center from the Find Centers page or enter its ID.")
        return

    with st.spinner("Loading center..."):
        result = fetch(service.get_center, center_id.strip(), error_message="Could not load this center.")

    if not result.ok:
        st.error(f"❌ {result.error.message}")
        if result.error.detail:
            st.caption(result.error.detail)
        return

    center = result.data
    render_center_card(center, details_link=False)

    if center.description:
        st.markdown("### About")
        st.markdown(center.description)

    if center.center_image:
        st.image(center.center_image)

    st.markdown("### Location")
    st.text(
        " › ".join(format_name(part) for part in (center.country, center.state, center.district) if part)
    )
    deck = centers_map([center])
    if deck is not None:
        st.pydeck_chart(deck)
        st.code(f"{center.latitude:.6f}, {center.longitude:.6f}", language=None)

    if len(center.coordinators) > 2:
        st.markdown("### All Coordinators")
        st.dataframe(
            [c.__dict__ for c in center.coordinators],
            use_container_width=True,
            hide_index=True,
        )


render_page()
