"""Streamlit renderers for the centers finder."""
from typing import Callable, List, Optional

import pandas as pd
import pydeck as pdk
import streamlit as st

from center_locator.core.location_flow import InvalidTransitionError, LocationFlow
from center_locator.core.models import Center, EXPORT_COLUMNS, FetchError, FlowStep, STEP_ORDER
from center_locator.core.progress import (
    STEP_LABELS,
    breadcrumb,
    format_name,
    share_of_max,
    step_number,
    step_progress,
)
from center_locator.core.proximity import format_distance
from center_locator.core.results import ResultsBoard
from center_locator.utils.logging import log_structured

GRID_COLUMNS = 3


def _guarded(action: Callable, *args):
    """Run a flow action from a widget callback, ignoring clicks on widgets left over from an older step."""
    try:
        action(*args)
    except InvalidTransitionError as e:
        log_structured("warning", "Ignored stale drill-down action", error=str(e))


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def option_key(key_prefix: str, index: int, name: str) -> str:
    """Widget key for one option card; the index keeps keys unique when names repeat."""
    return f"{key_prefix}_{index}_{name}"


def render_fetch_error(
    error: FetchError,
    key: str,
    on_dismiss: Callable[[], None],
    on_retry: Optional[Callable[[], None]] = None,
):
    """Inline, dismissible error with an optional retry."""
    st.error(f"❌ {error.message}")
    if error.detail:
        st.caption(error.detail)
    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        st.button("Dismiss", key=f"{key}_dismiss", on_click=on_dismiss)
    if on_retry is not None:
        with col2:
            st.button("Retry", key=f"{key}_retry", on_click=on_retry)


def render_progress(flow: LocationFlow):
    col1, col2 = st.columns([4, 1])
    with col1:
        st.subheader("Browse Centers by Location")
    with col2:
        st.caption(f"Step {step_number(flow.step)} of {len(STEP_ORDER)}")

    st.progress(step_progress(flow.step) / 100)

    for column, step in zip(st.columns(len(STEP_ORDER)), STEP_ORDER):
        label = STEP_LABELS[step]
        column.markdown(f"**{label}**" if step == flow.step else label)


def render_breadcrumb(flow: LocationFlow):
    crumbs = breadcrumb(flow.step, flow.selected_country, flow.selected_state, flow.selected_district)
    if not crumbs:
        return

    columns = st.columns(len(crumbs) * 2 - 1)
    for i, crumb in enumerate(crumbs):
        column = columns[i * 2]
        if crumb.clickable:
            column.button(
                crumb.label,
                key=f"crumb_{crumb.action}",
                on_click=_guarded,
                args=(flow.navigate, crumb.action),
                type="tertiary",
            )
        else:
            column.markdown(f"**{crumb.label}**")
        if i < len(crumbs) - 1:
            columns[i * 2 + 1].markdown("›")


def _render_option_grid(options, label_of, count_of, value_of, noun, button_label, on_select, key_prefix, show_share=True):
    counts = [count_of(o) for o in options]
    columns = st.columns(GRID_COLUMNS)
    for i, option in enumerate(options):
        with columns[i % GRID_COLUMNS]:
            with st.container(border=True):
                name = label_of(option)
                st.markdown(f"#### {format_name(name)}")
                st.caption(plural(count_of(option), "center") + noun)
                if show_share:
                    st.progress(share_of_max(count_of(option), counts) / 100)
                st.button(
                    button_label,
                    key=option_key(key_prefix, i, name),
                    on_click=_guarded,
                    args=(on_select, value_of(option)),
                    use_container_width=True,
                )


def render_location_flow(flow: LocationFlow):
    """Render the drill-down section and load whatever the current step needs."""
    with st.spinner("Loading locations..."):
        flow.sync()

    with st.container(border=True):
        render_progress(flow)
        render_breadcrumb(flow)

        if flow.step == FlowStep.COUNTRY:
            st.markdown("##### Select a Country to Explore Centers")
            _render_list_step(
                flow,
                "countries",
                lambda: _render_option_grid(
                    flow.countries.items,
                    lambda c: c.country,
                    lambda c: c.count,
                    lambda c: c,
                    " available",
                    "View states",
                    flow.select_country,
                    "country",
                    show_share=False,
                ),
            )

        elif flow.step == FlowStep.STATE and flow.selected_country is not None:
            st.markdown(f"##### Select a State in {format_name(flow.selected_country.country)}")
            _render_list_step(
                flow,
                "states",
                lambda: _render_option_grid(
                    flow.states.items,
                    lambda s: s.state,
                    lambda s: s.total_centers,
                    lambda s: s.state,
                    " in this state",
                    "View districts",
                    flow.select_state,
                    "state",
                ),
            )

        elif flow.step == FlowStep.DISTRICT and flow.selected_country is not None and flow.selected_state:
            st.markdown(
                f"##### Select a District in {format_name(flow.selected_state)}, "
                f"{format_name(flow.selected_country.country)}"
            )
            _render_list_step(
                flow,
                "districts",
                lambda: _render_option_grid(
                    flow.districts.items,
                    lambda d: d.district,
                    lambda d: d.total_centers,
                    lambda d: d.district,
                    " in this district",
                    "View centers",
                    flow.select_district,
                    "district",
                ),
            )

        elif flow.step == FlowStep.CENTERS:
            _render_district_summary(flow)


def _render_list_step(flow: LocationFlow, name: str, render_options: Callable[[], None]):
    dependent = getattr(flow, name)
    if dependent.error is not None:
        render_fetch_error(
            dependent.error,
            key=f"flow_{name}",
            on_dismiss=lambda: flow.dismiss_error(name),
            on_retry=lambda: flow.retry(name),
        )
    elif not dependent.items:
        st.info(f"No {name} available.")
    else:
        render_options()


def _render_district_summary(flow: LocationFlow):
    summary = flow.summary()
    if summary is None:
        return

    st.markdown(f"### Centers in {summary.district}")
    st.caption(f"Ready to explore centers in {summary.district}, {format_name(flow.selected_state)}?")

    col1, col2, col3 = st.columns(3)
    col1.metric("Total in Country", summary.country_total)
    col2.metric("Total in State", summary.state_total)
    col3.metric("Total in District", summary.district_total)

    if flow.centers_error is not None:
        render_fetch_error(
            flow.centers_error,
            key="flow_centers",
            on_dismiss=lambda: flow.dismiss_error("centers"),
        )

    st.button(
        f"Explore {summary.district_total} Centers",
        key="find_district_centers",
        type="primary",
        disabled=flow.finding_centers,
        on_click=_guarded,
        args=(flow.find_centers,),
    )


def render_center_card(center: Center, details_link: bool = True):
    with st.container(border=True):
        st.caption(f"📍 {format_name(center.district)} · {format_name(center.state)}")
        st.markdown(f"#### {center.name or 'Center'}")
        if center.distance_km is not None:
            st.caption(f"{format_distance(center.distance_km)} away")
        st.markdown(center.address)
        if center.schedule:
            st.markdown(f"🕒 {center.schedule.replace(chr(10), ', ')}")

        if center.coordinators:
            st.markdown("**Coordinators:**")
            for coordinator in center.coordinators[:2]:
                line = f"- {coordinator.name} · {coordinator.phone}"
                if coordinator.email:
                    line += f" · {coordinator.email}"
                st.markdown(line)
            remaining = len(center.coordinators) - 2
            if remaining > 0:
                st.caption(f"+{plural(remaining, 'more coordinator')}")

        if details_link and center.id:
            st.page_link(
                "pages/2_Center_Details.py",
                label="View details",
                query_params={"id": center.id},
            )


def centers_dataframe(centers: List[Center]) -> pd.DataFrame:
    return pd.DataFrame([center.to_dict() for center in centers], columns=EXPORT_COLUMNS)


def centers_map(centers: List[Center]) -> Optional[pdk.Deck]:
    """Scatter map of the centers that carry coordinates."""
    points = [
        {"lon": c.longitude, "lat": c.latitude, "name": c.name, "district": format_name(c.district)}
        for c in centers
        if c.has_coordinates
    ]
    if not points:
        return None

    view_state = pdk.ViewState(
        longitude=sum(p["lon"] for p in points) / len(points),
        latitude=sum(p["lat"] for p in points) / len(points),
        zoom=10 if len(points) == 1 else 5,
        pitch=0,
    )
    layer = pdk.Layer(
        "ScatterplotLayer",
        data=points,
        get_position=["lon", "lat"],
        get_color=[120, 80, 220, 200],
        get_radius=300,
        radius_min_pixels=6,
        radius_max_pixels=30,
        pickable=True,
    )
    return pdk.Deck(
        map_style=None,
        initial_view_state=view_state,
        layers=[layer],
        tooltip={"text": "{name}\n{district}"},
    )


def render_results(board: ResultsBoard):
    """Results of whichever flow is active."""
    if board.error is not None:
        render_fetch_error(board.error, key="results", on_dismiss=board.dismiss_error)
        return

    if board.source is None:
        return

    count = len(board.centers)
    if count == 0:
        if board.query:
            st.warning(
                f"No centers found for {board.query}. Try adjusting your search criteria or browse by district."
            )
        else:
            st.info("No centers are available at the moment. Try changing filters or check back later.")
        return

    title = f'Search Results for "{board.query}"' if board.query else "Found Centers"
    st.subheader(f"{title} ({plural(count, 'Center')})")

    deck = centers_map(board.centers)
    if deck is not None:
        st.pydeck_chart(deck)

    columns = st.columns(GRID_COLUMNS)
    for i, center in enumerate(board.centers):
        with columns[i % GRID_COLUMNS]:
            render_center_card(center)

    df = centers_dataframe(board.centers)
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            label="📊 Download as CSV",
            data=df.to_csv(index=False),
            file_name="centers.csv",
            mime="text/csv",
        )
    with col2:
        st.download_button(
            label="📋 Download as TSV (Excel)",
            data=df.to_csv(index=False, sep="\t"),
            file_name="centers.tsv",
            mime="text/tab-separated-values",
        )
