"""Tests for switching between result sources."""
from center_locator.core.models import Center, FetchError, FetchResult, FlowStep
from center_locator.core.results import ResultsBoard, ResultsSource, run_search
from fakes import center_payload, envelope


def make_board(flow):
    board = ResultsBoard()
    flow.on_centers_found = lambda centers: board.publish(ResultsSource.DRILL_DOWN, centers)
    board.on_leave(ResultsSource.DRILL_DOWN, flow.back_to_countries)
    return board


def test_search_resets_drill_down(flow_at_centers, service, india_api):
    board = make_board(flow_at_centers)
    india_api.add("GET", "/centers/search", envelope({"results": [center_payload(1)]}))

    result = run_search(board, service, "  MG Road ")

    assert result.ok
    assert flow_at_centers.step == FlowStep.COUNTRY
    assert flow_at_centers.selected_country is None
    assert board.source == ResultsSource.SEARCH
    assert board.query == "MG Road"
    assert [c.id for c in board.centers] == ["c1"]
    assert india_api.calls_to("GET", "/centers/search")[0]["params"] == {"q": "MG Road"}


def test_drill_down_results_do_not_reset_flow(flow_at_centers):
    board = make_board(flow_at_centers)

    flow_at_centers.find_centers()

    assert board.source == ResultsSource.DRILL_DOWN
    assert len(board.centers) == 12
    assert board.query is None
    assert flow_at_centers.step == FlowStep.CENTERS


def test_switching_source_clears_previous_results(flow_at_centers):
    board = make_board(flow_at_centers)
    flow_at_centers.find_centers()

    board.activate(ResultsSource.NEARBY)

    assert board.centers == []
    assert board.source == ResultsSource.NEARBY
    assert flow_at_centers.step == FlowStep.COUNTRY


def test_leave_hook_runs_only_for_other_sources():
    calls = []
    board = ResultsBoard()
    board.on_leave(ResultsSource.NEARBY, lambda: calls.append("nearby"))

    board.activate(ResultsSource.NEARBY)
    assert calls == []

    board.activate(ResultsSource.SEARCH)
    assert calls == ["nearby"]


def test_search_failure_is_recorded(service, session):
    board = ResultsBoard()
    session.add("GET", "/centers/search", {}, status_code=500)

    result = run_search(board, service, "x")

    assert not result.ok
    assert board.error.message == "Error searching centers. Please try again."
    assert board.centers == []

    board.dismiss_error()
    assert board.error is None


def test_record_success_and_failure():
    board = ResultsBoard()
    centers = [Center(id="a")]

    board.record(ResultsSource.NEARBY, FetchResult.success(centers))
    assert board.centers is centers

    board.record(ResultsSource.NEARBY, FetchResult.failure(FetchError("nope")))
    assert board.centers == []
    assert board.error == FetchError("nope")

    board.clear()
    assert board.source is None
    assert board.error is None
