"""The single active source of center results on the finder page."""
from enum import Enum
from typing import Callable, List, Optional

from center_locator.core.center_service import CenterService, fetch
from center_locator.core.models import Center, FetchError, FetchResult

SEARCH_ERROR_MESSAGE = "Error searching centers. Please try again."


class ResultsSource(str, Enum):
    SEARCH = "search"
    NEARBY = "nearby"
    DRILL_DOWN = "drill_down"


class ResultsBoard:
    """
    Holds the results currently shown and which flow produced them.

    Only one flow feeds the board at a time. Activating a source clears the
    previous results and runs the ``on_leave`` reset of every other source,
    so switching from the drill-down to a search puts the drill-down back
    on its first step.
    """

    def __init__(self):
        self.source: Optional[ResultsSource] = None
        self.centers: List[Center] = []
        self.query: Optional[str] = None
        self.error: Optional[FetchError] = None
        self._leave_hooks = {}

    def on_leave(self, source: ResultsSource, hook: Callable[[], None]):
        """Register the reset to run when another source takes over from ``source``."""
        self._leave_hooks[ResultsSource(source)] = hook

    def activate(self, source: ResultsSource):
        source = ResultsSource(source)
        for other, hook in self._leave_hooks.items():
            if other != source:
                hook()
        self.source = source
        self.centers = []
        self.query = None
        self.error = None

    def publish(self, source: ResultsSource, centers: List[Center], query: Optional[str] = None):
        """Show ``centers`` as the results of ``source``."""
        source = ResultsSource(source)
        if self.source != source:
            self.activate(source)
        self.centers = centers
        self.query = query
        self.error = None

    def fail(self, source: ResultsSource, error: FetchError):
        source = ResultsSource(source)
        if self.source != source:
            self.activate(source)
        self.centers = []
        self.error = error

    def record(self, source: ResultsSource, result: FetchResult, query: Optional[str] = None):
        """Publish or fail depending on ``result``."""
        if result.ok:
            self.publish(source, result.data or [], query=query)
        else:
            self.fail(source, result.error)

    def dismiss_error(self):
        self.error = None

    def clear(self):
        self.source = None
        self.centers = []
        self.query = None
        self.error = None


def run_search(board: ResultsBoard, service: CenterService, query: str, **filters) -> FetchResult:
    """Search centers and show the outcome on ``board``."""
    query = (query or "").strip()
    board.activate(ResultsSource.SEARCH)
    result = fetch(service.search_centers, query, error_message=SEARCH_ERROR_MESSAGE, **filters)
    board.record(ResultsSource.SEARCH, result, query=query)
    return result
