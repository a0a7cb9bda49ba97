"""
Application state: the one current snapshot of events and its rendered view.

Only the refresh path writes; request handlers read. Flask serves requests on
several threads, so both sides go through the lock.
"""

import threading
import time

import config
from services.chart_renderer import Chart, render_chart
from services.map_renderer import MarkerRegistry, map_options, render_map
from services.models import EarthquakeEvent, FeedSnapshot


class AppState:
    def __init__(self):
        self._lock = threading.Lock()
        self.events: list[EarthquakeEvent] = []
        self.last_updated = ""
        self.refreshed_at: float | None = None
        self.registry = MarkerRegistry()
        self.chart: Chart = render_chart([], self.registry, "")

    def apply(self, snapshot: FeedSnapshot) -> None:
        """Replace the current snapshot and re-render map and chart."""
        with self._lock:
            self.events = list(snapshot.events)
            self.last_updated = snapshot.last_updated
            self.refreshed_at = time.time()
            render_map(self.registry, self.events)
            self.chart = render_chart(self.events, self.registry, self.last_updated)

    def view(self) -> dict:
        """JSON-ready view for the browser client."""
        with self._lock:
            return {
                "lastUpdated": self.last_updated,
                "count": len(self.events),
                "map": map_options(),
                "markers": self.registry.to_list(),
                "chart": self.chart.to_dict(),
                "highlightStyle": dict(config.HIGHLIGHT_STYLE),
            }
