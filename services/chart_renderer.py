"""
Magnitude-distribution bar chart.

The chart is rebuilt from scratch on every refresh as a plotly bar figure.
Each bar also carries what the browser needs for hover and click (the marker
ids it highlights and its detail text), so the client does no data work.
"""

import json
import logging
from dataclasses import dataclass, field

import plotly.graph_objects as go

import config
from services.magnitude import MagnitudeBucket, bucket_magnitudes, get_color
from services.map_renderer import MarkerRegistry

logger = logging.getLogger(__name__)


@dataclass
class Bar:
    magnitude: int
    count: int
    fill: str
    marker_ids: list[str] = field(default_factory=list)
    detail: str = ""

    def to_dict(self) -> dict:
        return {
            "magnitude": self.magnitude,
            "count": self.count,
            "fill": self.fill,
            "hoverFill": config.BAR_HOVER_COLOR,
            "markerIds": self.marker_ids,
            "detail": self.detail,
        }


@dataclass
class Chart:
    bars: list[Bar]
    figure: go.Figure

    def to_dict(self) -> dict:
        return {
            "bars": [b.to_dict() for b in self.bars],
            "figure": json.loads(self.figure.to_json()),
        }


def bucket_detail(bucket: MagnitudeBucket, last_updated: str) -> str:
    """Text shown when a bar is clicked."""
    return (
        f"Magnitude: {bucket.magnitude}\n"
        f"Count: {bucket.count}\n"
        f"Last Updated: {last_updated}"
    )


def build_figure(bars: list[Bar]) -> go.Figure:
    margin = config.CHART_MARGIN
    magnitudes = [b.magnitude for b in bars]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=magnitudes,
        y=[b.count for b in bars],
        marker=dict(color=[b.fill for b in bars]),
        customdata=[b.detail for b in bars],
        hoverinfo="x+y",
    ))
    fig.update_layout(
        title=dict(text=config.CHART_TITLE, font=dict(size=16), x=0.5),
        width=config.CHART_WIDTH,
        height=config.CHART_HEIGHT,
        margin=dict(t=margin["top"] + 20, r=margin["right"],
                    b=margin["bottom"], l=margin["left"]),
        bargap=config.CHART_BAR_GAP,
        xaxis=dict(tickmode="array", tickvals=magnitudes, tickformat=".1f"),
        yaxis=dict(rangemode="tozero"),
        template="plotly_white",
        showlegend=False,
    )
    return fig


def render_chart(events, registry: MarkerRegistry, last_updated: str) -> Chart:
    """Build a fresh chart for the given events."""
    bars = [
        Bar(
            magnitude=bucket.magnitude,
            count=bucket.count,
            fill=get_color(bucket.magnitude),
            marker_ids=registry.in_bucket(bucket.magnitude),
            detail=bucket_detail(bucket, last_updated),
        )
        for bucket in bucket_magnitudes(events)
    ]
    logger.debug("Chart rendered with %d bars", len(bars))
    return Chart(bars=bars, figure=build_figure(bars))
