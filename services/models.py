"""
Earthquake data models and GeoJSON parsing.

Features are taken verbatim from the USGS feed. There is no validation and no
per-record recovery: a feature that cannot be read raises, and the caller
discards the whole batch.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class EarthquakeEvent:
    """One seismic event from the feed.

    Attributes:
        event_id: USGS event id (``event-<index>`` when the feature has none)
        longitude: Epicenter longitude
        latitude: Epicenter latitude
        depth: Depth in kilometers
        magnitude: Event magnitude, ``0.0`` when the feed reports null
        place: Human-readable location description, empty when null
        time_millis: Event time, epoch milliseconds
    """
    event_id: str
    longitude: float
    latitude: float
    depth: float
    magnitude: float
    place: str
    time_millis: int

    @classmethod
    def from_geojson_feature(cls, feature: dict[str, Any], index: int = 0) -> "EarthquakeEvent":
        props = feature["properties"]
        coords = feature["geometry"]["coordinates"]
        return cls(
            event_id=str(feature.get("id") or f"event-{index}"),
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth=float(coords[2]) if len(coords) > 2 and coords[2] is not None else 0.0,
            magnitude=float(props["mag"] or 0.0),
            place=str(props["place"] or ""),
            time_millis=int(props["time"]),
        )


@dataclass(frozen=True)
class FeedSnapshot:
    events: list[EarthquakeEvent]
    last_updated: str


def format_locale_time(millis: int, utc: bool = False) -> str:
    """Format epoch milliseconds as ``M/D/YYYY, h:mm:ss AM``.

    Matches the browser's ``en-US`` locale string. Local time unless ``utc``.
    """
    if utc:
        dt = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    else:
        dt = datetime.fromtimestamp(millis / 1000)
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"


def parse_feed(data: dict[str, Any]) -> FeedSnapshot:
    """Parse a USGS GeoJSON FeatureCollection into a snapshot."""
    events = [
        EarthquakeEvent.from_geojson_feature(feature, index)
        for index, feature in enumerate(data["features"])
    ]
    last_updated = format_locale_time(int(data["metadata"]["time"]), utc=True)
    return FeedSnapshot(events=events, last_updated=last_updated)
