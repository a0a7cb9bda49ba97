"""
Map renderer: one circle marker per earthquake.

Markers live in a registry keyed by event id, so highlighting never has to
filter a mixed layer collection by type.
"""

import logging
from dataclasses import dataclass

from markupsafe import escape

import config
from services.magnitude import bucket_of, get_color, get_radius
from services.models import EarthquakeEvent, format_locale_time

logger = logging.getLogger(__name__)


@dataclass
class Marker:
    id: str
    lat: float
    lng: float
    radius: float
    color: str
    fill_color: str
    fill_opacity: float
    weight: int
    popup: str
    magnitude: float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "lat": self.lat,
            "lng": self.lng,
            "radius": self.radius,
            "color": self.color,
            "fillColor": self.fill_color,
            "fillOpacity": self.fill_opacity,
            "weight": self.weight,
            "popup": self.popup,
            "magnitude": self.magnitude,
        }


def build_popup(event: EarthquakeEvent) -> str:
    return (
        f"<b>Location:</b> {escape(event.place)}<br/>"
        f"<b>Magnitude:</b> {event.magnitude:g}<br/>"
        f"<b>Time:</b> {format_locale_time(event.time_millis)}"
    )


def build_marker(event: EarthquakeEvent) -> Marker:
    color = get_color(event.magnitude)
    return Marker(
        id=event.event_id,
        lat=event.latitude,
        lng=event.longitude,
        radius=get_radius(event.magnitude),
        color=color,
        fill_color=color,
        fill_opacity=config.MARKER_FILL_OPACITY,
        weight=config.MARKER_WEIGHT,
        popup=build_popup(event),
        magnitude=event.magnitude,
    )


class MarkerRegistry:
    """Markers currently drawn on the map, one per event, keyed by event id."""

    def __init__(self):
        self._markers: dict[str, Marker] = {}

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self):
        return iter(self._markers.values())

    def get(self, marker_id: str) -> Marker | None:
        return self._markers.get(marker_id)

    def add(self, marker: Marker) -> str:
        """Register a marker. A repeated event id gets a positional suffix."""
        key, n = marker.id, len(self._markers)
        while key in self._markers:
            key = f"{marker.id}-{n}"
            n += 1
        marker.id = key
        self._markers[marker.id] = marker
        return marker.id

    def clear(self) -> None:
        self._markers.clear()

    def in_bucket(self, bucket: int) -> list[str]:
        """Ids of markers with magnitude in [bucket, bucket + 1)."""
        return [
            m.id for m in self._markers.values()
            if bucket_of(m.magnitude) == bucket
        ]

    def to_list(self) -> list[dict]:
        return [m.to_dict() for m in self._markers.values()]


def render_map(registry: MarkerRegistry, events: list[EarthquakeEvent]) -> MarkerRegistry:
    """Replace every marker in the registry with the given events."""
    registry.clear()
    for event in events:
        registry.add(build_marker(event))
    logger.debug("Map rendered with %d markers", len(registry))
    return registry


def map_options() -> dict:
    """Leaflet setup for the browser client."""
    return {
        "center": config.MAP_CENTER,
        "zoom": config.MAP_ZOOM,
        "maxBounds": config.MAP_MAX_BOUNDS,
        "tileUrl": config.TILE_URL,
        "attribution": config.TILE_ATTRIBUTION,
        "noWrap": True,
    }
