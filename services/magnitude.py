"""
Magnitude scale helpers shared by the map and the chart.
"""

import math
from dataclasses import dataclass

import config


@dataclass(frozen=True)
class MagnitudeBucket:
    magnitude: int
    count: int


def get_color(magnitude: float) -> str:
    """Return the tier colour for a magnitude."""
    for threshold, color in config.MAGNITUDE_COLORS:
        if magnitude > threshold:
            return color
    return config.MINOR_COLOR


def get_radius(magnitude: float) -> float:
    """Exponential circle radius in metres."""
    return 2 ** magnitude * 1000


def bucket_of(magnitude: float) -> int:
    return math.floor(magnitude)


def bucket_magnitudes(events) -> list[MagnitudeBucket]:
    """Count events per floored magnitude, ascending, empty buckets omitted."""
    counts: dict[int, int] = {}
    for event in events:
        bucket = bucket_of(event.magnitude)
        counts[bucket] = counts.get(bucket, 0) + 1
    return [MagnitudeBucket(b, counts[b]) for b in sorted(counts)]
