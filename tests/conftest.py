"""
Shared fixtures for the Quake Monitor tests.

No test touches the network: the USGS call is patched with canned GeoJSON.
"""

import pytest

from services.models import parse_feed
from services.state import AppState

# 2026-10-19 08:02:03 UTC
METADATA_TIME = 1792396923000


def make_feature(event_id, mag, lon=10.0, lat=20.0, place="Somewhere", time=1792396000000):
    return {
        "type": "Feature",
        "id": event_id,
        "properties": {"mag": mag, "place": place, "time": time},
        "geometry": {"type": "Point", "coordinates": [lon, lat, 10.0]},
    }


def make_feed(*mags):
    return {
        "type": "FeatureCollection",
        "metadata": {"generated": METADATA_TIME, "time": METADATA_TIME, "count": len(mags)},
        "features": [make_feature(f"us{i}", mag) for i, mag in enumerate(mags)],
    }


@pytest.fixture()
def feed():
    """Three events: magnitudes 3.2, 5.1 and 6.8."""
    return make_feed(3.2, 5.1, 6.8)


@pytest.fixture()
def state(feed):
    s = AppState()
    s.apply(parse_feed(feed))
    return s


@pytest.fixture()
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>quakes</body></html>")
    (tmp_path / "app.js").write_text("console.log('quakes');")
    return tmp_path


@pytest.fixture()
def client(state, static_dir):
    from app import create_app

    app = create_app(state=state, static_dir=str(static_dir))
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
