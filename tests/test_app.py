"""
Static file routes, 404 handling and the view endpoint.
"""


class TestStaticRoutes:
    def test_root_serves_index(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.mimetype == "text/html"
        assert b"quakes" in r.data

    def test_index_html(self, client):
        r = client.get("/index.html")
        assert r.status_code == 200
        assert r.data == b"<html><body>quakes</body></html>"

    def test_app_js(self, client):
        r = client.get("/app.js")
        assert r.status_code == 200
        assert r.mimetype == "application/javascript"
        assert r.data == b"console.log('quakes');"

    def test_no_cache_headers(self, client):
        r = client.get("/app.js")
        assert "Cache-Control" not in r.headers
        assert "ETag" not in r.headers


class TestNotFound:
    def test_unknown_path(self, client):
        r = client.get("/missing.txt")
        assert r.status_code == 404
        assert r.mimetype == "text/plain"
        assert r.data == b"404 Not Found"

    def test_static_folder_disabled(self, client):
        assert client.get("/static/app.js").status_code == 404

    def test_missing_file(self, client, static_dir):
        (static_dir / "app.js").unlink()
        r = client.get("/app.js")
        assert r.status_code == 404
        assert r.data == b"404 Not Found"

    def test_missing_index(self, client, static_dir):
        (static_dir / "index.html").unlink()
        assert client.get("/").status_code == 404


class TestEarthquakeView:
    def test_view_keys(self, client):
        data = client.get("/api/earthquakes").get_json()
        for key in ("lastUpdated", "count", "map", "markers", "chart", "highlightStyle"):
            assert key in data

    def test_markers_and_bars(self, client):
        data = client.get("/api/earthquakes").get_json()
        assert data["count"] == 3
        assert [m["color"] for m in data["markers"]] == ["#90EE90", "#FF8000", "#FF0000"]
        assert [(b["magnitude"], b["count"]) for b in data["chart"]["bars"]] == [(3, 1), (5, 1), (6, 1)]
        assert data["chart"]["figure"]["data"][0]["type"] == "bar"
        assert data["highlightStyle"] == {"weight": 5, "color": "#0000FF"}

    def test_map_options(self, client):
        options = client.get("/api/earthquakes").get_json()["map"]
        assert options["center"] == [20, 0]
        assert options["zoom"] == 2
        assert options["maxBounds"] == [[-90, -180], [90, 180]]

    def test_empty_state(self, static_dir):
        from app import create_app

        app = create_app(static_dir=str(static_dir))
        data = app.test_client().get("/api/earthquakes").get_json()
        assert data["lastUpdated"] == ""
        assert data["markers"] == []
        assert data["chart"]["bars"] == []

    def test_hover_payload_for_bucket_five(self, static_dir):
        from app import create_app
        from services.models import parse_feed
        from services.state import AppState
        from tests.conftest import make_feed

        state = AppState()
        state.apply(parse_feed(make_feed(3.2, 5.1, 5.7, 6.8, 5.0)))
        data = create_app(state, str(static_dir)).test_client().get("/api/earthquakes").get_json()

        bucket_five = next(b for b in data["chart"]["bars"] if b["magnitude"] == 5)
        assert bucket_five["markerIds"] == ["us1", "us2", "us4"]
        assert data["highlightStyle"] == {"weight": 5, "color": "#0000FF"}

    def test_duplicate_ids_still_one_marker_per_event(self, static_dir):
        from app import create_app
        from services.models import parse_feed
        from services.state import AppState
        from tests.conftest import make_feed

        feed = make_feed(3.2, 5.1, 6.8)
        for feature in feed["features"]:
            feature["id"] = "same"
        state = AppState()
        state.apply(parse_feed(feed))
        data = create_app(state, str(static_dir)).test_client().get("/api/earthquakes").get_json()

        assert len(data["markers"]) == 3
        marker_ids = {m["id"] for m in data["markers"]}
        assert {i for b in data["chart"]["bars"] for i in b["markerIds"]} == marker_ids
