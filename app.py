"""
Quake Monitor
Near-real-time earthquake map and magnitude chart over the USGS event feed.

Usage:
    pip install -e .
    python app.py
"""

import logging
import os

from flask import Flask, Response, jsonify

import config
from services.earthquake_service import refresh
from services.scheduler import RefreshScheduler
from services.state import AppState

logging.basicConfig(
    level=logging.DEBUG if config.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

NOT_FOUND = "404 Not Found"


def _not_found():
    return Response(NOT_FOUND, status=404, mimetype="text/plain")


def _serve_file(static_dir: str, filename: str, mimetype: str):
    """Return a file's contents, or 404 if it cannot be read."""
    path = os.path.join(static_dir, filename)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return _not_found()
    return Response(data, status=200, mimetype=mimetype)


def create_app(state: AppState | None = None, static_dir: str | None = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config["STATE"] = state if state is not None else AppState()
    app.config["STATIC_DIR"] = static_dir or config.STATIC_DIR

    # -----------------------------------------------------------------------
    # Page routes
    # -----------------------------------------------------------------------
    @app.route("/")
    @app.route("/index.html")
    def index():
        """Main map page."""
        return _serve_file(app.config["STATIC_DIR"], "index.html", "text/html")

    @app.route("/app.js")
    def app_js():
        """Browser client script."""
        return _serve_file(app.config["STATIC_DIR"], "app.js", "application/javascript")

    # -----------------------------------------------------------------------
    # API routes
    # -----------------------------------------------------------------------
    @app.route("/api/earthquakes")
    def api_earthquakes():
        """Current markers, chart and last-updated time."""
        return jsonify(app.config["STATE"].view())

    @app.errorhandler(404)
    def not_found(_e):
        return _not_found()

    return app


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    state = AppState()
    app = create_app(state)

    scheduler = RefreshScheduler(lambda: refresh(state), config.REFRESH_INTERVAL,
                                 name="earthquake refresh")
    scheduler.start()

    logger.info("Server is running on http://%s:%d", config.HOST, config.PORT)
    # Reloader would start a second scheduler
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, use_reloader=False)
