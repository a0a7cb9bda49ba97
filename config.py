"""
Quake Monitor - Configuration
Near-real-time USGS earthquake map and magnitude chart.
"""

import os

# --- Server ---
HOST = os.environ.get("QW_HOST", "0.0.0.0")
PORT = int(os.environ.get("QW_PORT", "3000"))
DEBUG = os.environ.get("QW_DEBUG", "false").lower() == "true"

# --- Static assets (index.html, app.js) ---
STATIC_DIR = os.environ.get(
    "QW_STATIC_DIR", os.path.join(os.path.dirname(__file__), "static")
)

# --- Data refresh ---
REFRESH_INTERVAL = int(os.environ.get("QW_REFRESH_INTERVAL", "60"))  # 1 min
# Unset means no timeout (transport default)
_timeout = os.environ.get("QW_REQUEST_TIMEOUT", "")
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

# --- USGS FDSN event query ---
USGS_QUERY_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"
USGS_QUERY_PARAMS = {
    "format": "geojson",
    "limit": 100,
    "orderby": "time",
}

# --- Magnitude colour tiers (lower bound is exclusive) ---
MAGNITUDE_COLORS = [
    (6, "#FF0000"),   # severe
    (5, "#FF8000"),   # strong
    (4, "#FFFF00"),   # moderate
    (3, "#90EE90"),   # light
]
MINOR_COLOR = "#00FF00"

# --- Map ---
MAP_CENTER = [20, 0]
MAP_ZOOM = 2
MAP_MAX_BOUNDS = [[-90, -180], [90, 180]]
TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    'Map data &copy; <a href="https://openstreetmap.org">OpenStreetMap</a> contributors'
)
MARKER_FILL_OPACITY = 0.5
MARKER_WEIGHT = 1
HIGHLIGHT_STYLE = {"weight": 5, "color": "#0000FF"}

# --- Chart ---
CHART_WIDTH = 300
CHART_HEIGHT = 200
CHART_MARGIN = {"top": 20, "right": 30, "bottom": 40, "left": 40}
CHART_TITLE = "Earthquake Magnitude Counts"
BAR_HOVER_COLOR = "#FF6347"
CHART_BAR_GAP = 0.1
