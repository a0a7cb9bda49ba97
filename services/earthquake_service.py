"""
USGS Earthquake data service.
Fetches the most recent events from the USGS FDSN event query API.
"""

import logging

import requests

import config
from services.models import FeedSnapshot, parse_feed

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """The feed could not be fetched or parsed."""


def fetch_earthquakes() -> FeedSnapshot:
    """Fetch up to 100 most recent earthquakes from USGS."""
    try:
        resp = requests.get(
            config.USGS_QUERY_URL,
            params=config.USGS_QUERY_PARAMS,
            timeout=config.REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
        logger.debug("USGS payload: %s", data)
        return parse_feed(data)
    except requests.RequestException as e:
        raise FeedError(f"request failed: {e}") from e
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise FeedError(f"malformed response: {e!r}") from e


def refresh(state) -> bool:
    """Fetch and apply a new snapshot. Prior state is kept on failure."""
    try:
        snapshot = fetch_earthquakes()
    except FeedError as e:
        logger.error("Failed to fetch earthquake data: %s", e)
        return False
    state.apply(snapshot)
    logger.info(
        "Earthquake data refreshed: %d events, last updated %s",
        len(snapshot.events), snapshot.last_updated,
    )
    return True
