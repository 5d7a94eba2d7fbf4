import logging
from typing import Union

import requests

from services.config import config

ROVERS = ("Curiosity", "Opportunity", "Spirit")
DEFAULT_SOL = 1000

logger = logging.getLogger(__name__)


def photos_url(name: str) -> str:
    return f"{config.mars_photos_api_url}/rovers/{name}/photos"


def fetch_photos(name: str, sol: Union[int, str] = DEFAULT_SOL) -> bytes:
    """Fetch one sol of photos for a rover from the NASA API; returns the raw JSON body.

    Raises for HTTP errors and for bodies that do not decode as JSON.
    """
    # name and sol go upstream as given; NASA answers unknown rovers itself
    params = {
        "sol": sol,
        "api_key": config.api_key,
    }
    logger.info("Fetching photos for %s on sol %s", name, sol)
    r = requests.get(photos_url(name), params=params, timeout=config.upstream_timeout)
    r.raise_for_status()
    r.json()  # rejects non-JSON bodies; the bytes are passed on untouched
    return r.content
