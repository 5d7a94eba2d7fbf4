import logging
from typing import Union

import requests
import streamlit as st

from components.wrappers import show_error
from services.config import config
from services.rovers import DEFAULT_SOL
from services.store import Store

logger = logging.getLogger(__name__)


def _proxy_url() -> str:
    try:
        return st.secrets["proxy"]["url"].rstrip("/")
    except Exception:
        return config.proxy_url


@show_error
def get_rover_photos(store: Store, name: str, sol: Union[int, str] = DEFAULT_SOL) -> None:
    """Load a rover's photos through the proxy into the store.

    Failures are logged and turned into error markup by `show_error`; the store
    keeps its previous photos in that case.
    """
    logger.debug("Requesting %s photos for sol %s from proxy", name, sol)
    r = requests.get(f"{_proxy_url()}/rovers/{name}", params={"sol": sol})
    r.raise_for_status()
    data = r.json()
    store.update(photos=tuple(data.get("photos") or ()))


@st.cache_data(show_spinner=False, ttl=30)  # probed at most every 30 s, not on each rerun
def proxy_is_up() -> bool:
    try:
        r = requests.get(f"{_proxy_url()}/healthz", timeout=5)
        return r.ok
    except requests.RequestException:
        return False
