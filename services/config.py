"""
Environment configuration shared by the proxy and the dashboard.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

MARS_PHOTOS_API = "https://api.nasa.gov/mars-photos/api/v1"
DEFAULT_PROXY_URL = "http://localhost:3000"
PORT = 3000
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Config:
    """Reads settings from the environment, after loading a .env file if one exists."""

    def __init__(self, env_file: Optional[Path] = None):
        if env_file is None:
            current = Path.cwd()
            for parent in [current] + list(current.parents):
                env_path = parent / ".env"
                if env_path.exists():
                    env_file = env_path
                    break

        if env_file and env_file.exists():
            load_dotenv(env_file)
            logger.info("Loaded environment from %s", env_file)
        else:
            logger.debug("No .env file found - using environment variables only")

    @property
    def api_key(self) -> str:
        """Upstream credential; never sent to the dashboard."""
        key = os.getenv("API_KEY", "")
        if not key:
            logger.warning("API_KEY is not set; upstream requests will be rejected")
        return key

    @property
    def mars_photos_api_url(self) -> str:
        return os.getenv("MARS_PHOTOS_API_URL", MARS_PHOTOS_API).rstrip("/")

    @property
    def upstream_timeout(self) -> Optional[float]:
        # unset means requests waits forever
        value = os.getenv("UPSTREAM_TIMEOUT", "").strip()
        if not value:
            return None
        try:
            return float(value)
        except ValueError:
            logger.warning("Ignoring invalid UPSTREAM_TIMEOUT=%r", value)
            return None

    @property
    def proxy_url(self) -> str:
        return os.getenv("ROVER_PROXY_URL", DEFAULT_PROXY_URL).rstrip("/")

    @property
    def public_dir(self) -> Path:
        return Path(os.getenv("PUBLIC_DIR", str(PROJECT_ROOT / "public")))


config = Config()
