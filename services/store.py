"""Application state: immutable snapshots owned by a single Store."""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Optional, Tuple, TypedDict

from services.rovers import ROVERS

logger = logging.getLogger(__name__)


class RoverInfo(TypedDict, total=False):
    launch_date: str
    landing_date: str
    status: str


class Photo(TypedDict, total=False):
    img_src: str
    earth_date: str
    rover: RoverInfo


@dataclass(frozen=True)
class AppState:
    rovers: Tuple[str, ...] = ROVERS
    photos: Tuple[Photo, ...] = ()

    def merge(self, **partial: Any) -> "AppState":
        """Return a new snapshot with the named fields replaced."""
        known = {f.name for f in fields(self)}
        unknown = set(partial) - known
        if unknown:
            raise TypeError(f"Unknown state fields: {', '.join(sorted(unknown))}")
        return replace(self, **partial)


Listener = Callable[[AppState], Any]


class Store:
    """Holds the current AppState and repaints through `on_change` after each update."""

    def __init__(self, state: Optional[AppState] = None, on_change: Optional[Listener] = None):
        self._state = state if state is not None else AppState()
        self.on_change = on_change

    @property
    def state(self) -> AppState:
        return self._state

    def update(self, **partial: Any) -> AppState:
        self._state = self._state.merge(**partial)
        logger.debug("State updated: %s", ", ".join(partial))
        if self.on_change is not None:
            self.on_change(self._state)
        return self._state
