"""
Page model for the dashboard and the render cycle that paints it.

`Page` stands in for the browser's root element: the shell markup, the rover
button container, and any blocks appended after the shell (loading indicator,
gallery container). The Streamlit app paints it; tests inspect it directly.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from services.store import AppState

SHELL_TITLE = "Welcome to Mars dashboard"
SHELL_INTRO = "Each rover has its own set of photos. Select one of them to see more details."


@dataclass
class Element:
    id: str
    html: str = ""


class Page:
    def __init__(self, on_change: Optional[Callable[["Page"], None]] = None):
        self.shell = ""
        self.rover_buttons: Tuple[str, ...] = ()
        self.children: List[Element] = []
        self.on_change = on_change

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    def replace(self, shell: str) -> None:
        """Swap in a new shell and drop everything else (innerHTML = ...)."""
        self.shell = shell
        self.rover_buttons = ()
        self.children = []
        self._changed()

    def show_buttons(self, rovers: Tuple[str, ...]) -> None:
        self.rover_buttons = tuple(rovers)
        self._changed()

    def append(self, element: Element) -> Element:
        self.children.append(element)
        self._changed()
        return element

    def remove(self, element: Element) -> None:
        # no-op when a repaint already dropped it
        if any(child is element for child in self.children):
            self.children = [child for child in self.children if child is not element]
            self._changed()

    def find(self, element_id: str) -> Optional[Element]:
        return next((child for child in self.children if child.id == element_id), None)

    def set_html(self, element: Element, html: str) -> None:
        element.html = html
        self._changed()

    def __contains__(self, element_id: str) -> bool:
        return self.find(element_id) is not None

    def body_html(self) -> str:
        return "".join(child.html for child in self.children)


def shell_markup() -> str:
    return (
        "<main>"
        f'<h1 class="title">{SHELL_TITLE}</h1>'
        "<section>"
        f'<h3 class="intro">{SHELL_INTRO}</h3>'
        '<div id="rover-buttons"></div>'
        "</section>"
        "</main>"
    )


def render(page: Page, state: AppState) -> None:
    """Full repaint: shell first, then the rover buttons from state.

    Anything appended to the page before this call is gone afterwards.
    """
    page.replace(shell_markup())
    page.show_buttons(state.rovers)
