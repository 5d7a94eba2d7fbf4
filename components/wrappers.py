import functools
import html
import logging
from typing import Any, Callable

from components.page import Element, Page

LOADING_ID = "loading-indicator"
LOADING_HTML = "<div><p>Loading...</p></div>"

logger = logging.getLogger(__name__)


def show_loader(func: Callable[..., Any]) -> Callable[..., Any]:
    """Show a loading indicator on the page (first argument) while `func` runs.

    The indicator is removed whether the call returns or raises; errors are re-raised.
    """
    @functools.wraps(func)
    def wrapper(page: Page, *args, **kwargs):
        indicator = page.append(Element(LOADING_ID, LOADING_HTML))
        try:
            return func(page, *args, **kwargs)
        finally:
            page.remove(indicator)

    return wrapper


def show_error(func: Callable[..., Any]) -> Callable[..., Any]:
    """Log any failure of `func` and return error markup instead of raising."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error("An error occurred: %s", e)
            return f'<div class="error">An error occurred: {html.escape(str(e))}</div>'

    return wrapper
