"""Gallery loader: fetch a rover's photos, then build and place the gallery markup."""

import html
import logging
from typing import Sequence, Union

from components.page import Element, Page
from components.wrappers import show_loader
from services import proxy_client
from services.rovers import DEFAULT_SOL
from services.store import Photo, Store

GALLERY_ID = "image-gallery-container"
NO_PHOTOS_HTML = "<p>No photos available for this rover.</p>"

logger = logging.getLogger(__name__)


def photo_grid_markup(photos: Sequence[Photo], rover_name: str) -> str:
    alt = html.escape(f"Photo taken by {rover_name} rover", quote=True)
    return "".join(
        '<div class="photo-details-container">'
        f"<p>Date photo were taken: {html.escape(str(photo.get('earth_date', '')))}</p>"
        f'<img class="photo" alt="{alt}" src="{html.escape(str(photo.get("img_src", "")), quote=True)}" loading="lazy" />'
        "</div>"
        for photo in photos
    )


def gallery_markup(name: str, photos: Sequence[Photo]) -> str:
    # upstream repeats the rover block on every photo; the first one is used
    rover = photos[0].get("rover") or {}
    return (
        '<div class="image-gallery">'
        f"<p>Name: {html.escape(name)}</p>"
        f"<p>Launch date: {html.escape(str(rover.get('launch_date', '')))}</p>"
        f"<p>Landing date: {html.escape(str(rover.get('landing_date', '')))}</p>"
        f"<p>Status: {html.escape(str(rover.get('status', '')))}</p>"
        f'<div class="photo-grid">{photo_grid_markup(photos, name)}</div>'
        "</div>"
    )


@show_loader
def image_gallery(page: Page, store: Store, name: str, sol: Union[int, str] = DEFAULT_SOL) -> str:
    container = page.find(GALLERY_ID)
    if container is not None:
        page.set_html(container, "")

    # the return value is error markup on failure; only the state update matters here
    proxy_client.get_rover_photos(store, name, sol)

    photos = store.state.photos
    if not photos:
        return NO_PHOTOS_HTML

    return gallery_markup(name, photos)


def show_rover_information(page: Page, store: Store, name: str, sol: Union[int, str] = DEFAULT_SOL) -> Element:
    """Load `name`'s gallery and put it in the page's gallery container.

    A successful fetch repaints the page and drops the old container, so the
    container is looked up again after loading and appended when missing.
    """
    gallery = image_gallery(page, store, name, sol)
    logger.info("Gallery for %s ready (%d photos)", name, len(store.state.photos))
    container = page.find(GALLERY_ID)
    if container is None:
        return page.append(Element(GALLERY_ID, gallery))
    page.set_html(container, gallery)
    return container
