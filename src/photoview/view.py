"""
Gallery view

Renders the thumbnail grid and the lightbox into a container of a
BeautifulSoup document and drives the lightbox from delegated clicks.
"""

import logging
from typing import Any

from bs4 import BeautifulSoup, Tag

from photoview.exceptions import PhotoViewError
from photoview.logger import logger as event_logger
from photoview.providers.flickr import FlickrProvider
from photoview.schemas.photo import Photo
from photoview.templates import LARGE_PHOTO_TEMPLATE, PHOTO_VIEW_TEMPLATE, SMALL_PHOTO_TEMPLATE, render

logger = logging.getLogger(__name__)

HIDDEN_CLASS = "hidden"
OPEN_BODY_CLASS = "photo-view-open"


def _classes(tag: Tag) -> list[str]:
    value = tag.get("class") or []
    return value.split() if isinstance(value, str) else list(value)


def _has_class(tag: Tag, name: str) -> bool:
    return name in _classes(tag)


def _add_class(tag: Tag, name: str) -> None:
    classes = _classes(tag)
    if name not in classes:
        tag["class"] = [*classes, name]


def _remove_class(tag: Tag, name: str) -> None:
    classes = [c for c in _classes(tag) if c != name]
    if classes:
        tag["class"] = classes
    elif tag.has_attr("class"):
        del tag["class"]


def _append_html(tag: Tag, markup: str) -> None:
    """Same as insertAdjacentHTML('beforeend', markup)"""
    fragment = BeautifulSoup(markup, "html.parser")
    for node in list(fragment.contents):
        tag.append(node.extract())


class GalleryView:
    """Thumbnail grid plus lightbox for the photos of one provider

    Args:
        document: The parsed page the gallery lives in
        container: CSS selector of the node to render into
        service: The provider photos are fetched from
    """

    def __init__(self, document: BeautifulSoup, container: str, service: FlickrProvider):
        self.document = document
        self.service = service
        node = document.select_one(container)
        if node is None:
            raise ValueError(f"No element matches container selector {container!r}")
        self.container: Tag = node

        self.current_index: int | None = None
        self.backdrop: Tag | None = None
        self.panel: Tag | None = None
        self.figure: Tag | None = None
        self.grid: Tag | None = None
        self._loading = False

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_open(self) -> bool:
        return self.panel is not None and not _has_class(self.panel, HIDDEN_CLASS)

    async def load(self, **params: Any) -> list[Photo]:
        """Fetch photos from the service and render them.

        A call made while a previous load is still waiting on the network is
        rejected. Returns the rendered photos, or an empty list when nothing
        was rendered.
        """
        if self._loading:
            event_logger.log_event("load_rejected", container=self.container.get("id"))
            logger.warning("Gallery load already in progress, ignoring this call")
            return []

        self._loading = True
        try:
            photos = await self.service.fetch(**params)
        except PhotoViewError as e:
            event_logger.log_event("photos_fetch_failed", error=str(e), status=getattr(e, "status_code", None))
            logger.error(f"Failed to load photos: {e}")
            return []
        finally:
            self._loading = False

        self._render(photos)
        return photos

    def build_html(self, photos: list[Photo]) -> str:
        html = PHOTO_VIEW_TEMPLATE
        html += '<ul class="photo-grid">'
        for photo in photos:
            html += render(SMALL_PHOTO_TEMPLATE, photo.model_dump())
        html += "</ul>"
        return html

    def _render(self, photos: list[Photo]) -> None:
        if self.grid is not None:
            # Replace a previous render instead of stacking a second grid
            self.close()
            for node in (self.backdrop, self.panel, self.grid):
                if node is not None:
                    node.decompose()
            self.current_index = None

        _append_html(self.container, self.build_html(photos))

        self.backdrop = self.container.select_one(".photo-view-backdrop")
        self.panel = self.container.select_one(".photo-view")
        self.figure = self.panel.select_one("figure") if self.panel is not None else None
        self.grid = self.container.select_one(".photo-grid")
        logger.info(f"Rendered {len(photos)} photos into the gallery")

    def click(self, target: Tag) -> None:
        """Handle a click on ``target``, as the container's delegated listener would."""
        if not any(parent is self.container for parent in target.parents):
            return

        if _has_class(target, "large-photo"):
            self.close()
            return

        if target.name == "button" and _has_class(target, "prev"):
            self.prev()
            return

        if target.name == "button" and _has_class(target, "next"):
            self.next()
            return

        item = target if target.name == "li" and _has_class(target, "photo") else target.find_parent("li", class_="photo")
        if item is None:
            return

        try:
            index = int(str(item.get("data-index", "")))
        except ValueError:
            logger.warning(f"Thumbnail without a usable data-index: {item.get('data-index')!r}")
            return

        self.open(self.service.get_photo(index))

    def open(self, photo: Photo | None) -> None:
        if photo is None:
            return
        if self.figure is None or self.backdrop is None or self.panel is None:
            logger.warning("Cannot open a photo before the gallery has been rendered")
            return

        self.figure.clear()
        _append_html(self.figure, render(LARGE_PHOTO_TEMPLATE, photo.model_dump()))
        self.current_index = photo.index

        if self.document.body is not None:
            _add_class(self.document.body, OPEN_BODY_CLASS)
        _remove_class(self.backdrop, HIDDEN_CLASS)
        _remove_class(self.panel, HIDDEN_CLASS)
        event_logger.log_event("photo_opened", index=photo.index, photo_id=photo.id)

    def close(self) -> None:
        if self.figure is None or self.backdrop is None or self.panel is None:
            return

        self.figure.clear()

        if self.document.body is not None:
            _remove_class(self.document.body, OPEN_BODY_CLASS)
        _add_class(self.backdrop, HIDDEN_CLASS)
        _add_class(self.panel, HIDDEN_CLASS)

    def prev(self) -> None:
        if self.current_index is None or not self.is_open:
            return
        self.open(self.service.get_photo(self.current_index - 1))

    def next(self) -> None:
        if self.current_index is None or not self.is_open:
            return
        self.open(self.service.get_photo(self.current_index + 1))


__all__ = ["GalleryView"]
