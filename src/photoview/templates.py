"""HTML fragments rendered by GalleryView."""

from collections.abc import Mapping
from typing import Any

from markupsafe import escape

from photoview.patterns import apply_patterns

SMALL_PHOTO_TEMPLATE = '<li class="photo" data-id="{id}" data-index="{index}"><figure><img src="{small_url}" alt="{title}"></figure></li>'

PHOTO_VIEW_TEMPLATE = (
    '<div class="photo-view-backdrop hidden" aria-hidden="true"></div>'
    '<aside class="photo-view hidden">'
    '<div class="inner">'
    "<figure></figure>"
    '<button class="prev" title="Previous photo"></button>'
    '<button class="next" title="Next photo"></button>'
    "</div>"
    "</aside>"
)

LARGE_PHOTO_TEMPLATE = '<img class="large-photo" src="{large_url}" alt="{title}"><figcaption>{title}</figcaption>'


def render(template: str, data: Mapping[str, Any]) -> str:
    """apply_patterns with every value HTML-escaped"""
    return apply_patterns(template, {k: escape(v) for k, v in data.items() if v is not None})
