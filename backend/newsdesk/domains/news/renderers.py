"""
Serialization of news items into the representations served publicly.

HTML goes through Jinja2 templates in the API layer; JSON and XML are produced
here so they can be reused and tested without a request.
"""

from __future__ import annotations

import enum
import json
from typing import Any, Dict, Iterable, Optional

from lxml import etree

from newsdesk.core.exceptions import UnsupportedFormatError
from newsdesk.models.news import NewsItem, NewsItemResponseSchema


class ResponseFormat(str, enum.Enum):
    HTML = "html"
    MOBILE = "mobile"
    JSON = "json"
    XML = "xml"

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self]

    @property
    def is_html(self) -> bool:
        return self in (ResponseFormat.HTML, ResponseFormat.MOBILE)


MEDIA_TYPES = {
    ResponseFormat.HTML: "text/html",
    ResponseFormat.MOBILE: "text/html",
    ResponseFormat.JSON: "application/json",
    ResponseFormat.XML: "application/xml",
}

ACCEPT_TYPES = (
    ("application/json", ResponseFormat.JSON),
    ("application/xml", ResponseFormat.XML),
    ("text/xml", ResponseFormat.XML),
)


def negotiate_format(
    requested: Optional[str] = None,
    accept: Optional[str] = None,
    *,
    is_mobile: bool = False,
) -> ResponseFormat:
    """
    Pick the representation for a read request.

    An explicit format (path suffix or ``format`` parameter) wins, then the
    Accept header, then HTML. HTML becomes the mobile variant when the request
    was classified as mobile.
    """
    if requested:
        try:
            chosen = ResponseFormat(requested.lower())
        except ValueError:
            raise UnsupportedFormatError(requested)
    else:
        chosen = _format_from_accept(accept)

    if chosen is ResponseFormat.HTML and is_mobile:
        return ResponseFormat.MOBILE
    return chosen


def _format_from_accept(accept: Optional[str]) -> ResponseFormat:
    if not accept or "text/html" in accept:
        return ResponseFormat.HTML
    for media_type, response_format in ACCEPT_TYPES:
        if media_type in accept:
            return response_format
    return ResponseFormat.HTML


def serialize_news_item(item: NewsItem) -> Dict[str, Any]:
    return NewsItemResponseSchema.model_validate(item).model_dump(mode="json")


def render_json(items: Iterable[NewsItem]) -> str:
    return json.dumps([serialize_news_item(item) for item in items])


def render_json_item(item: NewsItem) -> str:
    return json.dumps(serialize_news_item(item))


def _news_item_element(item: NewsItem) -> etree._Element:
    data = serialize_news_item(item)
    element = etree.Element("news-item")
    etree.SubElement(element, "id", type="integer").text = str(data["id"])
    etree.SubElement(element, "name").text = data["name"]
    etree.SubElement(element, "body").text = data["body"]
    etree.SubElement(element, "created-at", type="datetime").text = data["created_at"]
    etree.SubElement(element, "updated-at", type="datetime").text = data["updated_at"]
    return element


def _to_bytes(root: etree._Element) -> bytes:
    return etree.tostring(root, encoding="UTF-8", xml_declaration=True, pretty_print=True)


def render_xml(items: Iterable[NewsItem]) -> bytes:
    root = etree.Element("news-items", type="array")
    for item in items:
        root.append(_news_item_element(item))
    return _to_bytes(root)


def render_xml_item(item: NewsItem) -> bytes:
    return _to_bytes(_news_item_element(item))
