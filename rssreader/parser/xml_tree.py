from __future__ import annotations
import logging
import urllib.parse
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

import requests

from ..core import FeedUnreachableError, Node
from ..http import get
from ..validators import looks_like_feed_bytes

logger = logging.getLogger(__name__)


def load_tree(source: str) -> Node:
    """Fetch (URL) or read (path / file:// URI) an XML document and parse it"""
    source = (source or "").strip()
    if not source:
        raise FeedUnreachableError(source, "empty input")

    data = _read_source(source)
    if not looks_like_feed_bytes(data):
        logger.warning("%s does not look like an RSS document", source)

    try:
        return parse_tree(data)
    except ET.ParseError as e:
        raise FeedUnreachableError(source, f"malformed XML: {e}") from e


def parse_tree(data: bytes) -> Node:
    root = ET.fromstring(data)
    logger.debug("parsed <%s> (%d bytes)", root.tag, len(data))
    return _to_node(root)


def _read_source(source: str) -> bytes:
    scheme = urllib.parse.urlparse(source).scheme.lower()

    if scheme in ("http", "https"):
        try:
            r = get(source)
        except requests.RequestException as e:
            raise FeedUnreachableError(source, str(e)) from e
        if r.status_code >= 400:
            raise FeedUnreachableError(source, f"HTTP {r.status_code}")
        return r.content

    if scheme == "file":
        path = Path(urllib.parse.unquote(urllib.parse.urlparse(source).path))
    else:
        path = Path(source)

    logger.debug("reading %s", path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FeedUnreachableError(source, str(e)) from e


def _to_node(element: ET.Element) -> Node:
    children: List[Node] = []
    _append_text(children, element.text)
    for child in element:
        # ElementTree only yields comments/PIs when asked to; skip them anyway
        if isinstance(child.tag, str):
            children.append(_to_node(child))
        _append_text(children, child.tail)
    return Node(element.tag, children=children, attributes=element.attrib)


def _append_text(children: List[Node], text: str | None) -> None:
    if text and text.strip():
        children.append(Node.text_node(text.strip()))
