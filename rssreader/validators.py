from __future__ import annotations
from .core import FeedValidationError, Node

# quick content sniff
_RSS_MARKERS = (b"<rss",)

def looks_like_feed_bytes(b: bytes) -> bool:
    sniff = b[:20480].lower()
    return any(tag in sniff for tag in _RSS_MARKERS)

def is_rss_v2(root: Node) -> bool:
    return root.is_tag and root.label == "rss" and root.attribute("version", None) == "2.0"

def require_rss_v2(root: Node) -> None:
    if not is_rss_v2(root):
        raise FeedValidationError(
            f"expected <rss version=\"2.0\">, got <{root.label} version={root.attribute('version', None)!r}>"
        )
