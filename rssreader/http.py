from __future__ import annotations
import logging
import os
import requests

logger = logging.getLogger(__name__)

UA = "rssreader/0.1 (+https://github.com/yourname/rssreader)"
HEADERS = {"User-Agent": UA, "Accept": "application/rss+xml, application/xml;q=0.9, */*;q=0.8"}
TIMEOUT = float(os.environ.get("RSSREADER_TIMEOUT", "10"))

def get(url: str, *, headers: dict | None = None) -> requests.Response:
    """GET a feed with the rssreader User-Agent; redirects are followed."""
    logger.debug("GET %s (timeout=%ss)", url, TIMEOUT)
    r = requests.get(url, headers={**HEADERS, **(headers or {})}, timeout=TIMEOUT)
    logger.debug("%s -> HTTP %s", url, r.status_code)
    return r
