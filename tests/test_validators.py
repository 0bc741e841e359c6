import pytest

from conftest import tag
from rssreader.core import FeedValidationError
from rssreader.validators import is_rss_v2, looks_like_feed_bytes, require_rss_v2


@pytest.mark.parametrize(
    "root, ok",
    [
        (tag("rss", version="2.0"), True),
        (tag("rss", version="1.0"), False),
        (tag("rss"), False),
        (tag("feed", version="2.0"), False),
    ],
)
def test_is_rss_v2(root, ok):
    assert is_rss_v2(root) is ok


def test_require_rss_v2_raises():
    with pytest.raises(FeedValidationError):
        require_rss_v2(tag("rss", version="0.92"))


def test_looks_like_feed_bytes():
    assert looks_like_feed_bytes(b'<?xml version="1.0"?><RSS version="2.0">')
    assert not looks_like_feed_bytes(b"<html><body>hi</body></html>")
