import pytest

from rssreader.core import Node


def tag(label, *children, **attrs):
    kids = [Node.text_node(c) if isinstance(c, str) else c for c in children]
    return Node(label, children=kids, attributes=attrs)


def make_channel(*items, title="Feed Title", desc="Feed Desc", link="http://example.com"):
    return tag(
        "channel",
        tag("title", title) if title is not None else tag("title"),
        tag("description", desc) if desc is not None else tag("description"),
        tag("link", link),
        *items,
    )


def make_rss(channel, version="2.0"):
    return tag("rss", channel, version=version)


SAMPLE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example News</title>
    <link>http://news.example.com</link>
    <description>Top stories</description>
    <!-- ignored -->
    <item>
      <title>First story</title>
      <link>http://news.example.com/1</link>
      <pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate>
      <source url="http://wire.example.com/rss">Wire</source>
    </item>
    <language>en</language>
    <item>
      <description>Second story summary</description>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "feed.xml"
    path.write_bytes(SAMPLE_XML)
    return path
