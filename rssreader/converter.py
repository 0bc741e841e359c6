from __future__ import annotations
import io
import logging
from typing import Optional, TextIO

from .core import ConversionResult, Node, StructuralError
from .validators import require_rss_v2

logger = logging.getLogger(__name__)

NO_DATE = "No date available"
NO_SOURCE = "No source available"
NO_TITLE = "No title/description available"


def find_child(node: Node, tag: str) -> Optional[int]:
    """
    Index of the last direct child of ``node`` labelled ``tag``, or None.

    Every child is visited and a later match overwrites an earlier one.
    """
    assert node.is_tag, "node must be a tag"
    index = None
    for i, child in enumerate(node.children):
        if child.label == tag:
            index = i
    return index


def _required(node: Node, tag: str) -> Node:
    index = find_child(node, tag)
    if index is None:
        raise StructuralError(f"<{node.label}> has no <{tag}> element")
    return node.children[index]


def _println(sink: TextIO, line: str) -> None:
    sink.write(line + "\n")


def emit_header(channel: Node, sink: TextIO) -> None:
    """Write <html> through the table header row for ``channel``."""
    assert channel.is_tag and channel.label == "channel", "expected a <channel> tag"

    title_text = _required(channel, "title").text
    desc_text = _required(channel, "description").text
    link = _required(channel, "link")
    if not link.children:
        raise StructuralError("<channel> has an empty <link> element")
    link_url = link.text

    for line in (
        "<html>",
        "<head>",
        "<title>",
        title_text,
        "</title>",
        "</head>",
        "<body>",
        f' <h1><a href="{link_url}">{title_text}</a></h1>',
        f" <p>{desc_text}</p>",
        ' <table border="1">',
        "  <tr>",
        "   <th>Date</th>",
        "   <th>Source</th>",
        "   <th>News</th>",
        "  </tr>",
    ):
        _println(sink, line)


def _anchor_cell(text: str, href: str) -> str:
    return f'   <td><a href="{href}">{text}</a></td>'


def _cell(text: str, href: str = "") -> str:
    # an empty link means bare text
    if href:
        return _anchor_cell(text, href)
    return f"   <td>{text}</td>"


def emit_item_row(item: Node, sink: TextIO) -> None:
    """Write one table row: date, source and title (or description) of ``item``."""
    assert item.is_tag and item.label == "item", "expected an <item> tag"

    index_date = find_child(item, "pubDate")
    index_title = find_child(item, "title")
    index_desc = None
    if index_title is None:
        index_desc = find_child(item, "description")
    index_source = find_child(item, "source")
    index_link = find_child(item, "link")

    _println(sink, "  <tr>")

    if index_date is not None:
        _println(sink, _cell(item.children[index_date].text))
    else:
        _println(sink, _cell(NO_DATE))

    if index_source is not None:
        source = item.children[index_source]
        # a present <source> is always a link, even with no url
        _println(sink, _anchor_cell(source.text, source.attribute("url")))
    else:
        _println(sink, _cell(NO_SOURCE))

    link_url = ""
    if index_link is not None:
        link_url = item.children[index_link].text

    if index_title is not None and item.children[index_title].children:
        _println(sink, _cell(item.children[index_title].text, link_url))
    elif index_desc is not None and item.children[index_desc].children:
        _println(sink, _cell(item.children[index_desc].text, link_url))
    else:
        _println(sink, _cell(NO_TITLE))

    logger.debug("row: date=%s source=%s title=%s desc=%s link=%r",
                 index_date, index_source, index_title, index_desc, link_url)
    _println(sink, "  </tr>")


def emit_footer(sink: TextIO) -> None:
    _println(sink, " </table>")
    _println(sink, "</body>")
    _println(sink, "</html>")


def _channel_of(root: Node) -> Node:
    if not root.children:
        raise StructuralError("<rss> has no children")
    channel = root.children[0]
    if not (channel.is_tag and channel.label == "channel"):
        raise StructuralError(f"expected <channel> as first child of <rss>, got {channel.label!r}")
    return channel


def convert(root: Node, sink: TextIO) -> ConversionResult:
    """
    Render a parsed RSS 2.0 document as an HTML table into ``sink``.

    Raises FeedValidationError before writing anything if ``root`` is not
    <rss version="2.0">, and StructuralError if the channel lacks one of its
    required elements. ``sink`` is left open.
    """
    require_rss_v2(root)
    channel = _channel_of(root)

    emit_header(channel, sink)
    count = 0
    for child in channel.children:
        if child.is_tag and child.label == "item":
            emit_item_row(child, sink)
            count += 1
    emit_footer(sink)

    logger.debug("rendered %d item(s)", count)
    return ConversionResult(channel_title=_required(channel, "title").text, item_count=count)


def convert_to_string(root: Node) -> str:
    buf = io.StringIO()
    convert(root, buf)
    return buf.getvalue()


def convert_to_file(root: Node, path: str) -> ConversionResult:
    # render before opening: a rejected or broken feed must not leave a file behind
    buf = io.StringIO()
    result = convert(root, buf)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(buf.getvalue())
    result.output_path = path
    logger.debug("wrote %s", path)
    return result
