from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class RSSReaderError(Exception):
    """Base class for every error raised by rssreader."""


class FeedValidationError(RSSReaderError):
    """Root is not an <rss version="2.0"> element."""


class StructuralError(RSSReaderError):
    """A required element of an otherwise valid feed is missing."""


class FeedUnreachableError(RSSReaderError):
    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True)
class Node:
    """
    One node of a parsed XML document.

    Tag nodes carry a tag name as label plus attributes; text nodes carry the
    literal text as label and have neither children nor attributes.
    """
    label: str
    is_tag: bool = True
    children: Tuple["Node", ...] = ()
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def text_node(cls, text: str) -> "Node":
        return cls(text, is_tag=False)

    @property
    def text(self) -> str:
        # text value of a tag is its first child's label
        return self.children[0].label if self.children else ""

    def attribute(self, name: str, default: str = "") -> str:
        return self.attributes.get(name, default)


@dataclass
class ConversionResult:
    channel_title: str
    item_count: int
    output_path: Optional[str] = None
