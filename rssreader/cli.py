from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence

from .converter import convert_to_file
from .core import FeedUnreachableError, StructuralError
from .parser.xml_tree import load_tree
from .validators import is_rss_v2

REJECTED = (
    "Your file was not found to be a valid RSS 2.0 feed.",
    "Please restart the program and try again.",
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rssreader",
        description="Convert an RSS 2.0 feed into an HTML table.",
    )
    p.add_argument("url", nargs="?", help="feed URL or local file (prompted for if omitted)")
    p.add_argument("-o", "--output", help="HTML file to write (prompted for if omitted)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    url = args.url or input("Please enter a valid URL of a RSS 2.0 feed: ")
    try:
        root = load_tree(url)
    except FeedUnreachableError as e:
        print(f"Could not read feed: {e}", file=sys.stderr)
        return 1

    if not is_rss_v2(root):
        for line in REJECTED:
            print(line)
        return 0

    output = args.output or input("Please enter a HTML file to serve as output: ")
    try:
        result = convert_to_file(root, output)
    except StructuralError as e:
        print(f"Feed is missing required elements: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Could not write {output}: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {result.item_count} item(s) from '{result.channel_title}' to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
