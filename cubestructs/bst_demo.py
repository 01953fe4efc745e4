"""A walk through the BST-backed Dictionary: inserts, lookups and removals."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .dictionary import Dictionary

_DEMO_ITEMS = (
    (37, "thirty seven"),
    (19, "nineteen"),
    (51, "fifty one"),
    (55, "fifty five"),
    (4, "four"),
    (11, "eleven"),
    (20, "twenty"),
    (2, "two"),
)

_MISSING_MESSAGES = {
    "find": "error: key not found",
    "remove": "error: remove() used on non-existent key",
}


def _attempt_missing(out: TextIO, tree: Dictionary, action: str, key: int) -> None:
    print(f"Attempting to {action} a non-existent item, {key}: ", file=out)
    out.write(f"t.{action}({key}): ")
    try:
        value = getattr(tree, action)(key)
    except KeyError:
        print(file=out)
        print(
            f"Caught exception with error message: {_MISSING_MESSAGES[action]}",
            file=out,
        )
    else:
        print(value, file=out)


def run_demo(out: TextIO) -> None:
    """Write the whole demonstration to the text stream ``out``."""
    tree = Dictionary()
    print(
        f"Dictionary empty at the beginning? {str(tree.empty()).lower()}", file=out
    )

    print("Inserting items...", file=out)
    for key, data in _DEMO_ITEMS:
        tree.insert(key, data)

    print(
        f"Dictionary empty after insertions? {str(tree.empty()).lower()}", file=out
    )

    print("Current tree contents in order:", file=out)
    print(tree.format_in_order(), file=out)

    print("Using find to show that 51 has been inserted:", file=out)
    print(f"t.find(51): {tree.find(51)}", file=out)

    print("Trying to remove some items:", file=out)
    print(f"t.remove(11): {tree.remove(11)} (zero child remove)", file=out)
    print(f"t.remove(51): {tree.remove(51)} (one child remove)", file=out)
    print(f"t.remove(19): {tree.remove(19)} (two child remove)", file=out)

    print("Current tree contents in order:", file=out)
    print(tree.format_in_order(), file=out)

    _attempt_missing(out, tree, "find", 51)
    _attempt_missing(out, tree, "remove", 99)

    tree.clear()
    print("Exiting program normally.", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run the dictionary demonstration on standard output."""
    parser = argparse.ArgumentParser(description="Demonstrate the BST dictionary.")
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0