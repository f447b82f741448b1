# SPDX-License-Identifier: MIT
"""Tokenizer turning a free-form version string into an item tree.

Parsing is total: any string, including the empty one, yields a tree.
Characters that are not digits or delimiters end up in qualifier items.

Delimiters:
- "." ends the current token; the next token stays in the same list
- "-" ends the current token; after a numeric token followed by a digit
  it opens a nested list, so "1-1" sorts differently from "1.1"
- "*" is a wildcard item
- whitespace ends the current token
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .items import (
    ZERO,
    WILDCARD,
    IntegerItem,
    Item,
    ListItem,
    StringItem,
    is_null,
)

logger = logging.getLogger(__name__)

SNAPSHOT_MARKER = "-SNAPSHOT"

# Non-breaking spaces are part of a token, not separators
NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f")

# Trailing "-SNAPSHOT" or "-yyyyMMdd.HHmmss-N", optionally followed by " (comment)"
SNAPSHOT_PATTERN = re.compile(
    r"^.*((?:-\d{8}\.\d{6}-\d+)|-SNAPSHOT)( \(.*\))?$",
    re.ASCII,
)


def extract_snapshot(version: str) -> tuple[str, Optional[str]]:
    """Split the snapshot marker off a raw version string.

    Args:
        version: The raw version string

    Returns:
        A ``(text, snapshot)`` pair. ``text`` is the string to tokenize, with
        any snapshot marker (and trailing comment) replaced by "-SNAPSHOT".
        ``snapshot`` is the matched marker, or None for a release.

    Examples:
        >>> extract_snapshot("2.0.3-20170207.105042-1")
        ('2.0.3-SNAPSHOT', '-20170207.105042-1')
        >>> extract_snapshot("1.12-SNAPSHOT (private-08/24/2008 12:13-hudson)")
        ('1.12-SNAPSHOT', '-SNAPSHOT')
        >>> extract_snapshot("1.12")
        ('1.12', None)
    """
    match = SNAPSHOT_PATTERN.fullmatch(version)
    if not match:
        return version, None

    snapshot = match.group(1)
    logger.debug("Found snapshot marker %r in %r", snapshot, version)
    return version[: match.start(1)] + SNAPSHOT_MARKER, snapshot


def _token_item(is_digit: bool, token: str) -> Item:
    return IntegerItem(int(token)) if is_digit else StringItem.from_token(token)


def _normalize(items: list) -> None:
    """Strip trailing null items in place."""
    while items and _is_null_entry(items[-1]):
        items.pop()


def _is_null_entry(entry) -> bool:
    # Nested lists are still mutable while the parse is in progress
    if isinstance(entry, list):
        return not entry
    return is_null(entry)


def _freeze(items: list) -> ListItem:
    return ListItem(
        tuple(_freeze(entry) if isinstance(entry, list) else entry for entry in items)
    )


def parse_items(version: str) -> ListItem:
    """Tokenize a lower-cased version string into its root list.

    Args:
        version: Version text with the snapshot marker already rewritten

    Returns:
        The normalized root ListItem

    Examples:
        >>> str(parse_items("1.0.0"))
        '(1)'
        >>> str(parse_items("1-1"))
        '(1,(1))'
        >>> str(parse_items("2.0.ea1"))
        '(2,0,rc,1)'
    """
    root: list = []
    current = root
    stack = [root]

    is_digit = False
    start = 0
    length = len(version)

    for i, char in enumerate(version):
        if char == ".":
            current.append(ZERO if i == start else _token_item(is_digit, version[start:i]))
            start = i + 1
        elif char == "-":
            current.append(ZERO if i == start else _token_item(is_digit, version[start:i]))
            start = i + 1

            if is_digit:
                # 1.0-* == 1-*
                _normalize(current)

                if i + 1 < length and version[i + 1].isdecimal():
                    # Only 1-1 needs a sub-list; 1.1 keeps siblings
                    nested: list = []
                    current.append(nested)
                    current = nested
                    stack.append(nested)
        elif char == "*":
            current.append(WILDCARD)
            start = i + 1
        elif char.isdecimal():
            if not is_digit and i > start:
                current.append(StringItem.from_token(version[start:i], followed_by_digit=True))
                start = i
            is_digit = True
        elif char.isspace() and char not in NON_BREAKING_SPACES:
            if i > start:
                if is_digit:
                    current.append(_token_item(True, version[start:i]))
                else:
                    current.append(StringItem.from_token(version[start:i], followed_by_digit=True))
                start = i
            is_digit = False
        else:
            if is_digit and i > start:
                current.append(_token_item(True, version[start:i]))
                start = i
            is_digit = False

    if length > start:
        current.append(_token_item(is_digit, version[start:]))

    while stack:
        _normalize(stack.pop())

    return _freeze(root)
