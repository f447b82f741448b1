# SPDX-License-Identifier: MIT
"""Immutable, totally ordered version numbers.

Ordering follows the Maven scheme with a few extensions:

    2.0.* > 2.0.1 > 2.0.1-SNAPSHOT > 2.0.0.99 > 2.0.0 > 2.0.ea

- "*" is an upper bound for everything at its position
- "eaN" is an early-access qualifier, "ea" == "ea0"
- trailing zeros are insignificant: 1.0.0 == 1
- "-SNAPSHOT" and timestamped "-yyyyMMdd.HHmmss-N" suffixes sort before
  the matching release
"""

from __future__ import annotations

from typing import Optional

from .items import IntegerItem, ListItem, compare_items
from .parser import SNAPSHOT_MARKER, extract_snapshot, parse_items


class VersionNumber:
    """A parsed version number.

    Construction never fails: any string is accepted. Instances are
    immutable and compare with the usual operators.

    Attributes:
        value: The raw string the version was built from
        snapshot: The snapshot marker, or None for a release
        items: Root of the parsed item tree
        canonical: Rendering of the item tree, used for equality and hashing

    Examples:
        >>> VersionNumber("2.0.1") > VersionNumber("2.0.1-SNAPSHOT")
        True
        >>> VersionNumber("1.0.0") == VersionNumber("1")
        True
    """

    __slots__ = ("_value", "_snapshot", "_items", "_canonical")

    def __init__(self, version: str):
        text, snapshot = extract_snapshot(version)
        items = parse_items(text.lower())

        object.__setattr__(self, "_value", version)
        object.__setattr__(self, "_snapshot", snapshot)
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_canonical", str(items))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> str:
        """Return the raw string the version was built from."""
        return self._value

    @property
    def snapshot(self) -> Optional[str]:
        """Return the snapshot marker ("-SNAPSHOT" or "-yyyyMMdd.HHmmss-N"), or None."""
        return self._snapshot

    @property
    def items(self) -> ListItem:
        """Return the root of the parsed item tree."""
        return self._items

    @property
    def canonical(self) -> str:
        """Return the rendered item tree used for equality and hashing."""
        return self._canonical

    def compare_to(self, other: VersionNumber) -> int:
        """Compare with another version.

        Returns:
            -1 if self is older, 0 if neither is newer, 1 if self is newer
        """
        result = compare_items(self._items, other._items)
        if result != 0:
            return result

        if self._snapshot is None:
            return 0 if other._snapshot is None else 1
        if other._snapshot is None:
            return -1
        if SNAPSHOT_MARKER in (self._snapshot, other._snapshot):
            # A literal snapshot cannot be ordered against a timestamped one
            return 0

        # "-yyyyMMdd.HHmmss-N": timestamp lexically, then build number numerically
        left, right = self._snapshot[1:16], other._snapshot[1:16]
        if left != right:
            return -1 if left < right else 1
        left_build, right_build = int(self._snapshot[17:]), int(other._snapshot[17:])
        return (left_build > right_build) - (left_build < right_build)

    def is_older_than(self, other: VersionNumber) -> bool:
        """Return True if self sorts strictly before other."""
        return self.compare_to(other) < 0

    def is_newer_than(self, other: VersionNumber) -> bool:
        """Return True if self sorts strictly after other."""
        return self.compare_to(other) > 0

    def is_older_than_or_equal_to(self, other: VersionNumber) -> bool:
        """Return True if self is not newer than other."""
        return self.compare_to(other) <= 0

    def is_newer_than_or_equal_to(self, other: VersionNumber) -> bool:
        """Return True if self is not older than other."""
        return self.compare_to(other) >= 0

    def is_snapshot(self) -> bool:
        """Return True if the version carries a snapshot marker."""
        return self._snapshot is not None

    def is_release(self) -> bool:
        """Return True if the version carries no snapshot marker."""
        return self._snapshot is None

    def digit(self, index: int) -> int:
        """Return the nth integer component, skipping non-integer items.

        An index past the last integer component returns the last one.
        A version without integer components yields 0.

        Examples:
            >>> VersionNumber("1.2.beta.3").digit(2)
            3
            >>> VersionNumber("1.2").digit(5)
            2
        """
        found = 0
        for item in self._items:
            if isinstance(item, IntegerItem):
                found = item.value
                if index <= 0:
                    break
                index -= 1
        return found

    def get_digit_at(self, index: int) -> int:
        """Return the integer component at a position, or -1.

        Unlike digit(), positions are counted over all items, and the first
        non-integer item ends the numeric prefix: it and every later
        position yield -1.

        Examples:
            >>> VersionNumber("2.32.3.1-SNAPSHOT").get_digit_at(1)
            32
            >>> VersionNumber("2.32.3.1-SNAPSHOT").get_digit_at(4)
            -1
        """
        if index < 0 or index >= len(self._items):
            return -1
        for item in self._items.items[: index + 1]:
            if not isinstance(item, IntegerItem):
                return -1
        return self._items[index].value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        if self._canonical != other._canonical:
            return False
        if self._snapshot is None or other._snapshot is None:
            return self._snapshot is None and other._snapshot is None
        if SNAPSHOT_MARKER in (self._snapshot, other._snapshot):
            # Text snapshots match text or timestamped ones
            return True
        return self._snapshot == other._snapshot

    def __hash__(self) -> int:
        return hash(self._canonical)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
