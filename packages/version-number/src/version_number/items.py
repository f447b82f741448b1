# SPDX-License-Identifier: MIT
"""Typed items that make up a parsed version number.

A version string is parsed into a tree of four kinds of item:

- IntegerItem: a run of decimal digits (arbitrary precision)
- StringItem: a qualifier such as "alpha", "rc" or "sp"
- ListItem: a group of items, nested when a dash separates numeric runs
- WildcardItem: the "*" token

Items never reference each other once built, so every variant is a frozen
dataclass. Comparison is a single type-directed function rather than a
method per class, so every pair of variants is handled in one place.
``None`` stands for the "null" item used when one list is shorter than
the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

# Known qualifiers, oldest first. Unknown qualifiers sort after all of them.
QUALIFIERS = ("snapshot", "alpha", "beta", "milestone", "rc", "", "sp")

QUALIFIER_ALIASES = {
    "ga": "",
    "final": "",
    "cr": "rc",
    "ea": "rc",
}

# One-letter qualifiers expanded only when directly followed by a digit: a1, b2, m3
_SHORT_QUALIFIERS = {
    "a": "alpha",
    "b": "beta",
    "m": "milestone",
}

RELEASE_QUALIFIER_KEY = str(QUALIFIERS.index(""))


def comparable_qualifier(qualifier: str) -> str:
    """Return the sort key for a qualifier.

    Known qualifiers map to their index in QUALIFIERS. Unknown ones map to
    "<len>-<qualifier>" so they sort after every known qualifier and
    lexically among themselves.
    """
    try:
        return str(QUALIFIERS.index(qualifier))
    except ValueError:
        return f"{len(QUALIFIERS)}-{qualifier}"


def _sign(left, right) -> int:
    return (left > right) - (left < right)


@dataclass(frozen=True, slots=True)
class IntegerItem:
    """A numeric component."""

    value: int = 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class StringItem:
    """A qualifier component, already lower-cased and alias-normalized."""

    value: str

    @classmethod
    def from_token(cls, token: str, followed_by_digit: bool = False) -> StringItem:
        """Build a qualifier from a raw token.

        Args:
            token: Lower-cased token text
            followed_by_digit: True when the token ran directly into a digit,
                which enables the one-letter forms (a1 = alpha-1)

        Returns:
            The normalized StringItem
        """
        if followed_by_digit and len(token) == 1:
            token = _SHORT_QUALIFIERS.get(token, token)
        return cls(QUALIFIER_ALIASES.get(token, token))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ListItem:
    """An ordered group of items."""

    items: tuple[Item, ...] = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return "(" + ",".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True, slots=True)
class WildcardItem:
    """The "*" component, an upper bound for everything at its position."""

    def __str__(self) -> str:
        return "*"


Item = Union[IntegerItem, StringItem, ListItem, WildcardItem]

ZERO = IntegerItem(0)
WILDCARD = WildcardItem()


def is_null(item: Item) -> bool:
    """Return True if the item may be dropped from the end of a list.

    Zero, the empty qualifier (and its aliases) and empty lists are null.
    A wildcard never is.
    """
    if isinstance(item, IntegerItem):
        return item.value == 0
    if isinstance(item, StringItem):
        return comparable_qualifier(item.value) == RELEASE_QUALIFIER_KEY
    if isinstance(item, ListItem):
        return len(item.items) == 0
    return False


def compare_items(left: Item, right: Optional[Item]) -> int:
    """Compare two items, returning -1, 0 or 1.

    ``right`` may be None, meaning "no item at this position". The
    relation is not symmetric for every pair: an integer ties with a
    wildcard, while a wildcard beats an integer. Callers comparing a
    missing left item must negate ``compare_items(right, None)``.
    """
    if isinstance(left, IntegerItem):
        return _compare_integer(left, right)
    if isinstance(left, StringItem):
        return _compare_string(left, right)
    if isinstance(left, ListItem):
        return _compare_list(left, right)
    if isinstance(left, WildcardItem):
        if isinstance(right, WildcardItem):
            return 0
        return 1
    raise TypeError(f"invalid item: {type(left).__name__}")


def _compare_integer(left: IntegerItem, right: Optional[Item]) -> int:
    if right is None:
        # 1.0 == 1, 1.1 > 1
        return 0 if left.value == 0 else 1
    if isinstance(right, IntegerItem):
        return _sign(left.value, right.value)
    if isinstance(right, (StringItem, ListItem)):
        # 1.1 > 1-sp, 1.1 > 1-1
        return 1
    if isinstance(right, WildcardItem):
        return 0
    raise TypeError(f"invalid item: {type(right).__name__}")


def _compare_string(left: StringItem, right: Optional[Item]) -> int:
    key = comparable_qualifier(left.value)
    if right is None:
        # 1-rc < 1, 1-sp > 1
        return _sign(key, RELEASE_QUALIFIER_KEY)
    if isinstance(right, StringItem):
        return _sign(key, comparable_qualifier(right.value))
    if isinstance(right, (IntegerItem, ListItem, WildcardItem)):
        return -1
    raise TypeError(f"invalid item: {type(right).__name__}")


def _compare_list(left: ListItem, right: Optional[Item]) -> int:
    if right is None:
        if not left.items:
            return 0
        return compare_items(left.items[0], None)
    if isinstance(right, IntegerItem):
        # 1-1 < 1.0.x
        return -1
    if isinstance(right, StringItem):
        # 1-1 > 1-sp
        return 1
    if isinstance(right, WildcardItem):
        return -1
    if not isinstance(right, ListItem):
        raise TypeError(f"invalid item: {type(right).__name__}")

    for index in range(max(len(left.items), len(right.items))):
        lhs = left.items[index] if index < len(left.items) else None
        rhs = right.items[index] if index < len(right.items) else None
        if lhs is None:
            result = -compare_items(rhs, None)
        else:
            result = compare_items(lhs, rhs)
        if result != 0:
            return result
    return 0
