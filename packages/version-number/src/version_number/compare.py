# SPDX-License-Identifier: MIT
"""Comparison helpers accepting raw strings or VersionNumber objects."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Union

from .version import VersionNumber


def _coerce(version: Union[str, VersionNumber]) -> VersionNumber:
    return version if isinstance(version, VersionNumber) else VersionNumber(version)


def compare_versions(
    version1: Union[str, VersionNumber], version2: Union[str, VersionNumber]
) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or VersionNumber)
        version2: Second version (string or VersionNumber)

    Returns:
        -1 if version1 < version2
        0 if neither is newer
        1 if version1 > version2

    Examples:
        >>> compare_versions("1.0", "1.0.1")
        -1
        >>> compare_versions("2.0.*", "2.0.1")
        1
        >>> compare_versions("1.0.0", "1")
        0
    """
    return _coerce(version1).compare_to(_coerce(version2))


def _compare_descending(
    version1: Union[str, VersionNumber], version2: Union[str, VersionNumber]
) -> int:
    return compare_versions(version2, version1)


# Sort keys; both accept strings and VersionNumber objects
version_key = cmp_to_key(compare_versions)
DESCENDING = cmp_to_key(_compare_descending)
