# SPDX-License-Identifier: MIT
"""Free-form version number parsing and comparison.

This package parses arbitrary version strings into a typed item tree and
orders them following the Maven scheme, extended with wildcards ("*"),
early-access qualifiers ("eaN") and timestamped snapshots.

Example:
    >>> from version_number import VersionNumber, compare_versions
    >>>
    >>> VersionNumber("2.0.*").is_newer_than(VersionNumber("2.0.1"))
    True
    >>> VersionNumber("1.0.0") == VersionNumber("1")
    True
    >>>
    >>> compare_versions("2.0.ea1", "2.0.ea2")
    -1
"""

__version__ = "0.1.0"

from .version import VersionNumber
from .compare import (
    DESCENDING,
    compare_versions,
    version_key,
)
from .java import (
    JavaSpecificationVersion,
    MalformedVersionError,
    UnknownVersionError,
    VersionNumberError,
)

__all__ = [
    # Version parsing and ordering
    "VersionNumber",
    # Version comparison
    "compare_versions",
    "version_key",
    "DESCENDING",
    # Java specification versions
    "JavaSpecificationVersion",
    "VersionNumberError",
    "MalformedVersionError",
    "UnknownVersionError",
]
