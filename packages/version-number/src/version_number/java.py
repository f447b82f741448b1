# SPDX-License-Identifier: MIT
"""Java specification versions (JEP 223) built on VersionNumber.

Java releases up to 8 are spelled "1.N" ("1.8"); later ones are plain
majors ("11", "17"). Both spellings are accepted and normalized, so
JavaSpecificationVersion("8") == JavaSpecificationVersion("1.8") and
JavaSpecificationVersion("1.11") == JavaSpecificationVersion("11").

References:
- JEP 223: https://openjdk.org/jeps/223
"""

from __future__ import annotations

import logging
import re
from typing import Union

from .version import VersionNumber

logger = logging.getLogger(__name__)

# Last release still spelled "1.N"
LEGACY_MAX_RELEASE = 8

MAJOR_PATTERN = re.compile(r"^[+-]?[0-9]+$", re.ASCII)

# Release version -> class file major version
RELEASE_TO_CLASS = {
    1: 45,
    2: 46,
    3: 47,
    4: 48,
    5: 49,
    6: 50,
    7: 51,
    8: 52,
    9: 53,
    10: 54,
    11: 55,
    12: 56,
    13: 57,
    14: 58,
    15: 59,
    16: 60,
    17: 61,
    18: 62,
    19: 63,
    20: 64,
    21: 65,
    22: 66,
    23: 67,
    24: 68,
    25: 69,
}

CLASS_TO_RELEASE = {class_version: release for release, class_version in RELEASE_TO_CLASS.items()}


class VersionNumberError(Exception):
    """Base class for Java specification version errors."""

    def __init__(self, version: Union[str, int], message: str = ""):
        self.version = version
        self.message = message or f"Invalid Java specification version: {version}"
        super().__init__(self.message)


class MalformedVersionError(VersionNumberError, ValueError):
    """Raised when a string is not a "N" or "1.N" Java specification version."""


class UnknownVersionError(VersionNumberError, LookupError):
    """Raised when a release or class file version has no known counterpart."""


def normalize_version(version: str) -> str:
    """Normalize a Java specification version string.

    Args:
        version: A specification version such as "1.8", "8", "11" or "1.11"

    Returns:
        "1.N" for releases up to 8, the bare major otherwise

    Raises:
        MalformedVersionError: If the legacy form has more than one dot or the
            major version is not an optionally signed integer

    Examples:
        >>> normalize_version("8")
        '1.8'
        >>> normalize_version("1.11")
        '11'
    """
    text = version.strip()
    if text.startswith("1."):
        parts = text.split(".")
        # "1.8." is still the legacy form: trailing empty parts do not count
        while parts and not parts[-1]:
            parts.pop()
        if len(parts) != 2:
            raise MalformedVersionError(
                version,
                "Malformed old Java Specification Version. "
                f"There should be exactly one dot and something after it: {version}",
            )
        text = parts[1]

    if not MAJOR_PATTERN.match(text):
        raise MalformedVersionError(
            version, f"Java specification major version is not a number: {version!r}"
        )

    if int(text) > LEGACY_MAX_RELEASE:
        normalized = text
    else:
        normalized = f"1.{text}"
    if normalized != version:
        logger.debug("Normalized Java specification version %r to %r", version, normalized)
    return normalized


class JavaSpecificationVersion(VersionNumber):
    """A Java specification version, normalized on construction.

    Examples:
        >>> JavaSpecificationVersion("1.8").to_class_version()
        52
        >>> JavaSpecificationVersion.from_class_version(61)
        JavaSpecificationVersion('17')
    """

    __slots__ = ()

    def __init__(self, version: str):
        super().__init__(normalize_version(version))

    @classmethod
    def from_release_version(cls, release_version: int) -> JavaSpecificationVersion:
        """Build the specification version for a release such as 8, 11 or 17.

        Raises:
            UnknownVersionError: If the release is not a known Java release
        """
        if release_version not in RELEASE_TO_CLASS:
            raise UnknownVersionError(
                release_version,
                f"Unknown Java specification version for release version: {release_version}",
            )
        if release_version > LEGACY_MAX_RELEASE:
            return cls(str(release_version))
        return cls(f"1.{release_version}")

    @classmethod
    def from_class_version(cls, class_version: int) -> JavaSpecificationVersion:
        """Build the specification version for a class file version such as 52.

        Raises:
            UnknownVersionError: If no release uses the class file version
        """
        release_version = CLASS_TO_RELEASE.get(class_version)
        if release_version is None:
            raise UnknownVersionError(
                class_version,
                f"Unknown Java specification version for class version: {class_version}",
            )
        return cls.from_release_version(release_version)

    def to_release_version(self) -> int:
        """Return the release number, e.g. 8 for "1.8" and 17 for "17"."""
        first = self.get_digit_at(0)
        return self.get_digit_at(1) if first == 1 else first

    def to_class_version(self) -> int:
        """Return the class file major version, e.g. 52 for "1.8".

        Raises:
            UnknownVersionError: If the release has no known class file version
        """
        release_version = self.to_release_version()
        class_version = RELEASE_TO_CLASS.get(release_version)
        if class_version is None:
            raise UnknownVersionError(
                str(self),
                f"Unknown class version for release version: {release_version}",
            )
        return class_version


JAVA_5 = JavaSpecificationVersion("1.5")
JAVA_6 = JavaSpecificationVersion("1.6")
JAVA_7 = JavaSpecificationVersion("1.7")
JAVA_8 = JavaSpecificationVersion("1.8")
JAVA_9 = JavaSpecificationVersion("9")
JAVA_10 = JavaSpecificationVersion("10")
JAVA_11 = JavaSpecificationVersion("11")
JAVA_12 = JavaSpecificationVersion("12")
JAVA_13 = JavaSpecificationVersion("13")
JAVA_17 = JavaSpecificationVersion("17")
JAVA_21 = JavaSpecificationVersion("21")
JAVA_25 = JavaSpecificationVersion("25")
