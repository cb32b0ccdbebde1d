# SPDX-License-Identifier: MIT
"""Version precedence following semantic versioning ordering rules.

Pre-release versions sort before the release they lead up to.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

import functools
import math
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .semver import Version


def split_identifiers(value: Optional[str]) -> tuple[str, ...]:
    """Split a dot-delimited identifier string, dropping empty pieces."""
    if not value:
        return ()
    return tuple(part for part in value.split(".") if part)


def _numeric_value(identifier: str) -> Union[int, float]:
    """Return identifier as an integer, or +infinity if it is not a number."""
    if identifier.isascii() and identifier.isdigit():
        return int(identifier)
    return math.inf


def is_prerelease_less_than(lhs: str, rhs: str) -> bool:
    """Return True if prerelease string lhs has lower precedence than rhs.

    Identifiers are compared pairwise. At the first differing pair, numbers
    compare numerically and a non-numeric identifier ranks above any number;
    two non-numeric identifiers compare as strings. When one identifier list
    is a prefix of the other, the shorter raw string has lower precedence.

    Examples:
        >>> is_prerelease_less_than("alpha", "alpha.1")
        True
        >>> is_prerelease_less_than("beta.2", "beta.11")
        True
        >>> is_prerelease_less_than("rc.1", "beta")
        False
    """
    differing = next(
        (
            (left, right)
            for left, right in zip(split_identifiers(lhs), split_identifiers(rhs))
            if left != right
        ),
        None,
    )
    if differing is None:
        return len(lhs) < len(rhs)

    left, right = differing
    left_number = _numeric_value(left)
    right_number = _numeric_value(right)
    if left_number != right_number:
        return left_number < right_number
    return left < right


def precedes(lhs: Version, rhs: Version) -> bool:
    """Return True if lhs has lower precedence than rhs."""
    lhs_components = (lhs.major, lhs.minor, lhs.patch)
    rhs_components = (rhs.major, rhs.minor, rhs.patch)
    for left, right in zip(lhs_components, rhs_components):
        if left != right:
            return left < right

    if lhs.is_prerelease and rhs.is_prerelease:
        return is_prerelease_less_than(lhs.prerelease, rhs.prerelease)
    return lhs.is_prerelease and not rhs.is_prerelease


def versions_equal(lhs: Version, rhs: Version) -> bool:
    """Return True if lhs and rhs have the same precedence (metadata ignored)."""
    return (
        lhs.major == rhs.major
        and lhs.minor == rhs.minor
        and lhs.patch == rhs.patch
        and lhs.prerelease == rhs.prerelease
    )


def versions_identical(lhs: Version, rhs: Version) -> bool:
    """Return True if lhs and rhs are equal and carry the same metadata."""
    return versions_equal(lhs, rhs) and lhs.metadata == rhs.metadata


def _coerce(version: Union[str, Version]) -> Version:
    from .semver import Version

    if isinstance(version, Version):
        return version
    return Version.parse(version)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        MalformedVersionStringError: If either version string is malformed

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0", "1.0.0-rc.1")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if precedes(v1, v2):
        return -1
    if precedes(v2, v1):
        return 1
    return 0


@functools.total_ordering
class _VersionKey:
    __slots__ = ("version",)

    def __init__(self, version: Version):
        self.version = version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _VersionKey):
            return NotImplemented
        return versions_equal(self.version, other.version)

    def __lt__(self, other: _VersionKey) -> bool:
        return precedes(self.version, other.version)


def version_key(version: Union[str, Version]) -> _VersionKey:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        An orderable key using version precedence

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _VersionKey(_coerce(version))
