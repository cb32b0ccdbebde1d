# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Supports MAJOR[.MINOR[.PATCH]] with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +001

Missing minor and patch numbers default to 0 unless strict parsing is
requested. See https://semver.org/ for the versioning rules.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from .compare import precedes, split_identifiers, versions_equal, versions_identical
from .errors import (
    IllegalNegativeVersionNumbersError,
    InvalidMetadataStringError,
    InvalidPrereleaseStringError,
    MalformedVersionStringError,
)
from .scanner import (
    Scanner,
    ScannerError,
    ValueNotAtScanLocationError,
    is_identifiers_string,
)

logger = logging.getLogger(__name__)


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Equality, ordering and hashing ignore build metadata; use identical()
    to also compare metadata.

    Note that constructing a Version directly does not apply the leading-zero
    rule to numeric prerelease identifiers: Version(1, 0, 0, "01") is valid
    while parse_version("1.0.0-01") is not.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional dot-delimited pre-release string (e.g. "alpha.1");
            a list of identifiers is joined with "."
        metadata: Optional dot-delimited build metadata (e.g. "build.123");
            a list of identifiers is joined with "."

    Raises:
        IllegalNegativeVersionNumbersError: If major, minor or patch is negative
        InvalidPrereleaseStringError: If prerelease has a character outside [0-9A-Za-z-.]
        InvalidMetadataStringError: If metadata has a character outside [0-9A-Za-z-.]
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: Union[str, Sequence[str], None] = None
    metadata: Union[str, Sequence[str], None] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise IllegalNegativeVersionNumbersError(self.major, self.minor, self.patch)

        for name in ("prerelease", "metadata"):
            value = getattr(self, name)
            if isinstance(value, (list, tuple)):
                object.__setattr__(self, name, ".".join(value))
            elif value is not None and not isinstance(value, str):
                raise TypeError(
                    f"{name} must be a str, a list of str or None, got {type(value).__name__}"
                )

        if self.prerelease is not None and not is_identifiers_string(self.prerelease):
            raise InvalidPrereleaseStringError(self.prerelease)
        if self.metadata is not None and not is_identifiers_string(self.metadata):
            raise InvalidMetadataStringError(self.metadata)

        # A string without identifiers ("", ".", "..") means the part is absent
        for name in ("prerelease", "metadata"):
            if not split_identifiers(getattr(self, name)):
                object.__setattr__(self, name, None)

    @classmethod
    def from_identifiers(
        cls,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        prerelease_identifiers: Sequence[str] = (),
        metadata_identifiers: Sequence[str] = (),
    ) -> Version:
        """Build a Version from lists of identifier tokens.

        Tokens are joined with "." and validated like the string form; an
        empty list means the part is absent.

        Raises:
            TypeError: If a bare string is passed instead of a list of tokens

        Examples:
            >>> Version.from_identifiers(1, 0, 0, ["beta", "2"])
            Version(major=1, minor=0, patch=0, prerelease='beta.2', metadata=None)
        """
        for name, identifiers in (
            ("prerelease_identifiers", prerelease_identifiers),
            ("metadata_identifiers", metadata_identifiers),
        ):
            if isinstance(identifiers, str):
                raise TypeError(f"{name} must be a sequence of str, not a str")
        return cls(
            major,
            minor,
            patch,
            ".".join(prerelease_identifiers),
            ".".join(metadata_identifiers),
        )

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> Version:
        """Parse a version string.

        Args:
            text: The version string (MAJOR[.MINOR[.PATCH]][-prerelease][+metadata])
            strict: Require MINOR and PATCH to be present

        Raises:
            MalformedVersionStringError: If text does not follow the grammar
        """
        if not isinstance(text, str):
            raise MalformedVersionStringError(
                text, f"Version must be a string, got {type(text).__name__}"
            )
        try:
            major, minor, patch, prerelease, metadata = _scan_version(text, strict)
        except ScannerError as e:
            raise MalformedVersionStringError(text, f"Malformed version string {text!r}: {e}") from e
        return cls(major, minor, patch, prerelease, metadata)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Version:
        """Decode a version from its structured encoding. See decode_version()."""
        from .encoding import decode_version

        return decode_version(data)

    def to_dict(self) -> dict[str, Any]:
        """Return the structured encoding of this version."""
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease,
            "metadata": self.metadata,
        }

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.metadata is not None:
            version += f"+{self.metadata}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return versions_equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedes(self, other)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def identical(self, other: Version) -> bool:
        """Return True if other is equal to this version and has the same metadata."""
        return versions_identical(self, other)

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        return split_identifiers(self.prerelease)

    @property
    def metadata_identifiers(self) -> tuple[str, ...]:
        return split_identifiers(self.metadata)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _next_optional_number(scanner: Scanner, strict: bool) -> int:
    # A missing separator leaves the number out; a separator must be followed by a number
    try:
        scanner.advance_over(".")
    except ValueNotAtScanLocationError:
        if strict:
            raise
        return 0
    return scanner.next_number()


def _scan_version(
    text: str, strict: bool
) -> tuple[int, int, int, Optional[str], Optional[str]]:
    scanner = Scanner(text)

    major = scanner.next_number()
    minor = _next_optional_number(scanner, strict)
    patch = _next_optional_number(scanner, strict)

    prerelease = None
    if scanner.try_advance_over("-"):
        prerelease = ".".join(scanner.next_identifiers())

    metadata = None
    if scanner.try_advance_over("+"):
        metadata = ".".join(scanner.next_identifiers(allow_leading_zeros=True))

    if not scanner.at_end:
        raise ValueNotAtScanLocationError(scanner.position, "Expected end of version string")
    return major, minor, patch, prerelease, metadata


def parse_version(version_string: str, strict: bool = False) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string of the form MAJOR[.MINOR[.PATCH]][-prerelease][+metadata]
        strict: If True, MINOR and PATCH must be present

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionStringError: If the string does not follow the grammar

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, metadata=None)

        >>> parse_version("1-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', metadata=None)

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', metadata='build.456')
    """
    return Version.parse(version_string, strict=strict)


def parse_or_default(version_string: str) -> Version:
    """Parse a version string, falling back to 0.0.0 if it is malformed.

    Intended for hard-coded version literals. A warning is logged when the
    fallback is used; no exception is raised.

    Examples:
        >>> parse_or_default("1.4")
        Version(major=1, minor=4, patch=0, prerelease=None, metadata=None)
        >>> parse_or_default("garbage")
        Version(major=0, minor=0, patch=0, prerelease=None, metadata=None)
    """
    try:
        return Version.parse(version_string)
    except MalformedVersionStringError:
        logger.warning('Malformed version string %r. Setting to "0.0.0".', version_string)
        return Version()


def is_valid_semver(version_string: str, strict: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        strict: If True, MINOR and PATCH must be present

    Returns:
        True if the string parses as a version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        True
        >>> is_valid_semver("1.0", strict=True)
        False
    """
    try:
        Version.parse(version_string, strict=strict)
    except MalformedVersionStringError:
        return False
    return True
