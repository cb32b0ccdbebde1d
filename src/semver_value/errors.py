# SPDX-License-Identifier: MIT
"""Exceptions raised when a semantic version cannot be constructed."""

from __future__ import annotations

from typing import Any


class VersionError(ValueError):
    """Base exception for all version construction errors."""

    pass


class IllegalNegativeVersionNumbersError(VersionError):
    """Raised when major, minor or patch is negative."""

    def __init__(self, major: int, minor: int, patch: int):
        self.components = (major, minor, patch)
        super().__init__(
            f"Version numbers must not be negative, got {major}.{minor}.{patch}"
        )


class InvalidPrereleaseStringError(VersionError):
    """Raised when a prerelease string contains a disallowed character."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid prerelease string: {value!r}")


class InvalidMetadataStringError(VersionError):
    """Raised when a metadata string contains a disallowed character."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid metadata string: {value!r}")


class MalformedVersionStringError(VersionError):
    """Raised when text does not follow the semantic version grammar.

    Attributes:
        version: The text that failed to parse
        message: Human-readable description of the failure
    """

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Malformed version string: {version!r}"
        super().__init__(self.message)


class VersionEncodingError(VersionError):
    """Raised when a structured version encoding fails validation.

    Attributes:
        errors: List of EncodingErrorDetail describing each problem
    """

    def __init__(self, errors: list):
        self.errors = errors
        message = f"Version encoding is invalid with {len(errors)} error(s)"
        if errors:
            message += f": {errors[0].field}: {errors[0].message}"
        super().__init__(message)
