# SPDX-License-Identifier: MIT
"""Semantic version values: parsing, validation, formatting and ordering.

This package provides an immutable Version type following the SemVer 2.0.0
precedence rules, with a strict or lenient text parser and a structured
encoding for persistence.

Example:
    >>> from semver_value import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_identifiers
    ('alpha', '1')
    >>>
    >>> parse_version("1.2") == Version(1, 2, 0)
    True
    >>>
    >>> compare_versions("1.0.0-rc.1", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    IllegalNegativeVersionNumbersError,
    InvalidMetadataStringError,
    InvalidPrereleaseStringError,
    MalformedVersionStringError,
    VersionEncodingError,
    VersionError,
)
from .semver import (
    Version,
    parse_version,
    parse_or_default,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    is_prerelease_less_than,
    precedes,
    version_key,
)
from .encoding import (
    VERSION_SCHEMA,
    EncodingErrorDetail,
    decode_version,
    encode_version,
    validate_encoding,
)

__all__ = [
    # Version values and parsing
    "Version",
    "parse_version",
    "parse_or_default",
    "is_valid_semver",
    # Version comparison
    "compare_versions",
    "is_prerelease_less_than",
    "precedes",
    "version_key",
    # Structured encoding
    "VERSION_SCHEMA",
    "EncodingErrorDetail",
    "decode_version",
    "encode_version",
    "validate_encoding",
    # Errors
    "VersionError",
    "IllegalNegativeVersionNumbersError",
    "InvalidPrereleaseStringError",
    "InvalidMetadataStringError",
    "MalformedVersionStringError",
    "VersionEncodingError",
]
