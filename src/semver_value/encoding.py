# SPDX-License-Identifier: MIT
"""Structured encoding for Version values.

A version is encoded as a plain object suitable for JSON, YAML or TOML:

    {"major": 1, "minor": 2, "patch": 3, "prerelease": "rc.1", "metadata": null}

Decoding validates the object against VERSION_SCHEMA before handing the
fields to the Version constructor, so both structural problems and invalid
identifier characters are reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .errors import (
    InvalidMetadataStringError,
    InvalidPrereleaseStringError,
    VersionEncodingError,
)
from .semver import Version

_NON_NEGATIVE_INTEGER: dict = {"type": "integer", "minimum": 0}

# JSON Schema for the structured version encoding
VERSION_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Semantic Version",
    "description": "Structured encoding of a semantic version",
    "type": "object",
    "required": ["major", "minor", "patch"],
    "additionalProperties": False,
    "properties": {
        "major": {**_NON_NEGATIVE_INTEGER, "description": "Major version number"},
        "minor": {**_NON_NEGATIVE_INTEGER, "description": "Minor version number"},
        "patch": {**_NON_NEGATIVE_INTEGER, "description": "Patch version number"},
        "prerelease": {
            "type": ["string", "null"],
            "description": "Dot-delimited pre-release identifiers",
            "pattern": r"^[0-9A-Za-z.-]*$",
        },
        "metadata": {
            "type": ["string", "null"],
            "description": "Dot-delimited build metadata identifiers",
            "pattern": r"^[0-9A-Za-z.-]*$",
        },
    },
}

_validator = Draft202012Validator(VERSION_SCHEMA)


@dataclass(frozen=True, slots=True)
class EncodingErrorDetail:
    """Details about a single encoding error.

    Attributes:
        field: Name of the offending field, or "<root>"
        message: Human-readable error message
        value: The invalid value (if available)
    """

    field: str
    message: str
    value: Any = None


def _field_from_error(error: ValidationError) -> str:
    if not error.absolute_path:
        return "<root>"
    return ".".join(str(part) for part in error.absolute_path)


def _format_error_message(error: ValidationError) -> str:
    if error.validator == "type":
        expected = error.validator_value
        if isinstance(expected, list):
            expected = " or ".join(expected)
        return f"Expected {expected}, got {type(error.instance).__name__}"

    if error.validator == "minimum":
        return f"Value must be at least {error.validator_value}"

    if error.validator == "pattern":
        return "Value contains characters outside [0-9A-Za-z-.]"

    if error.validator == "additionalProperties":
        return "Unexpected field(s) in version encoding"

    return error.message


def validate_encoding(data: Any) -> list[EncodingErrorDetail]:
    """Validate a structured version encoding.

    Returns:
        A list of problems; empty if the encoding is valid
    """
    if not isinstance(data, dict):
        return [
            EncodingErrorDetail(
                field="<root>",
                message=f"Version encoding must be a dictionary, got {type(data).__name__}",
                value=data,
            )
        ]

    errors = []
    for error in sorted(_validator.iter_errors(data), key=lambda e: list(e.absolute_path)):
        errors.append(
            EncodingErrorDetail(
                field=_field_from_error(error),
                message=_format_error_message(error),
                value=error.instance if error.absolute_path else None,
            )
        )
    return errors


def encode_version(version: Version) -> dict[str, Any]:
    """Encode a Version as a plain dictionary.

    Examples:
        >>> encode_version(Version(1, 2, 3, "rc.1"))
        {'major': 1, 'minor': 2, 'patch': 3, 'prerelease': 'rc.1', 'metadata': None}
    """
    return version.to_dict()


def decode_version(data: dict[str, Any]) -> Version:
    """Decode a Version from a plain dictionary.

    Missing "prerelease" and "metadata" keys are treated as absent.

    Raises:
        VersionEncodingError: If data does not match VERSION_SCHEMA or the
            fields are rejected by the Version constructor
    """
    errors = validate_encoding(data)
    if errors:
        raise VersionEncodingError(errors)

    try:
        # JSON Schema counts 1.0 as an integer
        return Version(
            major=int(data["major"]),
            minor=int(data["minor"]),
            patch=int(data["patch"]),
            prerelease=data.get("prerelease"),
            metadata=data.get("metadata"),
        )
    except InvalidPrereleaseStringError as e:
        detail = EncodingErrorDetail(field="prerelease", message=str(e), value=e.value)
        raise VersionEncodingError([detail]) from e
    except InvalidMetadataStringError as e:
        detail = EncodingErrorDetail(field="metadata", message=str(e), value=e.value)
        raise VersionEncodingError([detail]) from e
