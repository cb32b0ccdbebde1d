# SPDX-License-Identifier: MIT
"""Character scanner used by the version string parser.

The scanner walks an input string by index and hands out the tokens of the
semantic version grammar: numbers, identifiers and literal separators. Errors
raised here describe exactly what went wrong and where; the parser folds them
into MalformedVersionStringError before they reach callers.
"""

from __future__ import annotations

DIGITS = frozenset("0123456789")

# Characters allowed inside a single prerelease or metadata identifier
IDENTIFIER_CHARACTERS = frozenset(
    "-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Characters allowed in a dot-delimited identifier string
IDENTIFIERS_STRING_CHARACTERS = IDENTIFIER_CHARACTERS | {"."}


class ScannerError(Exception):
    """Base exception for scanning failures.

    Attributes:
        position: Index into the input where scanning failed
    """

    def __init__(self, position: int, message: str):
        self.position = position
        super().__init__(f"{message} at position {position}")


class InvalidNumberError(ScannerError):
    """Raised when a number was expected but no digits were found."""

    pass


class InvalidIdentifierError(ScannerError):
    """Raised when an identifier was expected but none was found."""

    pass


class LeadingZerosProhibitedError(ScannerError):
    """Raised when a numeric literal has a leading zero."""

    pass


class ValueNotAtScanLocationError(ScannerError):
    """Raised when an expected literal is not at the scan position."""

    pass


def has_leading_zero(literal: str) -> bool:
    """Return True if a purely numeric literal starts with a redundant zero.

    Examples:
        >>> has_leading_zero("01")
        True
        >>> has_leading_zero("0")
        False
        >>> has_leading_zero("0a")
        False
    """
    return len(literal) > 1 and literal[0] == "0" and all(c in DIGITS for c in literal)


def is_identifiers_string(value: str) -> bool:
    """Return True if every character of value may appear in an identifier string."""
    return all(c in IDENTIFIERS_STRING_CHARACTERS for c in value)


class Scanner:
    """Left-to-right scanner over a version string."""

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    def __repr__(self) -> str:
        return f"Scanner(text={self.text!r}, position={self.position})"

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def _scan_characters(self, allowed: frozenset) -> str:
        start = self.position
        end = start
        while end < len(self.text) and self.text[end] in allowed:
            end += 1
        self.position = end
        return self.text[start:end]

    def next_number(self) -> int:
        """Consume a run of digits and return its integer value.

        Raises:
            InvalidNumberError: If there are no digits at the scan position
            LeadingZerosProhibitedError: If the literal has a leading zero
        """
        start = self.position
        literal = self._scan_characters(DIGITS)
        if not literal:
            raise InvalidNumberError(start, "Expected a number")
        if has_leading_zero(literal):
            self.position = start
            raise LeadingZerosProhibitedError(start, f"Leading zero in number {literal!r}")
        return int(literal)

    def next_identifier(self, allow_leading_zero: bool = False) -> str:
        """Consume a single identifier.

        Args:
            allow_leading_zero: Accept numeric identifiers such as "01"

        Raises:
            InvalidIdentifierError: If the identifier would be empty
            LeadingZerosProhibitedError: If a numeric identifier has a leading
                zero and allow_leading_zero is False
        """
        start = self.position
        identifier = self._scan_characters(IDENTIFIER_CHARACTERS)
        if not identifier:
            raise InvalidIdentifierError(start, "Expected an identifier")
        if not allow_leading_zero and has_leading_zero(identifier):
            self.position = start
            raise LeadingZerosProhibitedError(
                start, f"Leading zero in identifier {identifier!r}"
            )
        return identifier

    def next_identifiers(self, allow_leading_zeros: bool = False) -> list[str]:
        """Consume one or more dot-separated identifiers."""
        identifiers = [self.next_identifier(allow_leading_zero=allow_leading_zeros)]
        while self.try_advance_over("."):
            identifiers.append(self.next_identifier(allow_leading_zero=allow_leading_zeros))
        return identifiers

    def advance_over(self, literal: str) -> None:
        """Consume literal, or raise ValueNotAtScanLocationError leaving the position alone."""
        if not self.text.startswith(literal, self.position):
            raise ValueNotAtScanLocationError(self.position, f"Expected {literal!r}")
        self.position += len(literal)

    def try_advance_over(self, literal: str) -> bool:
        try:
            self.advance_over(literal)
        except ValueNotAtScanLocationError:
            return False
        return True
