"""Characters allowed in PKCE code verifiers.

RFC 7636 Section 4.1: code verifiers use only unreserved characters:
    [A-Z] / [a-z] / [0-9] / "-" / "." / "_" / "~"

This module checks strings against that alphabet. Length is checked elsewhere.
"""

from __future__ import annotations

import string

from pkce_std.errors import CharacterError

SPECIAL = "-._~"

CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits + SPECIAL
"""The 66 characters valid in code verifiers."""

LENGTH = len(CHARS)

_VALID = frozenset(CHARS)


def is_special(character: str) -> bool:
    """Check if the character is one of ``-``, ``.``, ``_`` or ``~``."""
    return character in SPECIAL


def is_valid(character: str) -> bool:
    """Check if the character is ASCII alphanumeric or special."""
    return character in _VALID


def find_invalid(value: str) -> tuple[int, str] | None:
    """Find the first character outside the verifier alphabet.

    Args:
        value: String to scan left to right

    Returns:
        ``(position, character)`` of the first invalid character, or None
        if every character is valid
    """
    # Fast path; any non-ASCII string is guaranteed to fail the scan below.
    if value.isascii() and all(character in _VALID for character in value):
        return None

    for position, character in enumerate(value):
        if character not in _VALID:
            return position, character

    return None


def is_valid_string(value: str) -> bool:
    """Check that every character of the string is valid."""
    return find_invalid(value) is None


def check(value: str) -> None:
    """Check that the string contains only characters from ``CHARS``.

    Raises:
        CharacterError: On the first invalid character encountered
    """
    invalid = find_invalid(value)

    if invalid is not None:
        position, character = invalid
        raise CharacterError(character, position)
