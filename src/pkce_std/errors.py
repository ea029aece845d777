"""Exception hierarchy for PKCE value construction.

Provides specific exception types for each validation failure so callers can
tell a malformed number from an out-of-range one, or a bad length from a bad
character, without parsing messages.
"""

from __future__ import annotations


class PKCEError(ValueError):
    """Base exception for all PKCE related errors."""

    pass


class RangeError(PKCEError):
    """Raised when a bounded integer falls outside its valid range."""

    what = "value"

    def __init__(self, value: int, minimum: int, maximum: int):
        super().__init__(
            f"expected {self.what} in [{minimum}, {maximum}] range, got {value}"
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class CountError(RangeError):
    """Raised when a byte count is outside the valid range."""

    what = "byte count"


class LengthError(RangeError):
    """Raised when a verifier length is outside the valid range."""

    what = "length"


class CharacterError(PKCEError):
    """Raised when a string contains a character outside the verifier alphabet.

    Carries the first offending character and its index.
    """

    def __init__(self, character: str, position: int):
        super().__init__(f"invalid character {character!r} at position {position}")
        self.character = character
        self.position = position


class VerifierError(PKCEError):
    """Raised when a string cannot be used as a code verifier.

    The ``error`` attribute holds the check that failed, either a
    ``LengthError`` or a ``CharacterError``.
    """

    def __init__(self, error: LengthError | CharacterError):
        if isinstance(error, LengthError):
            message = f"invalid verifier length: {error}"
        else:
            message = f"verifier contains invalid character(s): {error}"
        super().__init__(message)
        self.error = error


class ChallengeError(PKCEError):
    """Raised when a stored challenge secret has the wrong shape for its method."""

    def __init__(self, message: str, method: str):
        super().__init__(f"{message} (method={method})")
        self.method = method


class UnknownMethodError(PKCEError):
    """Raised when a code challenge method token is not recognized."""

    def __init__(self, unknown: str):
        super().__init__(
            f"unknown method {unknown!r}; expected 'plain' (discouraged) "
            "or 'S256' (recommended)"
        )
        self.unknown = unknown


class IntegerParseError(PKCEError):
    """Raised when a string is not an integer at all."""

    def __init__(self, string: str):
        super().__init__(f"failed to parse integer from {string!r}")
        self.string = string


class ParseCountError(PKCEError):
    """Raised when parsing a byte count from a string fails.

    ``error`` is an ``IntegerParseError`` or a ``CountError``.
    """

    def __init__(self, string: str, error: IntegerParseError | CountError):
        super().__init__(f"failed to parse {string!r} to byte count: {error}")
        self.string = string
        self.error = error


class ParseLengthError(PKCEError):
    """Raised when parsing a verifier length from a string fails.

    ``error`` is an ``IntegerParseError`` or a ``LengthError``.
    """

    def __init__(self, string: str, error: IntegerParseError | LengthError):
        super().__init__(f"failed to parse {string!r} to length: {error}")
        self.string = string
        self.error = error
