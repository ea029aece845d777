"""Handling Proof Key for Code Exchange (RFC 7636) values."""

from pkce_std.errors import (
    ChallengeError,
    CharacterError,
    CountError,
    IntegerParseError,
    LengthError,
    ParseCountError,
    ParseLengthError,
    PKCEError,
    RangeError,
    UnknownMethodError,
    VerifierError,
)
from pkce_std.models.challenge import Challenge
from pkce_std.models.code import Code
from pkce_std.models.length import Count, Length
from pkce_std.models.method import Method
from pkce_std.models.parameters import PKCEConfig, PKCEParameters
from pkce_std.models.verifier import Verifier
from pkce_std.primitives.chars import CHARS
from pkce_std.services.pkce import PKCEManager

__all__ = [
    "CHARS",
    "Challenge",
    "ChallengeError",
    "CharacterError",
    "Code",
    "Count",
    "CountError",
    "IntegerParseError",
    "Length",
    "LengthError",
    "Method",
    "PKCEConfig",
    "PKCEError",
    "PKCEManager",
    "PKCEParameters",
    "ParseCountError",
    "ParseLengthError",
    "RangeError",
    "UnknownMethodError",
    "Verifier",
    "VerifierError",
]
