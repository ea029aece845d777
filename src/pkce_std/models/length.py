"""Byte counts and verifier lengths.

RFC 7636 Section 4.1 bounds code verifiers to 43-128 characters. Those are
exactly the unpadded base64url lengths of 32 and 96 bytes, so two bounded
integer types are defined:

- ``Count``: number of random bytes before encoding, in [32, 96].
- ``Length``: number of characters in the verifier, in [43, 128].

A ``Count`` always converts to a ``Length``. The reverse is not provided.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from pkce_std.errors import (
    CountError,
    IntegerParseError,
    LengthError,
    ParseCountError,
    ParseLengthError,
    RangeError,
)
from pkce_std.primitives import encoding

MIN_COUNT = 32
DEFAULT_COUNT = 64
MAX_COUNT = 96

MIN_LENGTH = encoding.length(MIN_COUNT)
DEFAULT_LENGTH = encoding.length(DEFAULT_COUNT)
MAX_LENGTH = encoding.length(MAX_COUNT)


def _parse_int(string: str) -> int:
    # Digits only: no sign, whitespace or underscores
    if not (string.isascii() and string.isdigit()):
        raise IntegerParseError(string)
    return int(string)


@dataclass(frozen=True, order=True)
class _Bounded:
    """Immutable integer restricted to ``[MIN, MAX]``."""

    value: int

    MIN: ClassVar[int]
    DEFAULT: ClassVar[int]
    MAX: ClassVar[int]
    range_error: ClassVar[type[RangeError]]

    def __post_init__(self) -> None:
        self.check(self.value)

    @classmethod
    def check(cls, value: int) -> None:
        """Check that ``value`` is an integer in the valid range.

        Raises:
            TypeError: If ``value`` is not an ``int``
            RangeError: If ``value`` is out of range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{cls.__name__} expects an int, got {type(value).__name__}"
            )
        if value < cls.MIN or value > cls.MAX:
            raise cls.range_error(value, cls.MIN, cls.MAX)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from and serialize to the plain integer."""
        from_int = core_schema.no_info_after_validator_function(
            cls, core_schema.int_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_int,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_int]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    @classmethod
    def default(cls):
        return cls(cls.DEFAULT)

    @classmethod
    def minimum(cls):
        return cls(cls.MIN)

    @classmethod
    def maximum(cls):
        return cls(cls.MAX)

    def get(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Count(_Bounded):
    """Number of random bytes used to produce a verifier by encoding.

    Example:
        >>> Count(64).to_length()
        Length(value=86)
    """

    MIN: ClassVar[int] = MIN_COUNT
    DEFAULT: ClassVar[int] = DEFAULT_COUNT
    MAX: ClassVar[int] = MAX_COUNT
    range_error: ClassVar[type[RangeError]] = CountError

    @classmethod
    def parse(cls, string: str) -> Count:
        """Parse a byte count from its decimal form.

        Raises:
            ParseCountError: Wrapping either an ``IntegerParseError`` or a
                ``CountError``
        """
        try:
            return cls(_parse_int(string))
        except (IntegerParseError, CountError) as e:
            raise ParseCountError(string, e) from e

    def encoded(self) -> int:
        """Return the base64url length of this many bytes."""
        return encoding.length(self.value)

    def to_length(self) -> Length:
        # 32..96 bytes always encode to 43..128 characters
        return Length(self.encoded())


@dataclass(frozen=True, order=True)
class Length(_Bounded):
    """Number of characters in a code verifier."""

    MIN: ClassVar[int] = MIN_LENGTH
    DEFAULT: ClassVar[int] = DEFAULT_LENGTH
    MAX: ClassVar[int] = MAX_LENGTH
    range_error: ClassVar[type[RangeError]] = LengthError

    @classmethod
    def parse(cls, string: str) -> Length:
        """Parse a verifier length from its decimal form.

        Raises:
            ParseLengthError: Wrapping either an ``IntegerParseError`` or a
                ``LengthError``
        """
        try:
            return cls(_parse_int(string))
        except (IntegerParseError, LengthError) as e:
            raise ParseLengthError(string, e) from e

    @classmethod
    def from_count(cls, count: Count) -> Length:
        return count.to_length()
