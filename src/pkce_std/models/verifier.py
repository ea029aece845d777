"""PKCE code verifiers.

A ``Verifier`` is a high-entropy secret that the client keeps until the
token request (RFC 7636 Section 4.1). Every construction path validates it:

- its length is in [43, 128] (see ``Length``);
- it consists only of unreserved characters (see ``primitives.chars``).

Verifiers compare in constant time, so comparing a guessed value against a
real one does not leak how long the matching prefix is.

Example:
    >>> verifier = Verifier.encode_from_bytes(b"thanks for reading docs! ~ nekit")
    >>> verifier == Verifier("dGhhbmtzIGZvciByZWFkaW5nIGRvY3MhIH4gbmVraXQ")
    True
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from pkce_std.errors import CharacterError, LengthError, VerifierError
from pkce_std.models.challenge import Challenge
from pkce_std.models.length import Count, Length
from pkce_std.models.method import Method
from pkce_std.primitives import chars
from pkce_std.primitives.encoding import encode
from pkce_std.primitives.generate import random_bytes, random_string


@dataclass(frozen=True, eq=False, repr=False)
class Verifier:
    """Validated PKCE code verifier.

    Use ``str(verifier)`` to get the ``code_verifier`` request parameter.
    """

    value: str

    def __post_init__(self) -> None:
        self.check(self.value)

    @staticmethod
    def check(value: str) -> None:
        """Check that ``value`` is a valid code verifier.

        Length is checked before characters.

        Raises:
            TypeError: If ``value`` is not a string
            VerifierError: Wrapping a ``LengthError`` or ``CharacterError``
        """
        if not isinstance(value, str):
            raise TypeError(f"Verifier expects a str, got {type(value).__name__}")

        try:
            Length.check(len(value))
            chars.check(value)
        except (LengthError, CharacterError) as e:
            raise VerifierError(e) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from and serialize to the plain ``code_verifier`` string."""
        from_str = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def from_string(cls, value: str) -> Verifier:
        """Construct a verifier from caller-supplied input."""
        return cls(value)

    @classmethod
    def generate(cls, length: Length | int | None = None) -> Verifier:
        """Generate a random verifier of the given length (default 86)."""
        if length is None:
            length = Length.default()
        elif not isinstance(length, Length):
            length = Length(length)
        return cls(random_string(length))

    @classmethod
    def generate_default(cls) -> Verifier:
        return cls.generate(Length.default())

    @classmethod
    def generate_from_bytes(cls, count: Count | int | None = None) -> Verifier:
        """Generate ``count`` random bytes (default 64) and encode them."""
        if count is None:
            count = Count.default()
        elif not isinstance(count, Count):
            count = Count(count)
        return cls(encode(random_bytes(count)))

    @classmethod
    def encode_from_bytes(cls, data: bytes) -> Verifier:
        """Encode caller-supplied bytes into a verifier.

        Raises:
            CountError: If ``len(data)`` is not in [32, 96]
        """
        Count.check(len(data))
        return cls(encode(data))

    def derive_challenge(self, method: Method | None = None) -> Challenge:
        """Compute the challenge of this verifier (S256 unless given)."""
        return Challenge.create(self, method)

    def challenge(self) -> Challenge:
        return self.derive_challenge(Method.default())

    def verify(self, challenge: Challenge) -> bool:
        """Check that ``challenge`` was derived from this verifier.

        The challenge is recomputed with ``challenge.method()`` and compared
        in constant time.
        """
        expected = self.derive_challenge(challenge.method())
        return expected == challenge

    def as_str(self) -> str:
        return self.value

    def get(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __repr__(self) -> str:
        # Never print the secret itself
        return f"Verifier(<{len(self.value)} characters>)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Verifier):
            return NotImplemented
        return secrets.compare_digest(
            self.value.encode("ascii"), other.value.encode("ascii")
        )

    def __hash__(self) -> int:
        return hash(self.value)
