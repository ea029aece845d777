"""PKCE code challenge methods.

RFC 7636 Section 4.2 defines exactly two methods: ``plain`` and ``S256``.
The former is discouraged and only meant for clients that cannot hash;
the latter is recommended and is the default.
"""

from __future__ import annotations

from enum import Enum

from pkce_std.errors import UnknownMethodError

PLAIN = "plain"
SHA256 = "S256"


class Method(str, Enum):
    """Code challenge method, valued by its ``code_challenge_method`` token."""

    PLAIN = "plain"
    SHA256 = "S256"

    @classmethod
    def parse(cls, token: str) -> Method:
        """Parse a method from its exact, case-sensitive token.

        Raises:
            UnknownMethodError: If the token is neither ``plain`` nor ``S256``
        """
        if token == PLAIN:
            return cls.PLAIN
        if token == SHA256:
            return cls.SHA256
        raise UnknownMethodError(token)

    @classmethod
    def default(cls) -> Method:
        return cls.SHA256

    @property
    def token(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
