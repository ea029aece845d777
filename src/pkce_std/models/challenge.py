"""PKCE code challenges.

RFC 7636 Section 4.2: the challenge is derived from the verifier:

- ``plain``: code_challenge = code_verifier
- ``S256``:  code_challenge = BASE64URL-ENCODE(SHA256(ASCII(code_verifier)))

Derivation is deterministic, because the authorization server recomputes
the challenge on its own from the verifier revealed in the token request.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from pkce_std.errors import ChallengeError, CharacterError, LengthError
from pkce_std.models.length import Length
from pkce_std.models.method import Method
from pkce_std.primitives import chars, encoding, hashing

if TYPE_CHECKING:
    from pkce_std.models.verifier import Verifier

SHA256_SECRET_LENGTH = encoding.length(hashing.DIGEST_SIZE)

_BASE64URL = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)


@dataclass(frozen=True, eq=False, repr=False)
class Challenge:
    """PKCE code challenge along with the method used to derive it.

    Build challenges with ``create`` (or ``Verifier.derive_challenge``);
    use ``parse`` to restore one received or stored as plain strings.

    Equality compares the secret in constant time. The challenge is sent
    in the clear, so this only hardens ``Verifier.verify`` against being
    used as a timing oracle.
    """

    _secret: str
    _method: Method

    def __post_init__(self) -> None:
        if not isinstance(self._secret, str):
            raise TypeError(
                f"Challenge expects a str secret, got {type(self._secret).__name__}"
            )
        if not isinstance(self._method, Method):
            raise TypeError(
                f"Challenge expects a Method, got {type(self._method).__name__}"
            )
        self._check_secret(self._secret, self._method)

    @staticmethod
    def _check_secret(secret: str, method: Method) -> None:
        if method is Method.PLAIN:
            try:
                Length.check(len(secret))
                chars.check(secret)
            except (LengthError, CharacterError) as e:
                raise ChallengeError(
                    f"plain challenge is not a valid verifier: {e}", method.token
                ) from e
            return

        if len(secret) != SHA256_SECRET_LENGTH:
            raise ChallengeError(
                f"expected {SHA256_SECRET_LENGTH} characters, got {len(secret)}",
                method.token,
            )
        if not _BASE64URL.issuperset(secret):
            raise ChallengeError("challenge is not base64url encoded", method.token)

    @classmethod
    def create(cls, verifier: Verifier, method: Method | None = None) -> Challenge:
        """Derive the challenge of ``verifier`` (S256 unless given)."""
        if method is None:
            method = Method.default()

        value = verifier.as_str()

        if method is Method.PLAIN:
            secret = value
        else:
            secret = encoding.encode(hashing.sha256(value.encode("ascii")))

        return cls(secret, method)

    @classmethod
    def parse(cls, secret: str, method: Method | str = Method.SHA256) -> Challenge:
        """Restore a challenge from its ``code_challenge`` parameters.

        Args:
            secret: The ``code_challenge`` value
            method: A ``Method`` or its ``code_challenge_method`` token

        Raises:
            UnknownMethodError: If the method token is not recognized
            ChallengeError: If the secret cannot have been produced by the method
        """
        if not isinstance(method, Method):
            method = Method.parse(method)

        return cls(secret, method)

    @classmethod
    def from_params(cls, params: dict[str, str]) -> Challenge:
        """Restore a challenge from the mapping produced by ``to_params``."""
        return cls.parse(params["code_challenge"], params["code_challenge_method"])

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from and serialize to the ``to_params`` mapping."""
        from_params = core_schema.no_info_after_validator_function(
            cls.from_params,
            core_schema.typed_dict_schema(
                {
                    "code_challenge": core_schema.typed_dict_field(
                        core_schema.str_schema()
                    ),
                    "code_challenge_method": core_schema.typed_dict_field(
                        core_schema.str_schema()
                    ),
                }
            ),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_params,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_params]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_params
            ),
        )

    def secret(self) -> str:
        return self._secret

    def method(self) -> Method:
        return self._method

    def into_parts(self) -> tuple[str, Method]:
        return self._secret, self._method

    def to_params(self) -> dict[str, str]:
        """Return the authorization request parameters for this challenge."""
        return {
            "code_challenge": self._secret,
            "code_challenge_method": self._method.token,
        }

    def __str__(self) -> str:
        return self._secret

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Challenge):
            return NotImplemented
        same_secret = secrets.compare_digest(
            self._secret.encode("ascii"), other._secret.encode("ascii")
        )
        return same_secret and self._method is other._method

    def __hash__(self) -> int:
        return hash((self._secret, self._method))

    def __repr__(self) -> str:
        # A plain challenge is the verifier itself
        secret = "<hidden>" if self._method is Method.PLAIN else repr(self._secret)
        return f"Challenge(secret={secret}, method={self._method.token!r})"
