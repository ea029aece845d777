"""Coupled PKCE verifier and challenge pairs.

``Code`` is slightly more than a verifier and a challenge held together: both
are always generated together, so ``verifier.verify(challenge)`` always holds.
Neither half is reachable on its own. Use ``into_pair`` to release both.

Once released, the two values are ordinary independent values. The
correspondence guarantee ends at extraction; pairing a released half with
an unrelated value is the caller's responsibility.

Example:
    >>> verifier, challenge = Code.generate_default().into_pair()
    >>> verifier.verify(challenge)
    True
"""

from __future__ import annotations

from pkce_std.errors import ChallengeError
from pkce_std.models.challenge import Challenge
from pkce_std.models.length import Count, Length
from pkce_std.models.method import Method
from pkce_std.models.verifier import Verifier


class Code:
    """Verifier and its challenge, generated together."""

    __slots__ = ("_verifier", "_challenge")

    def __init__(self, verifier: Verifier, challenge: Challenge):
        """Couple a verifier with its challenge.

        Prefer the ``generate*`` classmethods.

        Raises:
            ChallengeError: If ``challenge`` was not derived from ``verifier``
        """
        if not verifier.verify(challenge):
            raise ChallengeError(
                "challenge does not correspond to the verifier",
                challenge.method().token,
            )
        object.__setattr__(self, "_verifier", verifier)
        object.__setattr__(self, "_challenge", challenge)

    @classmethod
    def _from_verifier(cls, verifier: Verifier, method: Method | None) -> Code:
        return cls(verifier, verifier.derive_challenge(method))

    @classmethod
    def generate(
        cls, method: Method | None = None, length: Length | int | None = None
    ) -> Code:
        """Generate a code from a random verifier of ``length`` characters."""
        return cls._from_verifier(Verifier.generate(length), method)

    @classmethod
    def generate_default(cls) -> Code:
        return cls.generate(Method.default(), Length.default())

    @classmethod
    def generate_from_bytes(
        cls, method: Method | None = None, count: Count | int | None = None
    ) -> Code:
        """Generate a code from ``count`` encoded random bytes."""
        return cls._from_verifier(Verifier.generate_from_bytes(count), method)

    @classmethod
    def generate_from_bytes_default(cls) -> Code:
        return cls.generate_from_bytes(Method.default(), Count.default())

    def into_pair(self) -> tuple[Verifier, Challenge]:
        """Release the ``(verifier, challenge)`` pair."""
        return self._verifier, self._challenge

    def into_parts(self) -> tuple[str, str, Method]:
        """Release ``(verifier, secret, method)`` as plain values."""
        secret, method = self._challenge.into_parts()
        return self._verifier.as_str(), secret, method

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Code(method={self._challenge.method().token!r})"
