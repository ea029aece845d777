"""Cryptographically secure random generation.

All randomness comes from the ``secrets`` module, which draws from the
operating system's CSPRNG. A predictable source here would let an attacker
guess verifiers and defeat PKCE entirely.
"""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

from pkce_std.primitives.chars import CHARS

if TYPE_CHECKING:
    from pkce_std.models.length import Count, Length


def random_bytes(count: Count) -> bytes:
    """Generate exactly ``count`` random bytes."""
    return secrets.token_bytes(count.get())


def random_string(length: Length) -> str:
    """Generate a random string of exactly ``length`` verifier characters.

    Each character is drawn independently and uniformly from ``CHARS``.
    ``secrets.choice`` samples its index by rejection over ``[0, 66)``, so
    there is no modulo bias.
    """
    return "".join(secrets.choice(CHARS) for _ in range(length.get()))
