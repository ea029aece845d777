"""Base64url encoding without padding.

RFC 7636 Appendix A: base64url encoding with all trailing '=' characters
omitted. The alphabet is a subset of the verifier alphabet, so any encoded
value of suitable length is a valid code verifier.
"""

from __future__ import annotations

import base64
import sys

PADDING = "="


def encode(data: bytes) -> str:
    """Encode bytes into unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip(PADDING)


def try_length(count: int) -> int | None:
    """Compute the encoded length of ``count`` bytes without encoding them.

    Every 3 bytes become 4 characters; a trailing group of 1 or 2 bytes
    becomes 2 or 3 characters respectively.

    Args:
        count: Number of bytes before encoding

    Returns:
        The encoded length, or None if it does not fit into ``sys.maxsize``

    Raises:
        ValueError: If ``count`` is negative
    """
    if count < 0:
        raise ValueError(f"byte count must be non-negative, got {count}")

    chunks, remainder = divmod(count, 3)
    length = chunks * 4

    if remainder:
        length += remainder + 1

    if length > sys.maxsize:
        return None

    return length


def length(count: int) -> int:
    """Same as ``try_length``, but overflow is treated as a programming error.

    Raises:
        OverflowError: If the encoded length does not fit into ``sys.maxsize``
    """
    result = try_length(count)

    if result is None:
        raise OverflowError(f"encoded length of {count} bytes overflows")

    return result
