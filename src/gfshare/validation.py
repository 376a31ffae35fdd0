"""Precondition checks run before any field computation or randomness draw."""

from __future__ import annotations

from collections.abc import Sequence

from gfshare.errors import InvalidInputType, InvalidShareStructure, ParameterOutOfRange
from gfshare.models import Share

MIN_SHARES = 2
MAX_SHARES = 255

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_split_args(secret: object, shares: object, threshold: object) -> bytes:
    """Check split arguments and return the secret as ``bytes``."""
    if not isinstance(secret, _BYTES_LIKE):
        raise InvalidInputType("secret must be a bytes-like object")
    if len(secret) == 0:
        raise InvalidShareStructure("secret cannot be empty")

    if not _is_int(shares):
        raise InvalidInputType("shares must be an integer")
    if not MIN_SHARES <= shares <= MAX_SHARES:
        raise ParameterOutOfRange(
            f"shares must be at least {MIN_SHARES} and at most {MAX_SHARES}"
        )

    if not _is_int(threshold):
        raise InvalidInputType("threshold must be an integer")
    if not MIN_SHARES <= threshold <= MAX_SHARES:
        raise ParameterOutOfRange(
            f"threshold must be at least {MIN_SHARES} and at most {MAX_SHARES}"
        )

    if shares < threshold:
        raise ParameterOutOfRange("shares cannot be less than threshold")

    return bytes(secret)


def validate_combine_args(shares: object) -> list[bytes]:
    """Check combine arguments and return each share in wire form.

    Elements may be bytes-like objects or :class:`~gfshare.models.Share`.
    """
    if isinstance(shares, (str, *_BYTES_LIKE)) or not isinstance(shares, Sequence):
        raise InvalidInputType("shares must be a sequence of shares")
    if not MIN_SHARES <= len(shares) <= MAX_SHARES:
        raise ParameterOutOfRange(
            f"shares must have at least {MIN_SHARES} and at most {MAX_SHARES} elements"
        )

    raw: list[bytes] = []
    for share in shares:
        if isinstance(share, Share):
            raw.append(share.to_bytes())
        elif isinstance(share, _BYTES_LIKE):
            raw.append(bytes(share))
        else:
            raise InvalidInputType("each share must be a bytes-like object")

    length = len(raw[0])
    for share in raw:
        if len(share) < 2:
            raise InvalidShareStructure("each share must be at least 2 bytes")
    for share in raw:
        if len(share) != length:
            raise InvalidShareStructure("all shares must have the same byte length")

    xs = [share[-1] for share in raw]
    if len(set(xs)) != len(xs):
        raise InvalidShareStructure(
            "shares must contain unique values but a duplicate was found"
        )

    return raw
