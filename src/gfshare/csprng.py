"""Sources of cryptographically secure random bytes.

The splitter never reaches for a global generator; it asks an injected source
to ``fill`` a buffer. Synchronous and asynchronous sources are both accepted.
"""

from __future__ import annotations

import asyncio
import secrets
from typing import Protocol

from gfshare.errors import RandomnessUnavailable


class RandomSource(Protocol):
    def fill(self, length: int) -> bytes:
        """Return exactly ``length`` random bytes."""
        ...


class AsyncRandomSource(Protocol):
    async def fill(self, length: int) -> bytes:
        """Return exactly ``length`` random bytes."""
        ...


AnyRandomSource = RandomSource | AsyncRandomSource


def _os_random(length: int) -> bytes:
    try:
        return secrets.token_bytes(length)
    except (NotImplementedError, OSError) as exc:
        raise RandomnessUnavailable(
            "no cryptographically secure random source is available"
        ) from exc


class SystemRandomSource:
    """Operating-system CSPRNG (``os.urandom`` via :mod:`secrets`)."""

    def fill(self, length: int) -> bytes:
        return _os_random(length)


class AsyncSystemRandomSource:
    """Operating-system CSPRNG called from the event loop's default executor."""

    async def fill(self, length: int) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _os_random, length)


_DEFAULT_SOURCE = SystemRandomSource()


def default_random_source() -> SystemRandomSource:
    return _DEFAULT_SOURCE


def check_random_bytes(data: object, length: int) -> bytes:
    """Verify a source returned ``length`` bytes and normalise them to ``bytes``."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise RandomnessUnavailable(
            f"random source returned {type(data).__name__}, expected bytes"
        )
    data = bytes(data)
    if len(data) != length:
        raise RandomnessUnavailable(
            f"random source returned {len(data)} bytes, expected {length}"
        )
    return data
