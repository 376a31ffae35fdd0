"""Shared test fixtures for the gfshare test suite."""

from __future__ import annotations

import pytest


class FixedRandomSource:
    """Deterministic stand-in for a CSPRNG: cycles through a byte pattern."""

    def __init__(self, pattern: bytes = bytes(range(1, 256))) -> None:
        self.pattern = pattern
        self.calls: list[int] = []
        self._pos = 0

    def fill(self, length: int) -> bytes:
        self.calls.append(length)
        n = len(self.pattern)
        out = bytes(self.pattern[(self._pos + i) % n] for i in range(length))
        self._pos += length
        return out

    @property
    def consumed(self) -> int:
        return sum(self.calls)


class AsyncFixedRandomSource(FixedRandomSource):
    async def fill(self, length: int) -> bytes:  # type: ignore[override]
        return FixedRandomSource.fill(self, length)


@pytest.fixture
def fixed_source() -> FixedRandomSource:
    """Source whose first bytes are 0x01, 0x02, 0x03, ..."""
    return FixedRandomSource()


@pytest.fixture
def make_fixed_source():
    """Factory for independent sources sharing the same pattern."""

    def _make(pattern: bytes = bytes(range(1, 256))) -> FixedRandomSource:
        return FixedRandomSource(pattern)

    return _make


@pytest.fixture
def async_fixed_source() -> AsyncFixedRandomSource:
    return AsyncFixedRandomSource()


@pytest.fixture
def secret() -> bytes:
    return bytes([0x73, 0x65, 0x63, 0x72, 0x65, 0x74])
