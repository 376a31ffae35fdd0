"""Structured view of a share's wire format."""

from __future__ import annotations

from dataclasses import dataclass

from gfshare.errors import InvalidInputType, InvalidShareStructure


@dataclass(frozen=True)
class Share:
    """A single share: the y-vector and its x-coordinate.

    On the wire a share is ``y || x``, exactly ``len(secret) + 1`` bytes with
    no length prefix, version tag or checksum.
    """

    x: int
    y: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.x, int) or isinstance(self.x, bool):
            raise InvalidInputType("x must be an integer")
        if not 1 <= self.x <= 255:
            raise InvalidShareStructure(f"x must be in [1, 255], got {self.x}")
        if not isinstance(self.y, (bytes, bytearray, memoryview)):
            raise InvalidInputType("y must be a bytes-like object")
        if len(self.y) == 0:
            raise InvalidShareStructure("y cannot be empty")
        object.__setattr__(self, "y", bytes(self.y))

    @classmethod
    def from_bytes(cls, raw: bytes | bytearray | memoryview) -> Share:
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise InvalidInputType("each share must be a bytes-like object")
        raw = bytes(raw)
        if len(raw) < 2:
            raise InvalidShareStructure("each share must be at least 2 bytes")
        return cls(x=raw[-1], y=raw[:-1])

    def to_bytes(self) -> bytes:
        return self.y + bytes([self.x])

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return len(self.y) + 1
