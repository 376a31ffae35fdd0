"""Shamir's (n,t)-threshold secret sharing over GF(2^8).

Each secret byte is the constant term of its own random polynomial of degree
t-1. A share is the vector of those polynomials evaluated at one x-coordinate,
followed by the x-coordinate itself. t shares reconstruct; fewer reveal nothing.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Generator, Sequence

import numpy as np

from gfshare import field
from gfshare.csprng import (
    AnyRandomSource,
    AsyncSystemRandomSource,
    check_random_bytes,
    default_random_source,
)
from gfshare.errors import InvalidInputType, RandomnessUnavailable
from gfshare.models import Share
from gfshare.validation import validate_combine_args, validate_split_args

logger = logging.getLogger(__name__)

# Each step yields a number of random bytes it needs and is sent the bytes back.
RandomnessSteps = Generator[int, bytes, list[bytes]]

_COORDINATE_CHUNK = 255
# Rejection sampling needs about 1.3 chunks on average.
_MAX_COORDINATE_CHUNKS = 16


def _advance(steps: RandomnessSteps, value: bytes | None = None) -> tuple[bool, object]:
    """Send value into the split steps; return (finished, next request or result)."""
    try:
        return False, steps.send(value)
    except StopIteration as done:
        return True, done.value


class ShamirSecretSharing:
    """(n, t)-threshold secret sharing of byte strings over GF(2^8).

    Args:
        random_source: Object with ``fill(length) -> bytes`` (or an async
            ``fill``). Defaults to the operating-system CSPRNG.
        shuffle_coordinates: Assign x-coordinates as a random permutation of
            1..255 instead of 1..n in order.
    """

    def __init__(
        self,
        random_source: AnyRandomSource | None = None,
        shuffle_coordinates: bool = False,
    ) -> None:
        self.random_source = random_source
        self.shuffle_coordinates = shuffle_coordinates

    def split(self, secret: bytes, shares: int, threshold: int) -> list[bytes]:
        """Split secret into ``shares`` shares, any ``threshold`` of which recover it."""
        data = validate_split_args(secret, shares, threshold)
        source = self.random_source
        if source is None:
            source = default_random_source()
        steps = self._split_steps(data, shares, threshold)

        done, value = _advance(steps)
        while not done:
            try:
                chunk = source.fill(value)
            except StopIteration as exc:
                raise RandomnessUnavailable("random source is exhausted") from exc
            if inspect.isawaitable(chunk):
                if inspect.iscoroutine(chunk):
                    chunk.close()
                raise InvalidInputType(
                    "random source is asynchronous; use split_async"
                )
            done, value = _advance(steps, check_random_bytes(chunk, value))
        return value

    async def split_async(self, secret: bytes, shares: int, threshold: int) -> list[bytes]:
        """Like :meth:`split`, awaiting the random source when it is asynchronous."""
        data = validate_split_args(secret, shares, threshold)
        source = self.random_source
        if source is None:
            source = AsyncSystemRandomSource()
        steps = self._split_steps(data, shares, threshold)

        done, value = _advance(steps)
        while not done:
            try:
                chunk = source.fill(value)
                if inspect.isawaitable(chunk):
                    chunk = await chunk
            except StopIteration as exc:
                raise RandomnessUnavailable("random source is exhausted") from exc
            done, value = _advance(steps, check_random_bytes(chunk, value))
        return value

    def combine(self, shares: Sequence[bytes | Share]) -> bytes:
        """Reconstruct the secret via Lagrange interpolation at x=0.

        Supplying fewer shares than the split threshold, or tampered shares,
        is not detected: the result is simply a wrong secret.
        """
        raw = validate_combine_args(shares)
        logger.debug(
            "Combining %d shares of %d bytes", len(raw), len(raw[0])
        )
        return self._lagrange_interpolate_at_zero(raw)

    async def combine_async(self, shares: Sequence[bytes | Share]) -> bytes:
        return self.combine(shares)

    def _split_steps(self, secret: bytes, n: int, t: int) -> RandomnessSteps:
        logger.debug(
            "Splitting %d-byte secret into %d shares with threshold %d",
            len(secret),
            n,
            t,
        )
        coeffs = yield from self._random_polynomials(secret, t - 1)

        if self.shuffle_coordinates:
            xs = yield from self._shuffled_coordinates(n)
        else:
            xs = list(range(1, n + 1))

        shares = []
        for x in xs:
            y = field.eval_poly(coeffs, x)
            shares.append(y.tobytes() + bytes([x]))

        coeffs.fill(0)
        return shares

    def _random_polynomials(
        self, secret: bytes, degree: int
    ) -> Generator[int, bytes, np.ndarray]:
        """One polynomial per secret byte: row i is [secret[i], c_1, ..., c_degree]."""
        count = len(secret)
        randomness = yield count * degree

        coeffs = np.empty((count, degree + 1), dtype=np.uint8)
        coeffs[:, 0] = np.frombuffer(secret, dtype=np.uint8)
        coeffs[:, 1:] = np.frombuffer(randomness, dtype=np.uint8).reshape(count, degree)
        return coeffs

    def _shuffled_coordinates(self, n: int) -> Generator[int, bytes, list[int]]:
        """First n entries of a uniformly random permutation of 1..255.

        Fisher-Yates with rejection sampling so every index is unbiased.
        """
        coords = list(range(1, 256))
        pool = bytearray()
        chunks = 0

        for i in range(len(coords) - 1, 0, -1):
            bound = i + 1
            limit = 256 - 256 % bound
            while True:
                if not pool:
                    if chunks == _MAX_COORDINATE_CHUNKS:
                        raise RandomnessUnavailable(
                            "random source is not producing usable bytes"
                        )
                    chunks += 1
                    pool = bytearray((yield _COORDINATE_CHUNK))
                r = pool.pop()
                if r < limit:
                    break
            j = r % bound
            coords[i], coords[j] = coords[j], coords[i]

        return coords[:n]

    def _lagrange_interpolate_at_zero(self, raw: list[bytes]) -> bytes:
        """Lagrange interpolation evaluated at x = 0, for every byte position at once.

        For points (x_j, y_j), the Lagrange basis polynomial at x=0 is:
            L_j(0) = prod_{m != j} (0 - x_m) / (x_j - x_m)
                   = prod_{m != j} x_m / (x_m ^ x_j)

        since subtraction is XOR in GF(2^8). The value at 0 is XOR_j y_j * L_j(0).
        """
        k = len(raw)
        matrix = np.frombuffer(b"".join(raw), dtype=np.uint8).reshape(k, -1)
        xs = [int(x) for x in matrix[:, -1]]
        ys = matrix[:, :-1]

        secret = np.zeros(ys.shape[1], dtype=np.uint8)
        for j in range(k):
            xj = xs[j]
            numerator = 1
            denominator = 1
            for m in range(k):
                if m == j:
                    continue
                xm = xs[m]
                numerator = field.multiply(numerator, xm)
                denominator = field.multiply(denominator, field.subtract(xm, xj))

            basis = field.divide(numerator, denominator)
            secret ^= field.multiply_vec(ys[j], basis)

        return secret.tobytes()


def split(
    secret: bytes,
    shares: int,
    threshold: int,
    random_source: AnyRandomSource | None = None,
    shuffle_coordinates: bool = False,
) -> list[bytes]:
    """Convenience: split secret into ``shares`` shares with the given threshold."""
    sss = ShamirSecretSharing(random_source, shuffle_coordinates)
    return sss.split(secret, shares, threshold)


def combine(shares: Sequence[bytes | Share]) -> bytes:
    """Convenience: reconstruct a secret from shares."""
    return ShamirSecretSharing().combine(shares)


async def split_async(
    secret: bytes,
    shares: int,
    threshold: int,
    random_source: AnyRandomSource | None = None,
    shuffle_coordinates: bool = False,
) -> list[bytes]:
    """Convenience: awaitable :func:`split` for asynchronous random sources."""
    sss = ShamirSecretSharing(random_source, shuffle_coordinates)
    return await sss.split_async(secret, shares, threshold)


async def combine_async(shares: Sequence[bytes | Share]) -> bytes:
    """Convenience: awaitable :func:`combine`."""
    return await ShamirSecretSharing().combine_async(shares)
