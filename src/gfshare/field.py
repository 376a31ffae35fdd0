"""Arithmetic in GF(2^8) with the AES reduction polynomial x^8 + x^4 + x^3 + x + 1.

Multiplication and division go through logarithm/exponent tables generated
once at import from the generator 0x03. The tables are read-only numpy arrays
shared by every caller.
"""

from __future__ import annotations

import numpy as np

from gfshare.errors import DivisionByZero

REDUCTION_POLYNOMIAL = 0x11B
GENERATOR = 0x03
ORDER = 255  # size of the multiplicative group


def _xtime(a: int) -> int:
    """Multiply by x (0x02), reducing modulo the field polynomial."""
    a <<= 1
    if a & 0x100:
        a ^= REDUCTION_POLYNOMIAL
    return a


def _build_tables() -> tuple[np.ndarray, np.ndarray]:
    exp = np.zeros(2 * ORDER, dtype=np.uint8)
    log = np.zeros(256, dtype=np.uint8)

    x = 1
    for i in range(ORDER):
        exp[i] = x
        log[x] = i
        x = _xtime(x) ^ x  # x * 0x03
    # Wraparound copy so exp[log[a] + log[b]] never needs a modulo.
    exp[ORDER:] = exp[:ORDER]

    exp.flags.writeable = False
    log.flags.writeable = False
    return exp, log


EXP, LOG = _build_tables()


def add(a: int, b: int) -> int:
    return a ^ b


def subtract(a: int, b: int) -> int:
    # Characteristic 2: every element is its own additive inverse.
    return a ^ b


def multiply(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return int(EXP[int(LOG[a]) + int(LOG[b])])


def divide(a: int, b: int) -> int:
    """Return a / b. Raises DivisionByZero when b is 0."""
    if b == 0:
        raise DivisionByZero("cannot divide by zero in GF(2^8)")
    if a == 0:
        return 0
    return int(EXP[(int(LOG[a]) - int(LOG[b]) + ORDER) % ORDER])


def multiply_vec(vec: np.ndarray, scalar: int) -> np.ndarray:
    """Multiply every element of a uint8 vector by a field scalar."""
    if scalar == 0:
        return np.zeros_like(vec, dtype=np.uint8)
    out = EXP[LOG[vec].astype(np.intp) + int(LOG[scalar])]
    out[vec == 0] = 0
    return out


def eval_poly(coeffs: np.ndarray, x: int) -> np.ndarray:
    """Evaluate a batch of polynomials at x using Horner's method.

    Args:
        coeffs: uint8 matrix of shape (count, degree + 1); column k holds the
            coefficient of x^k for each polynomial.
        x: Field element to evaluate at.

    Returns:
        uint8 vector of length ``count`` with one value per polynomial.
    """
    degree = coeffs.shape[1] - 1
    y = coeffs[:, degree].copy()
    for k in range(degree - 1, -1, -1):
        y = multiply_vec(y, x) ^ coeffs[:, k]
    return y
