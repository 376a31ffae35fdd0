"""Exception hierarchy for secret splitting and recombination.

Every error carries a specific kind. Each kind also derives from the builtin
exception a caller would expect, so ``except ValueError`` keeps working.
"""

from __future__ import annotations


class ShamirError(Exception):
    """Base class for all errors raised by gfshare."""


class InvalidInputType(ShamirError, TypeError):
    """An argument has the wrong type (e.g. a str where bytes are required)."""


class ParameterOutOfRange(ShamirError, ValueError):
    """Share count, threshold or number of supplied shares is out of range."""


class InvalidShareStructure(ShamirError, ValueError):
    """Empty secret, undersized share, mismatched lengths or duplicate x-coordinates."""


class RandomnessUnavailable(ShamirError, RuntimeError):
    """No cryptographically secure random source could supply bytes."""


class DivisionByZero(ShamirError, ZeroDivisionError):
    """Division by the zero element of GF(2^8)."""
