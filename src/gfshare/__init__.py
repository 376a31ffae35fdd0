"""gfshare: Shamir's Secret Sharing over GF(2^8).

Split a byte string into n shares so that any t of them reconstruct it exactly
while t-1 or fewer reveal nothing about it.
"""

from gfshare.errors import (
    DivisionByZero,
    InvalidInputType,
    InvalidShareStructure,
    ParameterOutOfRange,
    RandomnessUnavailable,
    ShamirError,
)
from gfshare.models import Share
from gfshare.shamir import ShamirSecretSharing, combine, combine_async, split, split_async

__version__ = "0.1.0"

__all__ = [
    "DivisionByZero",
    "InvalidInputType",
    "InvalidShareStructure",
    "ParameterOutOfRange",
    "RandomnessUnavailable",
    "ShamirError",
    "ShamirSecretSharing",
    "Share",
    "combine",
    "combine_async",
    "split",
    "split_async",
]
