"""Tests for gfshare.validation module."""

from __future__ import annotations

import pytest

from gfshare import combine, split
from gfshare.errors import (
    InvalidInputType,
    InvalidShareStructure,
    ParameterOutOfRange,
    ShamirError,
)
from gfshare.validation import validate_combine_args, validate_split_args

BOGUS_SHARE_1 = bytes([0xFF, 0x23])
BOGUS_SHARE_2 = bytes([0xC1, 0xA7, 0x04])


class TestSplitValidation:
    def test_secret_wrong_type(self):
        with pytest.raises(InvalidInputType, match="secret must be a bytes-like object"):
            split([0x73, 0x65, 0x63], 3, 2)

    def test_secret_str(self):
        with pytest.raises(InvalidInputType, match="secret"):
            split("secret", 3, 2)

    def test_empty_secret(self, fixed_source):
        with pytest.raises(InvalidShareStructure, match="secret cannot be empty"):
            split(b"", 3, 2, random_source=fixed_source)
        assert fixed_source.calls == []

    def test_shares_wrong_type(self, secret: bytes):
        with pytest.raises(InvalidInputType, match="shares must be an integer"):
            split(secret, "3", 2)

    def test_shares_float(self, secret: bytes):
        with pytest.raises(InvalidInputType, match="shares must be an integer"):
            split(secret, 3.0, 2)

    def test_shares_bool(self, secret: bytes):
        with pytest.raises(InvalidInputType, match="shares must be an integer"):
            split(secret, True, 2)

    @pytest.mark.parametrize("shares", [-1, 0, 1, 256, 1000])
    def test_shares_out_of_range(self, secret: bytes, shares: int):
        with pytest.raises(
            ParameterOutOfRange, match="shares must be at least 2 and at most 255"
        ):
            split(secret, shares, 2)

    def test_threshold_wrong_type(self, secret: bytes):
        with pytest.raises(InvalidInputType, match="threshold must be an integer"):
            split(secret, 3, "2")

    @pytest.mark.parametrize("threshold", [0, 1, 256])
    def test_threshold_out_of_range(self, secret: bytes, threshold: int):
        with pytest.raises(
            ParameterOutOfRange, match="threshold must be at least 2 and at most 255"
        ):
            split(secret, 255, threshold)

    def test_threshold_greater_than_shares(self, secret: bytes):
        with pytest.raises(ParameterOutOfRange, match="shares cannot be less than threshold"):
            split(secret, 3, 4)

    def test_returns_bytes(self):
        assert validate_split_args(bytearray(b"ab"), 3, 2) == b"ab"

    def test_bounds_accepted(self):
        assert validate_split_args(b"a", 255, 255) == b"a"
        assert validate_split_args(b"a", 2, 2) == b"a"


class TestCombineValidation:
    def test_shares_not_a_sequence(self):
        with pytest.raises(InvalidInputType, match="sequence"):
            combine(BOGUS_SHARE_1)

    def test_shares_generator(self):
        with pytest.raises(InvalidInputType, match="sequence"):
            combine(s for s in [BOGUS_SHARE_2, BOGUS_SHARE_2])

    def test_too_few_shares(self):
        with pytest.raises(
            ParameterOutOfRange, match="at least 2 and at most 255 elements"
        ):
            combine([BOGUS_SHARE_1])

    def test_too_many_shares(self):
        with pytest.raises(
            ParameterOutOfRange, match="at least 2 and at most 255 elements"
        ):
            combine([bytes(2)] * 256)

    def test_share_wrong_type(self):
        with pytest.raises(InvalidInputType, match="each share must be a bytes-like object"):
            combine([BOGUS_SHARE_1, "bogus_share_2"])

    def test_share_too_short(self):
        with pytest.raises(InvalidShareStructure, match="each share must be at least 2 bytes"):
            combine([b"", BOGUS_SHARE_2])

    def test_one_byte_shares(self):
        with pytest.raises(InvalidShareStructure, match="at least 2 bytes"):
            combine([b"\x01", b"\x02"])

    def test_length_mismatch(self):
        with pytest.raises(
            InvalidShareStructure, match="all shares must have the same byte length"
        ):
            combine([BOGUS_SHARE_1, BOGUS_SHARE_2])

    def test_duplicate_x_coordinates(self):
        with pytest.raises(InvalidShareStructure, match="duplicate"):
            combine([BOGUS_SHARE_2, BOGUS_SHARE_2])

    def test_duplicate_x_with_different_y(self):
        with pytest.raises(InvalidShareStructure, match="duplicate"):
            combine([b"\x10\x01", b"\x20\x01"])

    def test_tuple_accepted(self):
        assert validate_combine_args((b"\x10\x01", b"\x20\x02")) == [b"\x10\x01", b"\x20\x02"]


class TestErrorKinds:
    def test_builtin_bases(self):
        assert issubclass(InvalidInputType, TypeError)
        assert issubclass(ParameterOutOfRange, ValueError)
        assert issubclass(InvalidShareStructure, ValueError)

    def test_common_base(self, secret: bytes):
        with pytest.raises(ShamirError):
            split(secret, 1, 2)
        with pytest.raises(ShamirError):
            combine([b"\x01\x02"])
