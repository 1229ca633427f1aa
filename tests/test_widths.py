# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the per-width encode/decode modules."""

import pytest
from unsigned_varint import encode, decode
from unsigned_varint.varint import Overflow

WIDTHS = [
    ("u8", 8, 2),
    ("u16", 16, 3),
    ("u32", 32, 5),
    ("u64", 64, 10),
    ("u128", 128, 19),
]


class TestBuffers:
    """Tests for encode buffer factories."""

    @pytest.mark.parametrize("name,bits,size", WIDTHS)
    def test_buffer_sizes(self, name, bits, size):
        assert len(getattr(encode, f"{name}_buffer")()) == size

    def test_usize_buffer_matches_native(self):
        assert len(encode.usize_buffer()) in (5, 10)


class TestPerWidth:
    """Encoders and decoders for each width."""

    @pytest.mark.parametrize("name,bits,size", WIDTHS)
    def test_max_value(self, name, bits, size):
        """Width max encodes to `size` bytes and decodes back."""
        enc = getattr(encode, name)
        dec = getattr(decode, name)
        buf = getattr(encode, f"{name}_buffer")()

        encoded = bytes(enc((1 << bits) - 1, buf))
        assert len(encoded) == size
        assert encoded[-1] & 0x80 == 0

        value, rest = dec(encoded + b"\x2A")
        assert value == (1 << bits) - 1
        assert rest == b"\x2A"

    @pytest.mark.parametrize("name,bits,size", WIDTHS)
    def test_zero(self, name, bits, size):
        buf = getattr(encode, f"{name}_buffer")()
        assert getattr(encode, name)(0, buf) == b"\x00"

    def test_u64_max_bytes(self):
        buf = encode.u64_buffer()
        assert encode.u64(18446744073709551615, buf) == bytes(
            [0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x01]
        )

    def test_u8_wrong_buffer(self):
        with pytest.raises(ValueError):
            encode.u8(1, encode.u64_buffer())

    def test_u32_overflow(self):
        with pytest.raises(Overflow):
            decode.u32(b"\x80\x80\x80\x80\x80\x01")

    def test_usize_roundtrip(self):
        buf = encode.usize_buffer()
        value, rest = decode.usize(bytes(encode.usize(8192, buf)))
        assert value == 8192
        assert rest == b""
