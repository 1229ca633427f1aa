# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Per-width varint encoders.

Each encoder writes into a caller-owned buffer from the matching
``*_buffer()`` factory and returns a view over the bytes written, so a
single buffer can be reused across calls:

    buf = encode.u64_buffer()
    out.extend(encode.u64(n, buf))
"""

from .varint import U8, U16, U32, U64, U128, USIZE, buffer, encode


def u8(number: int, buf: bytearray) -> memoryview:
    """Encode a u8 into `buf`. Returns the slice of encoded bytes."""
    return encode(number, U8, buf)


def u16(number: int, buf: bytearray) -> memoryview:
    """Encode a u16 into `buf`. Returns the slice of encoded bytes."""
    return encode(number, U16, buf)


def u32(number: int, buf: bytearray) -> memoryview:
    """Encode a u32 into `buf`. Returns the slice of encoded bytes."""
    return encode(number, U32, buf)


def u64(number: int, buf: bytearray) -> memoryview:
    """Encode a u64 into `buf`. Returns the slice of encoded bytes."""
    return encode(number, U64, buf)


def u128(number: int, buf: bytearray) -> memoryview:
    """Encode a u128 into `buf`. Returns the slice of encoded bytes."""
    return encode(number, U128, buf)


def usize(number: int, buf: bytearray) -> memoryview:
    """Encode a pointer-width integer into `buf`. Returns the slice of encoded bytes."""
    return encode(number, USIZE, buf)


def u8_buffer() -> bytearray:
    return buffer(U8)


def u16_buffer() -> bytearray:
    return buffer(U16)


def u32_buffer() -> bytearray:
    return buffer(U32)


def u64_buffer() -> bytearray:
    return buffer(U64)


def u128_buffer() -> bytearray:
    return buffer(U128)


def usize_buffer() -> bytearray:
    return buffer(USIZE)
