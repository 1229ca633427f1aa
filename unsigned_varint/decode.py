# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Per-width varint decoders.

Each decoder returns ``(value, rest)`` where ``rest`` is a view over the
input following the varint. Truncated input raises ``Insufficient``;
overlong input raises ``Overflow``.
"""

from typing import Tuple

from .varint import U8, U16, U32, U64, U128, USIZE, BytesLike, decode


def u8(buf: BytesLike) -> Tuple[int, memoryview]:
    """Decode the given bytes as u8."""
    return decode(buf, U8)


def u16(buf: BytesLike) -> Tuple[int, memoryview]:
    """Decode the given bytes as u16."""
    return decode(buf, U16)


def u32(buf: BytesLike) -> Tuple[int, memoryview]:
    """Decode the given bytes as u32."""
    return decode(buf, U32)


def u64(buf: BytesLike) -> Tuple[int, memoryview]:
    """Decode the given bytes as u64."""
    return decode(buf, U64)


def u128(buf: BytesLike) -> Tuple[int, memoryview]:
    """Decode the given bytes as u128."""
    return decode(buf, U128)


def usize(buf: BytesLike) -> Tuple[int, memoryview]:
    """Decode the given bytes as a pointer-width integer."""
    return decode(buf, USIZE)
