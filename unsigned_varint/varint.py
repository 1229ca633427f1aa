# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned varint encoding/decoding (LEB128-style).

Each encoded byte carries 7 value bits, least significant group first.
The high bit (0x80) is set when more bytes follow and clear on the final
byte, so zero encodes as the single byte 0x00.

Values are bounded by a fixed bit width (8, 16, 32, 64, 128 or the native
pointer width). The width decides the maximum encoded length and is what
makes overlong input detectable.
"""

import struct
from typing import Tuple, Union

BytesLike = Union[bytes, bytearray, memoryview]

U8 = 8
U16 = 16
U32 = 32
U64 = 64
U128 = 128
USIZE = struct.calcsize("P") * 8

# Maximum encoded length per width: ceil(width / 7)
MAX_LEN = {
    U8: 2,
    U16: 3,
    U32: 5,
    U64: 10,
    U128: 19,
}


class DecodeError(ValueError):
    """Base exception for varint decoding errors."""
    pass


class Insufficient(DecodeError):
    """Input ended before the final varint byte. More data may follow."""

    def __init__(self, msg: str = "not enough input bytes"):
        super().__init__(msg)


class Overflow(DecodeError):
    """Input is longer than the width allows or the value does not fit."""

    def __init__(self, msg: str = "input bytes exceed maximum"):
        super().__init__(msg)


def max_len(width: int) -> int:
    """Return the maximum encoded length for the given bit width."""
    try:
        return MAX_LEN[width]
    except KeyError:
        raise ValueError(f"Unsupported varint width: {width}") from None


def buffer(width: int) -> bytearray:
    """Create a zeroed encode buffer sized for the given bit width."""
    return bytearray(max_len(width))


def encoded_len(value: int) -> int:
    """Number of bytes `value` occupies once encoded."""
    if value < 0:
        raise ValueError("Cannot encode negative value as varint")
    count = 1
    while value >= 0x80:
        value >>= 7
        count += 1
    return count


def encode(value: int, width: int, buf: bytearray) -> memoryview:
    """
    Encode an unsigned integer into a caller-supplied buffer.

    Args:
        value: Integer in the range [0, 2**width)
        width: Bit width of the value
        buf: Buffer of exactly max_len(width) bytes (see buffer())

    Returns:
        View over the bytes written, starting at buf[0]. Bytes after the
        view are left as they were.

    Raises:
        ValueError: If value is negative, does not fit in `width` bits, or
            the buffer has the wrong size
    """
    size = max_len(width)
    if len(buf) != size:
        raise ValueError(f"Encode buffer for u{width} must be {size} bytes, got {len(buf)}")
    if value < 0:
        raise ValueError("Cannot encode negative value as varint")
    if value >> width:
        raise ValueError(f"Value does not fit in u{width}: {value}")

    i = 0
    while value >= 0x80:
        buf[i] = (value & 0x7F) | 0x80
        value >>= 7
        i += 1
    buf[i] = value
    return memoryview(buf)[:i + 1]


def decode(data: BytesLike, width: int) -> Tuple[int, memoryview]:
    """
    Decode an unsigned integer from the start of `data`.

    Args:
        data: Bytes beginning with a varint
        width: Bit width of the expected value

    Returns:
        Tuple of (decoded value, view over the bytes after the varint)

    Raises:
        Insufficient: If data ends before the final varint byte
        Overflow: If the varint is longer than the width allows or the
            value does not fit in `width` bits
    """
    last = max_len(width) - 1
    value = 0
    for i, byte in enumerate(data):
        value |= (byte & 0x7F) << (i * 7)
        if not (byte & 0x80):
            if value >> width:
                raise Overflow(f"varint value exceeds u{width}")
            return value, memoryview(data)[i + 1:]
        if i == last:
            raise Overflow()
    raise Insufficient()


def encode_varint(value: int, width: int = U64) -> bytes:
    """
    Encode an unsigned integer as a standalone bytes object.

    Args:
        value: Non-negative integer to encode
        width: Bit width bound (default 64)

    Returns:
        Varint-encoded bytes
    """
    return bytes(encode(value, width, buffer(width)))


def decode_varint(data: BytesLike, offset: int = 0, width: int = U64) -> Tuple[int, int]:
    """
    Decode a varint at `offset`.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data
        width: Bit width bound (default 64)

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        Insufficient: If the varint is truncated
        Overflow: If the varint is malformed or too large
    """
    if offset > len(data):
        raise Insufficient()
    value, rest = decode(memoryview(data)[offset:], width)
    return value, len(data) - len(rest)
