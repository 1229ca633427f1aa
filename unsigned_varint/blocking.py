# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint and frame I/O over blocking file-like streams.

Works with anything exposing ``read(n)``, ``write(data)`` and ``flush()``:
``io.BytesIO``, ``socket.makefile("rwb")`` or ``serial.Serial``. An empty
read is treated as end of stream (for pyserial, a read timeout).
"""

from typing import Optional

from .codec import TooLarge, UnexpectedEof
from .varint import USIZE, BytesLike, buffer, decode, encode


def read_varint(stream, width: int = USIZE) -> int:
    """
    Read one varint from `stream`, one byte at a time.

    Raises:
        UnexpectedEof: If the stream ends before the final varint byte
        Overflow: If the varint is longer than `width` allows
    """
    scratch = buffer(width)
    for i in range(len(scratch)):
        chunk = stream.read(1)
        if not chunk:
            raise UnexpectedEof("stream closed while reading varint")
        scratch[i] = chunk[0]
        if not (chunk[0] & 0x80):
            return decode(scratch[:i + 1], width)[0]
    # Every byte had its continuation bit set
    return decode(scratch, width)[0]


def write_varint(stream, value: int, width: int = USIZE) -> None:
    """Write `value` as a varint and flush."""
    stream.write(bytes(encode(value, width, buffer(width))))
    stream.flush()


def read_exact(stream, n: int) -> bytes:
    """Read exactly `n` bytes, raising UnexpectedEof on a short stream."""
    buf = bytearray()
    while len(buf) < n:
        chunk = stream.read(n - len(buf))
        if not chunk:
            raise UnexpectedEof(f"stream closed after {len(buf)} of {n} payload bytes")
        buf.extend(chunk)
    return bytes(buf)


def read_bytes(stream, max_len: Optional[int] = None) -> bytes:
    """
    Read one length-prefixed payload from `stream`.

    Args:
        stream: Stream to read from
        max_len: Optional bound on the declared length (default unbounded)

    Raises:
        UnexpectedEof: If the stream ends inside the frame
        TooLarge: If max_len is given and the declared length exceeds it
        Overflow: If the length prefix is malformed
    """
    length = read_varint(stream, USIZE)
    if max_len is not None and length > max_len:
        raise TooLarge(f"len {length} > max {max_len}")
    return read_exact(stream, length)


def write_bytes(stream, payload: BytesLike) -> None:
    """Write a length-prefixed payload and flush."""
    stream.write(bytes(encode(len(payload), USIZE, buffer(USIZE))))
    stream.write(payload)
    stream.flush()
