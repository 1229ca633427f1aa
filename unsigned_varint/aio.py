# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint and frame I/O over asyncio streams.

Readers must provide ``async read(n)`` (returning b"" at end of stream)
and ``async readexactly(n)``; writers must provide ``write(data)`` and
``async drain()``. ``asyncio.StreamReader``/``asyncio.StreamWriter``
satisfy both.

The length prefix is read one byte at a time so that no byte past the
varint is consumed; the payload is then read in a single call.
"""

import asyncio
from typing import Optional

from .codec import TooLarge, UnexpectedEof
from .varint import USIZE, BytesLike, buffer, decode, encode


async def read_varint(reader, width: int = USIZE) -> int:
    """
    Read one varint from `reader`.

    Raises:
        UnexpectedEof: If the stream ends before the final varint byte
        Overflow: If the varint is longer than `width` allows
    """
    scratch = buffer(width)
    for i in range(len(scratch)):
        chunk = await reader.read(1)
        if not chunk:
            raise UnexpectedEof("stream closed while reading varint")
        scratch[i] = chunk[0]
        if not (chunk[0] & 0x80):
            return decode(scratch[:i + 1], width)[0]
    # Every byte had its continuation bit set
    return decode(scratch, width)[0]


async def write_varint(writer, value: int, width: int = USIZE) -> None:
    """Write `value` as a varint and drain the writer."""
    writer.write(bytes(encode(value, width, buffer(width))))
    await writer.drain()


async def read_bytes(reader, max_len: Optional[int] = None) -> bytes:
    """
    Read one length-prefixed payload from `reader`.

    Args:
        reader: Stream to read from
        max_len: Optional bound on the declared length (default unbounded)

    Raises:
        UnexpectedEof: If the stream ends inside the frame
        TooLarge: If max_len is given and the declared length exceeds it
        Overflow: If the length prefix is malformed
    """
    length = await read_varint(reader, USIZE)
    if max_len is not None and length > max_len:
        raise TooLarge(f"len {length} > max {max_len}")
    try:
        return await reader.readexactly(length)
    except asyncio.IncompleteReadError as exc:
        raise UnexpectedEof(
            f"stream closed after {len(exc.partial)} of {length} payload bytes"
        ) from exc


async def write_bytes(writer, payload: BytesLike) -> None:
    """Write a length-prefixed payload and drain the writer."""
    writer.write(bytes(encode(len(payload), USIZE, buffer(USIZE))))
    writer.write(payload)
    await writer.drain()
