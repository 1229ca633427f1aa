# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared pytest fixtures."""

import pytest


class MemoryWriter:
    """In-memory stand-in for asyncio.StreamWriter."""

    def __init__(self):
        self.data = bytearray()
        self.drains = 0

    def write(self, data: bytes) -> None:
        self.data.extend(data)

    async def drain(self) -> None:
        self.drains += 1


class ChunkedStream:
    """
    Blocking stream that returns at most `chunk` bytes per read.

    Mimics sockets and serial ports, which may return short reads.
    """

    def __init__(self, data: bytes = b"", chunk: int = 1):
        self._data = bytes(data)
        self._pos = 0
        self._chunk = chunk
        self.written = bytearray()
        self.flushes = 0
        self.reads = []

    def read(self, size: int) -> bytes:
        n = min(size, self._chunk)
        out = self._data[self._pos:self._pos + n]
        self._pos += len(out)
        self.reads.append(size)
        return out

    def write(self, data: bytes) -> int:
        self.written.extend(data)
        return len(data)

    def flush(self):
        self.flushes += 1

    @property
    def position(self) -> int:
        return self._pos


@pytest.fixture
def memory_writer():
    """An in-memory async writer."""
    return MemoryWriter()


@pytest.fixture
def chunked_stream():
    """Factory for blocking streams with short reads."""
    return ChunkedStream
