# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Incremental varint and length-prefixed frame codecs.

The codecs work against a growable ``bytearray`` that the caller keeps
appending received bytes to. ``decode()`` is polled after every append:
it returns ``None`` until a complete item is available, then removes that
item from the front of the buffer and returns it.

Frame wire format:
    varint(len(payload)) || payload
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from .varint import USIZE, BytesLike, DecodeError, Insufficient, buffer, decode, encode

logger = logging.getLogger(__name__)


class FramingError(Exception):
    """Base exception for framing errors."""
    pass


class TooLarge(FramingError):
    """Frame length exceeds the configured maximum."""
    pass


class UnexpectedEof(FramingError, EOFError):
    """Stream closed in the middle of a varint or payload."""
    pass


@dataclass(frozen=True)
class AwaitingLength:
    """No length prefix decoded yet."""
    pass


@dataclass(frozen=True)
class AwaitingPayload:
    """Length prefix decoded; waiting for `length` payload bytes."""
    length: int


FrameState = Union[AwaitingLength, AwaitingPayload]

AWAITING_LENGTH = AwaitingLength()


class VarintCodec:
    """Codec for single varint values of a fixed width."""

    def __init__(self, width: int = USIZE):
        self.width = width
        self._buf = buffer(width)

    def encode(self, value: int, dst: bytearray) -> None:
        """Append the encoding of `value` to `dst`."""
        dst.extend(encode(value, self.width, self._buf))

    def decode(self, src: bytearray) -> Optional[int]:
        """
        Decode a varint from the front of `src`.

        Returns:
            The value, with its bytes removed from `src`, or None if `src`
            does not yet hold a complete varint (nothing is consumed)

        Raises:
            Overflow: If the varint is malformed
        """
        try:
            value, rest = decode(src, self.width)
        except Insufficient:
            return None
        consumed = len(src) - len(rest)
        rest.release()
        del src[:consumed]
        return value


class FrameCodec:
    """
    Codec for varint length-prefixed byte payloads.

    One instance tracks the state of one byte stream; use a separate
    instance per connection.
    """

    def __init__(self, max_len: Optional[int] = None):
        """
        Args:
            max_len: Largest payload accepted when encoding or decoding
                (default unbounded)
        """
        self._max_len = max_len
        self._state: FrameState = AWAITING_LENGTH
        self._len_codec = VarintCodec(USIZE)
        self.wanted = 0

    @property
    def max_len(self) -> Optional[int]:
        return self._max_len

    @max_len.setter
    def max_len(self, value: Optional[int]):
        self._max_len = value

    def set_max_len(self, value: int) -> None:
        """Limit the maximum allowed payload length."""
        self._max_len = value

    @property
    def state(self) -> FrameState:
        return self._state

    def _check_len(self, length: int) -> bool:
        return self._max_len is None or length <= self._max_len

    def encode(self, payload: BytesLike, dst: bytearray) -> None:
        """
        Append a frame carrying `payload` to `dst`.

        Raises:
            TooLarge: If the payload exceeds max_len (dst is left untouched)
        """
        if not self._check_len(len(payload)):
            raise TooLarge(f"len {len(payload)} > max {self._max_len} when encoding")
        self._len_codec.encode(len(payload), dst)
        dst.extend(payload)

    def decode(self, src: bytearray) -> Optional[bytes]:
        """
        Decode one frame from the front of `src`.

        Returns:
            The payload of the next complete frame, or None if more bytes
            are needed. A partial frame is never returned.

        Raises:
            TooLarge: If the declared length exceeds max_len
            Overflow: If the length prefix is malformed
        """
        while True:
            state = self._state
            if isinstance(state, AwaitingLength):
                length = self._len_codec.decode(src)
                if length is None:
                    return None
                self._state = AwaitingPayload(length)
                continue

            length = state.length
            if not self._check_len(length):
                self._state = AWAITING_LENGTH
                self.wanted = 0
                logger.debug("Rejecting frame: len %d > max %d", length, self._max_len)
                raise TooLarge(f"len {length} > max {self._max_len}")

            if len(src) < length:
                self.wanted = length - len(src)
                return None

            payload = bytes(src[:length])
            del src[:length]
            self._state = AWAITING_LENGTH
            self.wanted = 0
            return payload


class FrameReader:
    """
    Reassemble frames from arbitrarily sized chunks.

    A malformed or oversized frame is fatal for the stream. Frames that
    completed before it are still returned; the error is raised by the
    next call to feed().

    Example:
        reader = FrameReader(max_len=65536)
        while True:
            for payload in reader.feed(sock.recv(min(reader.wanted, 65536) or 4096)):
                handle(payload)
    """

    def __init__(self, max_len: Optional[int] = None):
        self._codec = FrameCodec(max_len)
        self._buffer = bytearray()
        self._error: Optional[Exception] = None

    @property
    def wanted(self) -> int:
        """Payload bytes still missing for the pending frame (0 if unknown)."""
        return self._codec.wanted

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    def feed(self, data: BytesLike) -> List[bytes]:
        """
        Append `data` and return every frame it completes.

        Raises:
            TooLarge: If a frame exceeds max_len
            Overflow: If a length prefix is malformed
        """
        if self._error is not None:
            error, self._error = self._error, None
            raise error
        self._buffer.extend(data)
        frames = []
        while True:
            try:
                payload = self._codec.decode(self._buffer)
            except (FramingError, DecodeError) as e:
                if not frames:
                    raise
                self._error = e
                return frames
            if payload is None:
                return frames
            frames.append(payload)
