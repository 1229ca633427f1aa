# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned varint encoding and varint length-prefixed framing.

Example usage:
    from unsigned_varint import encode, decode, FrameCodec

    buf = encode.u64_buffer()
    data = bytes(encode.u64(300, buf))      # b"\\xac\\x02"
    value, rest = decode.u64(data)          # (300, <empty view>)

    codec = FrameCodec(max_len=4096)
    out = bytearray()
    codec.encode(b"hello", out)

    incoming = bytearray()
    incoming += out[:3]
    codec.decode(incoming)                  # None, needs more bytes
    incoming += out[3:]
    codec.decode(incoming)                  # b"hello"
"""

from . import aio, blocking, decode, encode
from .codec import (
    AwaitingLength,
    AwaitingPayload,
    FrameCodec,
    FrameReader,
    FramingError,
    TooLarge,
    UnexpectedEof,
    VarintCodec,
)
from .transport import (
    SerialTransport,
    TransportError,
    TimeoutError,
    ProtocolError,
)
from .varint import (
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    DecodeError,
    Insufficient,
    Overflow,
    encode_varint,
    decode_varint,
    encoded_len,
)

__version__ = "0.1.0"

__all__ = [
    # Per-width encoders/decoders
    "encode",
    "decode",
    # Stream I/O
    "aio",
    "blocking",
    # Widths
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    # Varint
    "encode_varint",
    "decode_varint",
    "encoded_len",
    "DecodeError",
    "Insufficient",
    "Overflow",
    # Framing
    "VarintCodec",
    "FrameCodec",
    "FrameReader",
    "AwaitingLength",
    "AwaitingPayload",
    "FramingError",
    "TooLarge",
    "UnexpectedEof",
    # Transport
    "SerialTransport",
    "TransportError",
    "TimeoutError",
    "ProtocolError",
]
