#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for unsigned varints and varint-framed payloads.

Usage:
    python uvarint_tool.py encode 300 --width 16
    python uvarint_tool.py decode ac02
    python uvarint_tool.py frame payload.bin
    python uvarint_tool.py send --port /dev/ttyACM0 payload.bin
    python uvarint_tool.py receive --port /dev/ttyACM0 --max-len 4096 -o out.bin

Requirements:
    pip install pyserial
"""

import argparse
import sys
from pathlib import Path

import serial

from unsigned_varint import FrameCodec, SerialTransport, TransportError
from unsigned_varint.varint import MAX_LEN, DecodeError, decode_varint, encode_varint


def cmd_encode(value: int, width: int) -> bool:
    """Print the varint encoding of a value."""
    try:
        encoded = encode_varint(value, width)
    except ValueError as e:
        print(f"Error: {e}")
        return False
    print(encoded.hex())
    return True


def cmd_decode(hex_data: str, width: int) -> bool:
    """Decode a varint from hex and print the value and any trailing bytes."""
    try:
        data = bytes.fromhex(hex_data)
    except ValueError:
        print(f"Error: Invalid hex: {hex_data}")
        return False

    try:
        value, offset = decode_varint(data, width=width)
    except DecodeError as e:
        print(f"Error: {e}")
        return False

    print(f"Value:    {value}")
    print(f"Length:   {offset} bytes")
    if offset < len(data):
        print(f"Trailing: {data[offset:].hex()}")
    return True


def cmd_frame(path: Path) -> bool:
    """Print the framed encoding of a file."""
    out = bytearray()
    FrameCodec().encode(path.read_bytes(), out)
    print(out.hex())
    return True


def cmd_send(transport: SerialTransport, path: Path) -> bool:
    """Send a file as one frame."""
    print(f"Sending {path}... ", end="", flush=True)
    size = transport.send_file(path)
    print(f"OK ({size} bytes)")
    return True


def cmd_receive(transport: SerialTransport, output: Path = None) -> bool:
    """Receive one frame and print or save it."""
    payload = transport.receive()
    if output:
        output.write_bytes(payload)
        print(f"Received {len(payload)} bytes -> {output}")
    else:
        print(payload.hex())
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Unsigned varint and length-prefixed frame tool"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    widths = sorted(MAX_LEN)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode an integer as a varint")
    encode_parser.add_argument("value", type=int, help="Unsigned integer to encode")
    encode_parser.add_argument("--width", "-w", type=int, default=64, choices=widths,
                               help="Bit width (default 64)")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a hex varint")
    decode_parser.add_argument("hex", help="Hex-encoded bytes")
    decode_parser.add_argument("--width", "-w", type=int, default=64, choices=widths,
                               help="Bit width (default 64)")

    # frame command
    frame_parser = subparsers.add_parser("frame", help="Print a file as a hex frame")
    frame_parser.add_argument("file", type=Path, help="Payload file")

    # send command
    send_parser = subparsers.add_parser("send", help="Send a file as one frame")
    send_parser.add_argument("file", type=Path, help="Payload file")
    send_parser.add_argument("--port", "-p", required=True,
                             help="Serial port (e.g., /dev/ttyACM0)")

    # receive command
    recv_parser = subparsers.add_parser("receive", help="Receive one frame")
    recv_parser.add_argument("--port", "-p", required=True,
                             help="Serial port (e.g., /dev/ttyACM0)")
    recv_parser.add_argument("--max-len", type=int, default=None,
                             help="Reject frames larger than this many bytes")
    recv_parser.add_argument("--timeout", type=float, default=5.0,
                             help="Read timeout in seconds (default 5.0)")
    recv_parser.add_argument("--output", "-o", type=Path, default=None,
                             help="Write payload to this file instead of stdout")

    args = parser.parse_args()

    if args.command == "encode":
        sys.exit(0 if cmd_encode(args.value, args.width) else 1)
    if args.command == "decode":
        sys.exit(0 if cmd_decode(args.hex, args.width) else 1)

    if args.command in ("frame", "send") and not args.file.exists():
        print(f"Error: File not found: {args.file}")
        sys.exit(1)
    if args.command == "frame":
        sys.exit(0 if cmd_frame(args.file) else 1)

    try:
        if args.command == "receive":
            transport = SerialTransport(args.port, timeout=args.timeout, max_len=args.max_len)
        else:
            transport = SerialTransport(args.port)
    except serial.SerialException as e:
        print(f"Error opening {args.port}: {e}")
        sys.exit(1)

    try:
        if args.command == "send":
            cmd_send(transport, args.file)
        elif args.command == "receive":
            cmd_receive(transport, args.output)
    except TransportError as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        transport.close()


if __name__ == "__main__":
    main()
