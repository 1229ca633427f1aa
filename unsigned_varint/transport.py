# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial transport for varint length-prefixed frames.

Each message on the wire is varint(len) followed by the payload bytes.
"""

import logging
import time
from pathlib import Path
from typing import Optional

import serial

from .blocking import read_bytes, write_bytes
from .codec import FramingError, UnexpectedEof
from .varint import DecodeError

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Base exception for transport errors."""
    pass


class TimeoutError(TransportError):
    """Timeout waiting for a frame."""
    pass


class ProtocolError(TransportError):
    """Malformed or oversized frame."""
    pass


class SerialTransport:
    """
    Framed serial transport.

    Can be used as a context manager:
        with SerialTransport("/dev/ttyACM0", max_len=4096) as t:
            t.send(b"ping")
            reply = t.receive()
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
        max_len: Optional[int] = None,
    ):
        """
        Open a serial connection.

        Args:
            port: Serial port path (e.g., "/dev/ttyACM0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 5.0)
            max_len: Largest payload accepted by receive() (default unbounded)
        """
        self._ser = serial.Serial(port, baudrate, timeout=timeout)
        self.max_len = max_len
        logger.debug("Opened %s at %d baud", port, baudrate)
        time.sleep(0.1)  # Let the device settle

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()
            logger.debug("Closed %s", self._ser.port)

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def send(self, payload: bytes) -> None:
        """Send one frame."""
        if self.max_len is not None and len(payload) > self.max_len:
            raise ProtocolError(f"Payload of {len(payload)} bytes exceeds max {self.max_len}")
        write_bytes(self._ser, payload)

    def receive(self) -> bytes:
        """
        Receive one frame.

        Returns:
            Frame payload

        Raises:
            TimeoutError: If the port times out mid-frame
            ProtocolError: If the frame is malformed or exceeds max_len
        """
        try:
            return read_bytes(self._ser, self.max_len)
        except UnexpectedEof as e:
            raise TimeoutError(f"Timeout waiting for frame: {e}") from e
        except (FramingError, DecodeError) as e:
            logger.warning("Bad frame on %s: %s", self.port, e)
            raise ProtocolError(str(e)) from e

    def send_file(self, path: Path) -> int:
        """
        Send the contents of a file as one frame.

        Returns:
            Number of payload bytes sent

        Raises:
            FileNotFoundError: If the file does not exist
        """
        payload = Path(path).read_bytes()
        self.send(payload)
        return len(payload)
