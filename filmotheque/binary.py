"""Readers for the little-endian primitives of the film collection file."""

from __future__ import annotations

from typing import BinaryIO


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_uint8(stream: BinaryIO) -> int:
    """Read one unsigned byte."""
    return _read_exact(stream, 1)[0]


def read_uint16(stream: BinaryIO) -> int:
    """Read an unsigned 16-bit little-endian integer."""
    return int.from_bytes(_read_exact(stream, 2), "little")


def read_string(stream: BinaryIO) -> str:
    """Read a string stored as a 16-bit length followed by its bytes."""
    length = read_uint16(stream)
    return _read_exact(stream, length).decode("utf-8", errors="replace")