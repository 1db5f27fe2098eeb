"""
Stream helpers shared by the record codecs.

Records serialize into, and deserialize from, any binary stream
(`io.BytesIO` in practice). The only thing the codecs need on top of the
plain stream interface is a read that either returns exactly the requested
number of bytes or fails loudly.
"""

from __future__ import annotations

from typing import IO, Final

from .exceptions import UnderrunError

READ_CHUNK_SIZE: Final = 64 * 1024
"""Largest single read issued while collecting a field."""


def read_exact(stream: IO[bytes], size: int, type_name: str) -> bytes:
    """
    Read exactly `size` bytes from `stream`.

    Reads in chunks of at most `READ_CHUNK_SIZE` bytes, so a length prefix
    taken from untrusted input never sizes a single read or allocation.

    Args:
        stream: The stream to read from.
        size: The number of bytes the field occupies.
        type_name: Name of the field or type being read, used in the error.

    Returns:
        The bytes read.

    Raises:
        UnderrunError: If fewer than `size` bytes remain.
    """
    if size < 0:
        raise ValueError(f"Cannot read a negative number of bytes ({size})")

    chunks: list[bytes] = []
    remaining = size
    while remaining:
        chunk = stream.read(min(remaining, READ_CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)

    data = b"".join(chunks)
    if remaining:
        raise UnderrunError(type_name, expected_bytes=size, actual_bytes=len(data))
    return data


def write_bytes(stream: IO[bytes], data: bytes) -> int:
    """Write raw bytes to `stream` and return the number of bytes written."""
    stream.write(data)
    return len(data)
