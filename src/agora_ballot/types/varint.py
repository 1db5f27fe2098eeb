"""
Compact variable-length unsigned integer encoding.

WHAT ARE VARINTS?
-----------------
A varint (variable-length integer) encodes integers using fewer bytes for
smaller values. Ballot records carry several integers that are almost always
small (field lengths, replacement sequence numbers) next to one that is
always large (an expiry timestamp). A fixed 8-byte field would waste seven
bytes on every length prefix.


HOW THE COMPACT ENCODING WORKS
------------------------------
The first byte either holds the value itself or names the width of the
little-endian integer that follows:

    First byte     Followed by        Value range
    0x00 - 0xFC    nothing            0 - 252
    0xFD           2 bytes (uint16)   253 - 0xFFFF
    0xFE           4 bytes (uint32)   0x10000 - 0xFFFFFFFF
    0xFF           8 bytes (uint64)   0x100000000 - 0xFFFFFFFFFFFFFFFF

Size ranges::

    Value 0-252:          1 byte   [vv]
    Value 253-65535:      3 bytes  [FD][lo][hi]
    Value up to 2^32-1:   5 bytes  [FE][b0][b1][b2][b3]
    Value up to 2^64-1:   9 bytes  [FF][b0]...[b7]


ENCODING EXAMPLE: VALUE 300
---------------------------
300 does not fit below the 0xFD marker, but fits in 16 bits:

    Marker: 0xFD
    300 as little-endian uint16: 0x2C 0x01

Result: [0xFD, 0x2C, 0x01]


CANONICAL FORM
--------------
Every value has exactly one valid encoding: the shortest one. Decoders reject
a wider form than needed (e.g. [0xFD, 0x05, 0x00] for 5). Without this rule
two different byte strings would describe the same record, and anything that
hashes or compares raw payloads would treat them as distinct.


USAGE IN BALLOT RECORDS
-----------------------
1. Length prefixes: the record header, the proposal id and the ballot blob
   are each written as [varint length][bytes].
2. VoterCard.expires: a unix timestamp, 5 bytes on the wire today.
3. BallotData.sequence: the replacement counter, almost always 1 byte.

Maximum value: 2^64 - 1 (9 bytes).
"""

from __future__ import annotations

from typing import IO, Final

from .buffer import read_exact, write_bytes
from .exceptions import FormatError, UnderrunError
from .uint import BaseUint, Uint8, Uint16, Uint32, Uint64

MAX_SINGLE_BYTE: Final = 0xFC
"""Largest value stored directly in the first byte."""

MARKER_UINT16: Final = 0xFD
"""First byte announcing a 2-byte little-endian value."""

MARKER_UINT32: Final = 0xFE
"""First byte announcing a 4-byte little-endian value."""

MARKER_UINT64: Final = 0xFF
"""First byte announcing an 8-byte little-endian value."""

_MARKER_TYPES: Final[dict[int, type[BaseUint]]] = {
    MARKER_UINT16: Uint16,
    MARKER_UINT32: Uint32,
    MARKER_UINT64: Uint64,
}

_MARKER_MINIMUMS: Final[dict[int, int]] = {
    MARKER_UINT16: MAX_SINGLE_BYTE + 1,
    MARKER_UINT32: 2**16,
    MARKER_UINT64: 2**32,
}


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer in its shortest compact form.

    Args:
        value: Non-negative integer to encode. Maximum: 2^64 - 1.

    Returns:
        1, 3, 5 or 9 bytes depending on the magnitude of `value`.

    Raises:
        ValueError: If value is negative or does not fit in 64 bits.
    """
    if value < 0:
        raise ValueError("Varint must be non-negative")
    if value >= 2**64:
        raise ValueError(f"Varint {value} does not fit in 64 bits")

    if value <= MAX_SINGLE_BYTE:
        return Uint8(value).encode_bytes()
    if value <= 0xFFFF:
        return bytes([MARKER_UINT16]) + Uint16(value).encode_bytes()
    if value <= 0xFFFFFFFF:
        return bytes([MARKER_UINT32]) + Uint32(value).encode_bytes()
    return bytes([MARKER_UINT64]) + Uint64(value).encode_bytes()


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a varint from bytes at the given offset.

    Args:
        data: Input bytes containing the varint.
        offset: Starting position in data. Defaults to 0.

    Returns:
        Tuple of (decoded_value, bytes_consumed).

    Raises:
        UnderrunError: If the input ends before the varint is complete.
        FormatError: If the value is not in its shortest form.
    """
    if offset >= len(data):
        raise UnderrunError("varint", expected_bytes=1, actual_bytes=0)

    marker = data[offset]
    if marker <= MAX_SINGLE_BYTE:
        return marker, 1

    # The marker names the width of the little-endian value that follows.
    uint_type = _MARKER_TYPES[marker]
    width = uint_type.byte_length()
    payload = data[offset + 1 : offset + 1 + width]
    if len(payload) != width:
        raise UnderrunError("varint", expected_bytes=width, actual_bytes=len(payload))

    value = int(uint_type.decode_bytes(payload))
    if value < _MARKER_MINIMUMS[marker]:
        raise FormatError("varint", f"non-canonical encoding of {value}", offset=offset)
    return value, 1 + width


def write_varint(stream: IO[bytes], value: int) -> int:
    """
    Write `value` to `stream` in compact form.

    Returns:
        Number of bytes written.
    """
    return write_bytes(stream, encode_varint(value))


def read_varint(stream: IO[bytes]) -> int:
    """
    Read one compact varint from `stream`.

    Consumes only the bytes belonging to the varint, so the stream is left
    positioned at the next field.

    Raises:
        UnderrunError: If the stream ends before the varint is complete.
        FormatError: If the value is not in its shortest form.
    """
    marker = read_exact(stream, 1, "varint")
    if marker[0] <= MAX_SINGLE_BYTE:
        return marker[0]

    width = _MARKER_TYPES[marker[0]].byte_length()
    value, _ = decode_varint(marker + read_exact(stream, width, "varint"))
    return value
