"""Reusable type definitions for the ballot record codecs."""

from .base import CamelModel, StrictBaseModel
from .buffer import read_exact, write_bytes
from .byte_arrays import BaseBytes, Bytes32, Bytes64
from .exceptions import CodecError, FormatError, UnderrunError
from .uint import BaseUint, Uint8, Uint16, Uint32, Uint64
from .varint import decode_varint, encode_varint, read_varint, write_varint

__all__ = [
    # Core types
    "BaseUint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "BaseBytes",
    "Bytes32",
    "Bytes64",
    "CamelModel",
    "StrictBaseModel",
    # Stream helpers
    "read_exact",
    "write_bytes",
    "encode_varint",
    "decode_varint",
    "write_varint",
    "read_varint",
    # Exceptions
    "CodecError",
    "FormatError",
    "UnderrunError",
]
