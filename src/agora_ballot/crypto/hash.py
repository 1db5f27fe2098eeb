"""
Content hashing for ballot records.

A record's hash is BLAKE2b-512 over its "hash input stream": the exact,
order-sensitive byte sequence produced by `compute_hash_input`. That stream
is not the wire serialization; integers are fixed-width and variable-width
fields carry no length prefix.
"""

from __future__ import annotations

import hashlib
import io
from typing import IO, Protocol, runtime_checkable

from agora_ballot.types import Bytes64

__all__ = [
    "Hash",
    "HashInput",
    "hash_full",
]


class Hash(Bytes64):
    """A 64-byte BLAKE2b digest."""


@runtime_checkable
class HashInput(Protocol):
    """Anything that can feed its canonical hash input into a stream."""

    def compute_hash_input(self, stream: IO[bytes]) -> None:
        """Append this object's hash input bytes to `stream`."""
        ...


def _digest(data: bytes) -> Hash:
    return Hash(hashlib.blake2b(data, digest_size=Hash.LENGTH).digest())


def hash_full(obj: HashInput | bytes) -> Hash:
    """
    Compute the hash of an object.

    Args:
        obj: Either raw bytes, hashed as is, or an object implementing
            `compute_hash_input`.

    Returns:
        The 64-byte digest.
    """
    if isinstance(obj, (bytes, bytearray)):
        return _digest(bytes(obj))

    with io.BytesIO() as stream:
        obj.compute_hash_input(stream)
        return _digest(stream.getvalue())

