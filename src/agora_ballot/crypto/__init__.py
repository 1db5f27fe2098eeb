"""Hash and signature primitives used by the ballot records."""

from .hash import Hash, HashInput, hash_full
from .keys import KeyPair, PublicKey, Signature

__all__ = [
    "Hash",
    "HashInput",
    "hash_full",
    "KeyPair",
    "PublicKey",
    "Signature",
]
