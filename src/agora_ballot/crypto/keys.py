"""
Ed25519 keys and signatures for ballot records.

Validators and one-time voting keys are 32-byte Ed25519 public keys.
Signatures are the 64-byte Ed25519 signatures over a record's content hash.
"""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from agora_ballot.types import Bytes32, Bytes64

__all__ = [
    "KeyPair",
    "PublicKey",
    "Signature",
]


class Signature(Bytes64):
    """A 64-byte Ed25519 signature."""


class PublicKey(Bytes32):
    """A 32-byte Ed25519 public key."""

    def verify(self, signature: Signature, message: bytes) -> bool:
        """
        Verify an Ed25519 signature made with this key's private half.

        Args:
            signature: The 64-byte signature.
            message: The exact bytes that were signed.

        Returns:
            True if the signature is valid, False otherwise. Key bytes that
            do not decode to a curve point also yield False.
        """
        if signature.is_zero():
            return False

        try:
            public_key = Ed25519PublicKey.from_public_bytes(bytes(self))
            public_key.verify(bytes(signature), message)
            return True
        except (InvalidSignature, ValueError):
            return False


@dataclass(frozen=True, slots=True)
class KeyPair:
    """
    Ed25519 keypair used to sign records.

    Attributes:
        private_key: The Ed25519 private key.
    """

    private_key: Ed25519PrivateKey

    @classmethod
    def from_seed(cls, seed: bytes) -> KeyPair:
        """
        Load a keypair from its 32-byte private seed.

        Args:
            seed: 32-byte Ed25519 private seed.

        Returns:
            The keypair.

        Raises:
            ValueError: If seed is not 32 bytes.
        """
        if len(seed) != 32:
            raise ValueError(f"Expected 32 bytes, got {len(seed)}")
        return cls(private_key=Ed25519PrivateKey.from_private_bytes(seed))

    @property
    def address(self) -> PublicKey:
        """The 32-byte public key."""
        raw = self.private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return PublicKey(raw)

    def sign(self, message: bytes) -> Signature:
        """
        Sign a message.

        Args:
            message: Data to sign. Records pass their content hash.

        Returns:
            The 64-byte signature.
        """
        return Signature(self.private_key.sign(message))
