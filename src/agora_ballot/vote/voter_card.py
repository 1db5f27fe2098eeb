"""
Voter card: a validator's delegation to a one-time voting key.

The card is delivered from the Agora admin screen. It proves that the holder
of `address` may exercise `validator_address`'s voting authority until
`expires`.

Wire format::

    [32B validator_address][32B address][varint expires][64B signature]

Hash input::

    [32B validator_address][32B address][8B expires, little-endian]
"""

from __future__ import annotations

from typing import IO

from pydantic import Field
from typing_extensions import Self

from agora_ballot.crypto import PublicKey, Signature
from agora_ballot.types import Uint64, read_varint, write_varint

from .record import SignedRecord


class VoterCard(SignedRecord):
    """Data proving that a voter may exercise a validator's authority over a vote."""

    validator_address: PublicKey
    """Validator that this voter card represents."""

    address: PublicKey
    """Public key of the temporary voting key."""

    expires: Uint64
    """Unix epoch time after which the card is no longer valid."""

    signature: Signature = Field(default_factory=Signature.zero)
    """Signature made with `validator_address`'s private key."""

    @property
    def signing_key(self) -> PublicKey:
        """Cards are signed by the validator they represent."""
        return self.validator_address

    def is_expired(self, now: int) -> bool:
        """
        Check whether the card has expired at unix time `now`.

        Expiry is caller policy and is not part of `verify()`.
        """
        return int(self.expires) < now

    def compute_hash_input(self, stream: IO[bytes]) -> None:
        """Collect the validator key, the voting key and the fixed-width expiry."""
        self.validator_address.serialize(stream)
        self.address.serialize(stream)
        stream.write(self.expires.encode_bytes())

    def serialize(self, stream: IO[bytes]) -> int:
        """Write the card in wire form."""
        written = self.validator_address.serialize(stream)
        written += self.address.serialize(stream)
        written += write_varint(stream, self.expires)
        written += self.signature.serialize(stream)
        return written

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Read a card in wire form.

        Raises:
            UnderrunError: If fewer bytes remain than a field requires.
        """
        validator_address = PublicKey.deserialize(stream)
        address = PublicKey.deserialize(stream)
        expires = Uint64(read_varint(stream))
        signature = Signature.deserialize(stream)
        return cls(
            validator_address=validator_address,
            address=address,
            expires=expires,
            signature=signature,
        )
