"""
Ballot data: a single cast vote as stored in a transaction payload.

The ballot is signed with the temporary voting key named by the embedded
voter card, not with the validator key. Whether the card itself is valid
(signed by its validator, not expired) is a separate check left to the
caller.

Wire format::

    [varint len]["BALLOT  "]
    [varint len][UTF-8 proposal_id]
    [varint len][ballot]
    [VoterCard]
    [varint sequence]
    [64B signature]

Hash input::

    [UTF-8 proposal_id][ballot][VoterCard hash input][4B sequence, little-endian]
"""

from __future__ import annotations

import base64
import binascii
import logging
from enum import IntEnum
from typing import IO, ClassVar, Final

from pydantic import Field
from typing_extensions import Self

from agora_ballot.crypto import PublicKey, Signature
from agora_ballot.types import FormatError, Uint32, read_exact, read_varint, write_varint
from agora_ballot.wallet import LinkDataWithVoteData

from .record import SignedRecord
from .voter_card import VoterCard

logger = logging.getLogger(__name__)

HEADER: Final[str] = "BALLOT  "
"""Tag written in front of every serialized ballot."""

WIDTH: Final[int] = 266
"""
Typical serialized size in bytes.

Documentary only: the real size depends on the proposal id and ballot
lengths, and is never checked.
"""


class Vote(IntEnum):
    """Vote values carried inside the encrypted ballot by convention."""

    YES = 0
    NO = 1
    BLANK = 2


class BallotData(SignedRecord):
    """Voting data stored in transaction payloads."""

    HEADER: ClassVar[str] = HEADER
    WIDTH: ClassVar[int] = WIDTH

    YES: ClassVar[int] = Vote.YES
    NO: ClassVar[int] = Vote.NO
    BLANK: ClassVar[int] = Vote.BLANK

    proposal_id: str
    """The id of the proposal."""

    ballot: bytes
    """Encrypted voting information."""

    card: VoterCard
    """The voter card authorizing this vote."""

    sequence: Uint32
    """A sequence number, starting from 0, if replacement is allowed."""

    signature: Signature = Field(default_factory=Signature.zero)
    """Signature made with the temporary key, `card.address`."""

    @property
    def signing_key(self) -> PublicKey:
        """Ballots are signed by the card's temporary voting key."""
        return self.card.address

    def compute_hash_input(self, stream: IO[bytes]) -> None:
        """
        Collect the proposal id, the ballot, the card and the sequence.

        Nothing here is length-prefixed, unlike the wire form.
        """
        stream.write(self.proposal_id.encode("utf-8"))
        stream.write(self.ballot)
        self.card.compute_hash_input(stream)
        stream.write(self.sequence.encode_bytes())

    def serialize(self, stream: IO[bytes]) -> int:
        """Write the ballot in wire form."""
        written = 0
        for block in (HEADER.encode("ascii"), self.proposal_id.encode("utf-8"), self.ballot):
            written += write_varint(stream, len(block))
            stream.write(block)
            written += len(block)
        written += self.card.serialize(stream)
        written += write_varint(stream, self.sequence)
        written += self.signature.serialize(stream)
        return written

    @classmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Read a ballot in wire form.

        Raises:
            FormatError: If the header is not `HEADER`, the proposal id is
                not UTF-8, or the sequence does not fit in 32 bits.
            UnderrunError: If the stream ends before a field is complete.
        """
        header = read_exact(stream, read_varint(stream), "BallotData.header")
        if header != HEADER.encode("ascii"):
            logger.debug("Rejected record with header %r", header[:16])
            raise FormatError(cls.__name__, "unexpected record type")

        raw_proposal_id = read_exact(stream, read_varint(stream), "BallotData.proposal_id")
        try:
            proposal_id = raw_proposal_id.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(cls.__name__, f"proposal id is not UTF-8: {e.reason}") from e

        ballot = read_exact(stream, read_varint(stream), "BallotData.ballot")
        card = VoterCard.deserialize(stream)

        sequence = read_varint(stream)
        if sequence >= 2**Uint32.BITS:
            raise FormatError(cls.__name__, f"sequence {sequence} does not fit in 32 bits")

        signature = Signature.deserialize(stream)
        return cls(
            proposal_id=proposal_id,
            ballot=ballot,
            card=card,
            sequence=Uint32(sequence),
            signature=signature,
        )

    def get_link_data(self) -> LinkDataWithVoteData:
        """Return the data to be linked to the BOA wallet."""
        return LinkDataWithVoteData(payload=base64.b64encode(self.encode_bytes()).decode("ascii"))

    @classmethod
    def from_link_data(cls, link_data: LinkDataWithVoteData) -> Self:
        """
        Rebuild a ballot from wallet link data.

        Raises:
            FormatError: If the payload is not valid base64 or not a ballot.
            UnderrunError: If the payload is truncated.
        """
        try:
            raw = base64.b64decode(link_data.payload, validate=True)
        except binascii.Error as e:
            raise FormatError(cls.__name__, f"payload is not base64: {e}") from e
        return cls.decode_bytes(raw)
