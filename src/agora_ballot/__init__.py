"""Canonical encoding, hashing and signature checks for Agora voting records."""

from .crypto import Hash, KeyPair, PublicKey, Signature, hash_full
from .types import CodecError, FormatError, UnderrunError
from .vote import BallotData, Vote, VoterCard
from .wallet import LinkDataWithVoteData

__all__ = [
    "BallotData",
    "CodecError",
    "FormatError",
    "Hash",
    "KeyPair",
    "LinkDataWithVoteData",
    "PublicKey",
    "Signature",
    "UnderrunError",
    "Vote",
    "VoterCard",
    "hash_full",
]
