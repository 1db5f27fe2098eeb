"""Voting records stored in transaction payloads."""

from .ballot import HEADER, WIDTH, BallotData, Vote
from .record import SignedRecord
from .voter_card import VoterCard

__all__ = [
    "HEADER",
    "WIDTH",
    "BallotData",
    "SignedRecord",
    "Vote",
    "VoterCard",
]
