"""
Shared pytest fixtures for all agora_ballot tests.

Keys are derived from fixed seeds so that every run signs the same bytes.
"""

from __future__ import annotations

import pytest

from agora_ballot.crypto import KeyPair
from agora_ballot.types import Uint32, Uint64
from agora_ballot.vote import BallotData, VoterCard

EXPIRES = Uint64(1_700_000_000)
"""A card expiry in November 2023."""


@pytest.fixture
def validator_keys() -> KeyPair:
    """Keypair of the validator issuing voter cards."""
    return KeyPair.from_seed(bytes(range(32)))


@pytest.fixture
def voting_keys() -> KeyPair:
    """One-time voting keypair delegated by the card."""
    return KeyPair.from_seed(bytes(range(32, 64)))


@pytest.fixture
def voter_card(validator_keys: KeyPair, voting_keys: KeyPair) -> VoterCard:
    """A voter card signed by its validator."""
    card = VoterCard(
        validator_address=validator_keys.address,
        address=voting_keys.address,
        expires=EXPIRES,
    )
    return card.sign(validator_keys)


@pytest.fixture
def ballot_data(voter_card: VoterCard, voting_keys: KeyPair) -> BallotData:
    """A ballot signed by the card's voting key."""
    ballot = BallotData(
        proposal_id="469008972006",
        ballot=bytes.fromhex("ba" * 16),
        card=voter_card,
        sequence=Uint32(0),
    )
    return ballot.sign(voting_keys)
