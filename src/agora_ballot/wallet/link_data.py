"""Data handed to the BOA wallet when linking it to a vote."""

from agora_ballot.types import StrictBaseModel


class LinkDataWithVoteData(StrictBaseModel):
    """Link data carrying a serialized ballot."""

    payload: str
    """Base64 encoding of the serialized `BallotData`."""
