"""Wallet-linking payloads."""

from .link_data import LinkDataWithVoteData

__all__ = ["LinkDataWithVoteData"]
