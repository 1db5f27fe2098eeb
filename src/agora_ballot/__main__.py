"""
Ballot payload inspection CLI.

Decode a ballot payload taken from a transaction or a wallet link, print its
fields and report whether its signatures hold.

Usage::

    python -m agora_ballot <base64 payload>
    python -m agora_ballot --hex <hex payload>
    python -m agora_ballot --now 1700000000 <base64 payload>

Exit status:
    0  Ballot and voter card signatures are both valid
    1  At least one signature is invalid
    2  The payload could not be decoded
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import Any

from agora_ballot.config import AGORA_LOG_LEVEL
from agora_ballot.types import CodecError, FormatError
from agora_ballot.vote import BallotData
from agora_ballot.wallet import LinkDataWithVoteData

logger = logging.getLogger(__name__)


def decode_payload(payload: str, *, is_hex: bool = False) -> BallotData:
    """
    Decode a ballot from its textual payload.

    Args:
        payload: Base64 (as found in wallet link data) or hex encoded ballot.
        is_hex: Treat `payload` as hex rather than base64.

    Raises:
        FormatError: If the text is not valid base64/hex or not a ballot.
        UnderrunError: If the payload is truncated.
    """
    if not is_hex:
        return BallotData.from_link_data(LinkDataWithVoteData(payload=payload))

    try:
        raw = bytes.fromhex(payload.removeprefix("0x"))
    except ValueError as e:
        raise FormatError(BallotData.__name__, f"payload is not hex: {e}") from e
    return BallotData.decode_bytes(raw)


def inspect_ballot(ballot: BallotData, now: int) -> dict[str, Any]:
    """
    Summarize a decoded ballot.

    Both signatures are checked independently: a valid ballot signature says
    nothing about whether the card was issued by its validator.
    """
    report = ballot.model_dump(mode="json", by_alias=True)
    report["hash"] = ballot.hash().hex()
    report["ballotValid"] = ballot.verify()
    report["cardValid"] = ballot.card.verify()
    report["cardExpired"] = ballot.card.is_expired(now)
    return report


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="agora_ballot",
        description="Decode and verify an Agora ballot payload.",
    )
    parser.add_argument("payload", help="Serialized ballot, base64 encoded unless --hex is set")
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Payload is hex encoded",
    )
    parser.add_argument(
        "--now",
        type=int,
        default=None,
        help="Unix time used for the expiry check (default: current time)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=AGORA_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ballot = decode_payload(args.payload, is_hex=args.hex)
    except CodecError as e:
        logger.error("Could not decode ballot: %s", e)
        return 2

    now = int(time.time()) if args.now is None else args.now
    report = inspect_ballot(ballot, now)
    print(json.dumps(report, indent=2))

    if not (report["ballotValid"] and report["cardValid"]):
        logger.warning("Ballot for proposal %s failed verification", ballot.proposal_id)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
