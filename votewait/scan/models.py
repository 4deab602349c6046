"""
Records produced by the vote wait accounting.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

SECONDS_PER_DAY = 86400.0


@dataclass
class TicketData:
    """A purchased ticket that has not voted yet."""

    mined_height: int
    price: Decimal  # DCR


@dataclass
class VoteWait:
    """
    Wait statistics for a single vote.

    Attributes:
        ticket_hash: Hash of the ticket purchase the vote spends
        price: Price paid for the ticket in DCR
        mined_height: Height the ticket purchase was mined at
        vote_height: Height the vote was mined at
        maturity_height: First height the ticket could vote at
        wait_blocks: Blocks from maturity to the vote, counting both ends
        wait_seconds: Time from the maturity block to the vote block
    """

    ticket_hash: str
    price: Decimal
    mined_height: int
    vote_height: int
    maturity_height: int
    wait_blocks: int
    wait_seconds: float

    @property
    def wait_days(self) -> float:
        return (self.wait_seconds / 3600.0) / 24.0


@dataclass
class VoteWaitSummary:
    """Running totals of a scan and the means derived from them."""

    total_votes: int
    total_wait_blocks: int
    total_wait_seconds: float
    best_height: int
    pending_tickets: int = 0

    @property
    def mean_wait_blocks(self) -> float:
        return self.total_wait_blocks / self.total_votes

    @property
    def mean_wait_seconds(self) -> float:
        return self.total_wait_seconds / self.total_votes

    @property
    def mean_wait_days(self) -> float:
        return self.mean_wait_seconds / SECONDS_PER_DAY

    def to_dict(self) -> Dict[str, Any]:
        """Convert summary to dictionary for JSON serialization."""
        return {
            "best_height": self.best_height,
            "total_votes": self.total_votes,
            "total_wait_blocks": self.total_wait_blocks,
            "total_wait_seconds": self.total_wait_seconds,
            "mean_wait_blocks": self.mean_wait_blocks,
            "mean_wait_days": self.mean_wait_days,
            "pending_tickets": self.pending_tickets,
        }
