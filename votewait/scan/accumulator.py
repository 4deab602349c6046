"""
Ticket maturity / vote wait accounting.

Blocks are fed in increasing height order starting at height 1. Ticket
purchases are remembered until the vote that spends them shows up, at which
point the wait between the ticket's maturity and the vote is measured in
blocks and in wall-clock time between the two block timestamps.

Maturity follows dcrd's rule: a ticket mined at height H with a maturity
of M confirmations can first vote at H + M + 1. The wait counts the
maturity block itself, so a vote in the maturity block waited 1 block.
"""

from datetime import datetime
from typing import Dict, List

from votewait.chain.stake import TxType, determine_tx_type, ticket_hash_for_vote
from votewait.chain.types import Block, StakeTransaction
from votewait.scan.models import TicketData, VoteWait, VoteWaitSummary
from votewait.shared.exceptions import (
    DataConsistencyException,
    NoVotesException,
    TicketNotFoundException,
)
from votewait.shared.logging import get_logger

logger = get_logger(__name__)


class VoteWaitAccumulator:
    def __init__(self, ticket_maturity: int, start_height: int = 1):
        if ticket_maturity < 0:
            raise ValueError("ticket_maturity must be non-negative")
        self.ticket_maturity = ticket_maturity
        self.tickets: Dict[str, TicketData] = {}
        self.block_times: Dict[int, datetime] = {}
        self.total_votes = 0
        self.total_wait_blocks = 0
        self.total_wait_seconds = 0.0
        self._next_height = start_height

    @property
    def pending_tickets(self) -> int:
        return len(self.tickets)

    @property
    def last_height(self) -> int:
        return self._next_height - 1

    def maturity_height(self, mined_height: int) -> int:
        return mined_height + self.ticket_maturity + 1

    def process_block(self, block: Block) -> List[VoteWait]:
        """
        Account for one block and return the votes it contained.

        Raises:
            DataConsistencyException: block out of order, or a vote before
                its ticket matured
            TicketNotFoundException: a vote spends an unknown ticket
        """
        if block.height != self._next_height:
            raise DataConsistencyException(
                f"Block {block.hash} at height {block.height} is out of "
                f"order; expected height {self._next_height}"
            )

        self.block_times[block.height] = block.timestamp

        votes: List[VoteWait] = []
        for stx in block.stake_transactions:
            tx_type = determine_tx_type(stx)
            if tx_type is TxType.PURCHASE:
                self._record_purchase(block, stx)
            elif tx_type is TxType.VOTE:
                votes.append(self._record_vote(block, stx))

        self._next_height += 1
        return votes

    def _record_purchase(self, block: Block, stx: StakeTransaction) -> None:
        self.tickets[stx.txid] = TicketData(
            mined_height=block.height,
            price=stx.first_output_value,
        )

    def _record_vote(self, block: Block, stx: StakeTransaction) -> VoteWait:
        ticket_hash = ticket_hash_for_vote(stx)
        ticket = self.tickets.get(ticket_hash)
        if ticket is None:
            raise TicketNotFoundException(ticket_hash, block.height)

        maturity_height = self.maturity_height(ticket.mined_height)
        maturity_time = self.block_times.get(maturity_height)
        if maturity_time is None:
            raise DataConsistencyException(
                f"Ticket {ticket_hash} voted in block {block.height} before "
                f"maturing at height {maturity_height}"
            )

        wait_blocks = (block.height - maturity_height) + 1
        wait_seconds = (block.timestamp - maturity_time).total_seconds()

        self.total_votes += 1
        self.total_wait_blocks += wait_blocks
        self.total_wait_seconds += wait_seconds

        del self.tickets[ticket_hash]

        return VoteWait(
            ticket_hash=ticket_hash,
            price=ticket.price,
            mined_height=ticket.mined_height,
            vote_height=block.height,
            maturity_height=maturity_height,
            wait_blocks=wait_blocks,
            wait_seconds=wait_seconds,
        )

    def summary(self) -> VoteWaitSummary:
        """
        Return the totals of everything processed so far.

        Raises:
            NoVotesException: no vote was seen, so the mean is undefined
        """
        if self.total_votes == 0:
            raise NoVotesException(self.last_height)

        logger.debug(
            f"{self.total_votes} votes through height {self.last_height}, "
            f"{self.pending_tickets} tickets still pending"
        )
        return VoteWaitSummary(
            total_votes=self.total_votes,
            total_wait_blocks=self.total_wait_blocks,
            total_wait_seconds=self.total_wait_seconds,
            best_height=self.last_height,
            pending_tickets=self.pending_tickets,
        )
