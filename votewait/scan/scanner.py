"""
Chain scan driver.

Walks every block from height 1 to the node's best height, feeding the
accumulator and printing either per-vote details (verbose) or a progress
indicator. Any error aborts the scan; there is no partial result.
"""

from typing import Optional

from rich.console import Console

from votewait.chain.params import ChainParams
from votewait.rpc.source import BlockSource
from votewait.scan.accumulator import VoteWaitAccumulator
from votewait.scan.models import VoteWait, VoteWaitSummary
from votewait.shared.logging import get_logger
from votewait.utils.formatters import (
    console as default_console,
    format_amount,
    format_days,
    format_hash,
    progress_marker,
)

logger = get_logger(__name__)


def format_vote(vote: VoteWait) -> str:
    return (
        f"Ticket {format_hash(vote.ticket_hash)} ({format_amount(vote.price)}) "
        f"mined in block {vote.mined_height}, voted {vote.wait_blocks} "
        f"blocks ({format_days(vote.wait_days)}) after maturity"
    )


def format_summary(summary: VoteWaitSummary) -> str:
    return (
        f"Mean wait for {summary.total_votes} votes: "
        f"{summary.mean_wait_blocks:.1f} blocks, "
        f"{format_days(summary.mean_wait_days)}"
    )


def scan_chain(
    source: BlockSource,
    params: ChainParams,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> VoteWaitSummary:
    """
    Scan the whole chain and return the vote wait totals.

    Args:
        source: Where blocks come from (a DcrdClient in production)
        params: Network parameters supplying the ticket maturity
        verbose: Print a line for every vote instead of progress markers
        console: Output console (defaults to the shared one)

    Raises:
        RPCException: the node failed to supply a block
        TicketNotFoundException: a vote spends an unknown ticket
        NoVotesException: no votes were found in the whole chain
    """
    out = console or default_console

    best_height = source.get_best_block_height()
    out.print(
        f"Calculating average vote time through block height {best_height}..."
    )
    if not verbose:
        out.print("Height", end="")

    accumulator = VoteWaitAccumulator(params.ticket_maturity)
    for height in range(1, best_height + 1):
        if not verbose:
            marker = progress_marker(height)
            if marker:
                out.print(marker, end="", markup=False, soft_wrap=True)

        block_hash = source.get_block_hash(height)
        block = source.get_block(block_hash)
        votes = accumulator.process_block(block)

        if verbose:
            for vote in votes:
                out.print(format_vote(vote), markup=False, soft_wrap=True)

    if not verbose:
        out.print("..done")

    logger.info(
        f"Scanned {best_height} blocks on {params.name}, "
        f"{accumulator.pending_tickets} tickets unspent"
    )
    return accumulator.summary()
