from votewait.scan.accumulator import VoteWaitAccumulator
from votewait.scan.models import TicketData, VoteWait, VoteWaitSummary
from votewait.scan.scanner import scan_chain

__all__ = [
    "TicketData",
    "VoteWait",
    "VoteWaitAccumulator",
    "VoteWaitSummary",
    "scan_chain",
]
