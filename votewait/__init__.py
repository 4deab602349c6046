"""votewait - mean ticket vote wait calculator for Decred."""

__version__ = "1.0.1"

from .chain import ChainParams, get_chain_params
from .rpc import BlockSource, DcrdClient
from .scan import VoteWaitAccumulator, VoteWaitSummary, scan_chain

__all__ = [
    "BlockSource",
    "ChainParams",
    "DcrdClient",
    "VoteWaitAccumulator",
    "VoteWaitSummary",
    "get_chain_params",
    "scan_chain",
]
