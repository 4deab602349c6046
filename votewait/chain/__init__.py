from votewait.chain.params import ChainParams, get_chain_params
from votewait.chain.stake import TxType, determine_tx_type, ticket_hash_for_vote
from votewait.chain.types import Block, StakeTransaction

__all__ = [
    "Block",
    "ChainParams",
    "StakeTransaction",
    "TxType",
    "determine_tx_type",
    "get_chain_params",
    "ticket_hash_for_vote",
]
