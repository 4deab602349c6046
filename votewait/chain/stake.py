"""
Stake transaction classification.

Works on the verbose transaction JSON returned by dcrd. Only the two
types the vote wait accounting cares about are told apart; revocations,
treasury transactions and anything unrecognised fall into OTHER.
"""

from enum import Enum

from votewait.chain.types import StakeTransaction
from votewait.shared.exceptions import DataConsistencyException

# Script type of the first output of a ticket purchase (SStx)
TICKET_SUBMISSION_SCRIPT = "stakesubmission"

# Input field dcrd sets on the first input of a vote (SSGen)
STAKEBASE_FIELD = "stakebase"


class TxType(Enum):
    PURCHASE = "purchase"
    VOTE = "vote"
    OTHER = "other"


def determine_tx_type(tx: StakeTransaction) -> TxType:
    """Classify a stake transaction as a ticket purchase, a vote or other."""
    if tx.vin and STAKEBASE_FIELD in tx.vin[0]:
        return TxType.VOTE

    if tx.vout:
        script = tx.vout[0].get("scriptPubKey") or {}
        if script.get("type") == TICKET_SUBMISSION_SCRIPT:
            return TxType.PURCHASE

    return TxType.OTHER


def ticket_hash_for_vote(tx: StakeTransaction) -> str:
    """
    Return the hash of the ticket a vote spends.

    Input 0 of a vote is the stakebase; input 1 spends the ticket, so its
    previous outpoint hash identifies the ticket purchase.
    """
    if len(tx.vin) < 2 or "txid" not in tx.vin[1]:
        raise DataConsistencyException(
            f"Vote {tx.txid} has no ticket input"
        )
    return tx.vin[1]["txid"]
