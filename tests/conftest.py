"""
Pytest configuration and shared fixtures.

Provides a synthetic in-memory chain so the accounting and scan logic can
be exercised without a running dcrd node.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

from votewait.chain.types import Block, StakeTransaction

GENESIS_TIME = datetime(2016, 2, 8, 18, 0, tzinfo=timezone.utc)
BLOCK_SPACING = timedelta(minutes=5)


def block_hash(height: int) -> str:
    return f"{height:064x}"


def block_time(height: int) -> datetime:
    return GENESIS_TIME + BLOCK_SPACING * height


def purchase_tx(txid: str, price: float = 142.5) -> StakeTransaction:
    """Ticket purchase (SStx) as dcrd reports it in verbose getblock."""
    return StakeTransaction.from_dict(
        {
            "txid": txid,
            "vin": [{"txid": "ff" * 32, "vout": 0, "tree": 0}],
            "vout": [
                {
                    "value": price,
                    "n": 0,
                    "scriptPubKey": {"type": "stakesubmission"},
                },
                {"value": 0, "n": 1, "scriptPubKey": {"type": "sstxcommitment"}},
                {"value": 0, "n": 2, "scriptPubKey": {"type": "sstxchange"}},
            ],
        }
    )


def vote_tx(txid: str, ticket_hash: str) -> StakeTransaction:
    """Vote (SSGen) spending `ticket_hash`."""
    return StakeTransaction.from_dict(
        {
            "txid": txid,
            "vin": [
                {"stakebase": "0000", "amountin": 1.2},
                {"txid": ticket_hash, "vout": 0, "tree": 1},
            ],
            "vout": [
                {"value": 0, "n": 0, "scriptPubKey": {"type": "nulldata"}},
                {"value": 0, "n": 1, "scriptPubKey": {"type": "nulldata"}},
                {"value": 143.7, "n": 2, "scriptPubKey": {"type": "stakegen"}},
            ],
        }
    )


def revocation_tx(txid: str, ticket_hash: str) -> StakeTransaction:
    """Revocation (SSRtx) of a missed or expired ticket."""
    return StakeTransaction.from_dict(
        {
            "txid": txid,
            "vin": [{"txid": ticket_hash, "vout": 0, "tree": 1}],
            "vout": [
                {"value": 142.5, "n": 0, "scriptPubKey": {"type": "stakerevoke"}}
            ],
        }
    )


def make_block(
    height: int, stake_transactions: Optional[List[StakeTransaction]] = None
) -> Block:
    return Block(
        height=height,
        hash=block_hash(height),
        timestamp=block_time(height),
        stake_transactions=list(stake_transactions or []),
    )


def build_blocks(
    length: int, stake_txs: Optional[Dict[int, List[StakeTransaction]]] = None
) -> List[Block]:
    stake_txs = stake_txs or {}
    return [make_block(h, stake_txs.get(h)) for h in range(1, length + 1)]


class InMemoryBlockSource:
    """BlockSource over a prebuilt list of blocks."""

    def __init__(self, blocks: List[Block]):
        self.blocks_by_height = {b.height: b for b in blocks}
        self.blocks_by_hash = {b.hash: b for b in blocks}
        self.requested_heights: List[int] = []

    def get_best_block_height(self) -> int:
        return max(self.blocks_by_height, default=0)

    def get_block_hash(self, height: int) -> str:
        self.requested_heights.append(height)
        return self.blocks_by_height[height].hash

    def get_block(self, block_hash: str) -> Block:
        return self.blocks_by_hash[block_hash]


@pytest.fixture
def ticket_hash() -> str:
    """Sample ticket purchase hash."""
    return "a1b2c3d4" + "00" * 28


@pytest.fixture
def chain_source():
    """Factory building an in-memory block source for a synthetic chain."""

    def _build(
        length: int, stake_txs: Optional[Dict[int, List[StakeTransaction]]] = None
    ) -> InMemoryBlockSource:
        return InMemoryBlockSource(build_blocks(length, stake_txs))

    return _build


@pytest.fixture
def block_factory():
    return make_block


@pytest.fixture
def purchase_factory():
    return purchase_tx


@pytest.fixture
def vote_factory():
    return vote_tx


@pytest.fixture
def revocation_factory():
    return revocation_tx


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's VW_* settings out of the tests."""
    for name in (
        "VW_RPC_SERVER",
        "VW_RPC_USER",
        "VW_RPC_PASS",
        "VW_RPC_CERT",
        "VW_NETWORK",
    ):
        monkeypatch.delenv(name, raising=False)
