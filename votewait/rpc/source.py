from typing import Protocol

from votewait.chain.types import Block


class BlockSource(Protocol):
    """Minimal read interface the scan needs from a node."""

    def get_best_block_height(self) -> int:
        ...

    def get_block_hash(self, height: int) -> str:
        ...

    def get_block(self, block_hash: str) -> Block:
        ...
