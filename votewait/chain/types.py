from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List


@dataclass
class StakeTransaction:
    txid: str
    vin: List[Dict[str, Any]] = field(default_factory=list)
    vout: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StakeTransaction":
        return cls(
            txid=data["txid"],
            vin=list(data.get("vin", [])),
            vout=list(data.get("vout", [])),
        )

    @property
    def first_output_value(self) -> Decimal:
        """Value of output 0 in DCR; for a ticket purchase this is its price."""
        if not self.vout:
            return Decimal(0)
        # Go through str() so 2.5 DCR stays 2.5 and not its binary float
        return Decimal(str(self.vout[0].get("value", 0)))


@dataclass
class Block:
    height: int
    hash: str
    timestamp: datetime
    stake_transactions: List[StakeTransaction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Block":
        """Build a block from the node's verbose `getblock` result."""
        return cls(
            height=data["height"],
            hash=data["hash"],
            timestamp=datetime.fromtimestamp(data["time"], tz=timezone.utc),
            stake_transactions=[
                StakeTransaction.from_dict(tx) for tx in data.get("rawstx") or []
            ],
        )
