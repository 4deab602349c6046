"""Decred network parameters needed by the vote wait scan."""

from dataclasses import dataclass
from typing import Dict

from votewait.shared.exceptions import ConfigurationException


@dataclass(frozen=True)
class ChainParams:
    name: str
    ticket_maturity: int  # Confirmations before a ticket may vote
    default_rpc_port: int


MAINNET = ChainParams(name="mainnet", ticket_maturity=256, default_rpc_port=9109)
TESTNET3 = ChainParams(name="testnet3", ticket_maturity=16, default_rpc_port=19109)
SIMNET = ChainParams(name="simnet", ticket_maturity=16, default_rpc_port=19556)
REGNET = ChainParams(name="regnet", ticket_maturity=16, default_rpc_port=18656)

NETWORKS: Dict[str, ChainParams] = {
    p.name: p for p in (MAINNET, TESTNET3, SIMNET, REGNET)
}

_ALIASES = {"testnet": "testnet3"}


def get_chain_params(name: str) -> ChainParams:
    """Look up network parameters by name (case-insensitive)."""
    key = (name or "").strip().lower()
    key = _ALIASES.get(key, key)
    if key not in NETWORKS:
        raise ConfigurationException(
            f"Invalid network: {name}. Must be one of {sorted(NETWORKS)}"
        )
    return NETWORKS[key]
