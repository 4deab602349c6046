"""
RPC connection configuration.

Values come from command line flags first, then from the environment
(optionally populated from a .env file), then from dcrd's defaults.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from votewait.chain.params import MAINNET, ChainParams
from votewait.shared.exceptions import ConfigurationException

load_dotenv()

DEFAULT_TIMEOUT = float(os.getenv("VW_RPC_TIMEOUT", "30"))


def dcrd_app_data_dir() -> Path:
    """Return dcrd's default data directory for the current OS."""
    home = Path.home()
    if sys.platform.startswith("win"):
        local = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA")
        base = Path(local) if local else home
        return base / "Dcrd"
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "Dcrd"
    return home / ".dcrd"


def default_cert_path() -> Path:
    return dcrd_app_data_dir() / "rpc.cert"


@dataclass
class RPCConfig:
    server: str
    user: str
    password: str
    cert_path: Optional[str] = None
    use_tls: bool = True
    timeout: float = DEFAULT_TIMEOUT

    @property
    def url(self) -> str:
        if "://" in self.server:
            return self.server
        scheme = "https" if self.use_tls else "http"
        return f"{scheme}://{self.server}"

    def validate(self) -> None:
        """Fail fast on settings that would only surface as RPC errors."""
        if not self.server:
            raise ConfigurationException("RPC server address is required")
        if not self.user or not self.password:
            raise ConfigurationException(
                "RPC credentials are required: set --rpcuser/--rpcpass "
                "or VW_RPC_USER/VW_RPC_PASS"
            )
        if self.use_tls:
            if not self.cert_path or not Path(self.cert_path).is_file():
                raise ConfigurationException(
                    f"Unable to load RPC TLS cert: {self.cert_path}"
                )


def load_rpc_config(
    server: Optional[str] = None,
    user: Optional[str] = None,
    password: Optional[str] = None,
    cert_path: Optional[str] = None,
    no_tls: bool = False,
    params: ChainParams = MAINNET,
) -> RPCConfig:
    """Resolve and validate the RPC configuration."""
    config = RPCConfig(
        server=server
        or os.getenv("VW_RPC_SERVER")
        or f"localhost:{params.default_rpc_port}",
        user=user or os.getenv("VW_RPC_USER", ""),
        password=password or os.getenv("VW_RPC_PASS", ""),
        cert_path=cert_path
        or os.getenv("VW_RPC_CERT")
        or str(default_cert_path()),
        use_tls=not no_tls,
    )
    config.validate()
    return config
