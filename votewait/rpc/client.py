"""
JSON-RPC client for dcrd.

Talks to the node over HTTP(S) POST with basic auth, verifying TLS against
the node's self-signed certificate. Only the three calls the scan needs are
wrapped. Failures are raised as RPCException and never retried.
"""

from __future__ import annotations

import itertools
import ssl
from typing import Any, List, Optional, Union

import httpx

from votewait import __version__
from votewait.chain.types import Block
from votewait.shared.config import RPCConfig
from votewait.shared.exceptions import RPCException
from votewait.shared.logging import get_logger

logger = get_logger(__name__)

USER_AGENT = f"votewait/{__version__}"


def _build_limits() -> httpx.Limits:
    # Strictly sequential scan; one connection is enough
    return httpx.Limits(max_keepalive_connections=1, max_connections=1)


def _build_timeout(timeout: float) -> httpx.Timeout:
    return httpx.Timeout(timeout, connect=min(timeout, 5.0))


def _default_headers() -> dict:
    return {"User-Agent": USER_AGENT, "Content-Type": "application/json"}


def _build_verify(config: RPCConfig) -> Union[bool, ssl.SSLContext]:
    if not config.use_tls:
        return False
    try:
        return ssl.create_default_context(cafile=config.cert_path)
    except (OSError, ssl.SSLError) as e:
        raise RPCException(f"Unable to load RPC TLS cert: {e}") from e


class DcrdClient:
    """Block source backed by a running dcrd node."""

    def __init__(
        self,
        config: RPCConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config
        self._ids = itertools.count(1)
        self._client = httpx.Client(
            base_url=config.url,
            auth=(config.user, config.password),
            verify=_build_verify(config),
            timeout=_build_timeout(config.timeout),
            limits=_build_limits(),
            headers=_default_headers(),
            transport=transport,
        )

    def __enter__(self) -> "DcrdClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """Issue a single JSON-RPC request and return its result."""
        payload = {
            "jsonrpc": "1.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        logger.debug(f"RPC {method} {payload['params']}")

        try:
            response = self._client.post("/", json=payload)
        except httpx.HTTPError as e:
            raise RPCException(
                f"RPC {method} failed: {e}", method=method
            ) from e

        if response.status_code == 401:
            raise RPCException(
                "RPC authentication failed: check rpcuser/rpcpass",
                method=method,
                code=401,
            )

        # dcrd answers JSON-RPC errors with a non-2xx status and a JSON body
        try:
            body = response.json()
        except ValueError:
            raise RPCException(
                f"RPC {method} returned HTTP {response.status_code}: "
                f"{response.text[:200]}",
                method=method,
                code=response.status_code,
            )

        if not isinstance(body, dict):
            raise RPCException(
                f"RPC {method} returned a malformed response", method=method
            )

        error = body.get("error")
        if error:
            code = error.get("code") if isinstance(error, dict) else None
            message = (
                error.get("message") if isinstance(error, dict) else str(error)
            )
            raise RPCException(
                f"RPC {method} error {code}: {message}",
                method=method,
                code=code,
            )

        if response.status_code >= 400:
            raise RPCException(
                f"RPC {method} returned HTTP {response.status_code}",
                method=method,
                code=response.status_code,
            )

        if "result" not in body:
            raise RPCException(
                f"RPC {method} returned no result", method=method
            )
        return body["result"]

    def get_best_block_height(self) -> int:
        result = self.call("getbestblock")
        try:
            return int(result["height"])
        except (TypeError, KeyError, ValueError) as e:
            raise RPCException(
                f"Unexpected getbestblock result: {result!r}",
                method="getbestblock",
            ) from e

    def get_block_hash(self, height: int) -> str:
        return self.call("getblockhash", [height])

    def get_block(self, block_hash: str) -> Block:
        # verbose=true, verbosetx=true so stake transactions come decoded
        result = self.call("getblock", [block_hash, True, True])
        try:
            return Block.from_dict(result)
        except (TypeError, KeyError, ValueError) as e:
            raise RPCException(
                f"Unexpected getblock result for {block_hash}: {e}",
                method="getblock",
            ) from e
