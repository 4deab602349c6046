"""
Unit tests for the dcrd JSON-RPC client.

httpx.MockTransport stands in for the node.
"""

import base64
import json

import httpx
import pytest

from votewait.rpc.client import DcrdClient
from votewait.shared.config import RPCConfig
from votewait.shared.exceptions import RPCException


@pytest.fixture
def rpc_config() -> RPCConfig:
    return RPCConfig(
        server="127.0.0.1:9109",
        user="user",
        password="pass",
        use_tls=False,
        timeout=5.0,
    )


@pytest.fixture
def node():
    """Build a client whose requests are answered by `handler`."""
    requests = []

    def _build(config, results=None, handler=None):
        def _default_handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            result = results[body["method"]]
            return httpx.Response(
                200, json={"result": result, "error": None, "id": body["id"]}
            )

        def _recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return (handler or _default_handler)(request)

        client = DcrdClient(config, transport=httpx.MockTransport(_recording_handler))
        return client, requests

    return _build


class TestCall:
    def test_sends_jsonrpc_request_with_basic_auth(self, rpc_config, node):
        client, requests = node(rpc_config, results={"getblockhash": "ab" * 32})

        assert client.get_block_hash(42) == "ab" * 32

        request = requests[0]
        body = json.loads(request.content)
        assert request.method == "POST"
        assert str(request.url) == "http://127.0.0.1:9109/"
        assert body["method"] == "getblockhash"
        assert body["params"] == [42]
        expected = base64.b64encode(b"user:pass").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"

    def test_request_ids_increase(self, rpc_config, node):
        client, requests = node(rpc_config, results={"getblockhash": "ab" * 32})

        client.get_block_hash(1)
        client.get_block_hash(2)

        ids = [json.loads(r.content)["id"] for r in requests]
        assert ids == [1, 2]

    def test_jsonrpc_error_raises(self, rpc_config, node):
        def handler(request):
            return httpx.Response(
                500,
                json={
                    "result": None,
                    "error": {"code": -5, "message": "Block not found"},
                    "id": 1,
                },
            )

        client, _ = node(rpc_config, handler=handler)

        with pytest.raises(RPCException, match="Block not found") as exc_info:
            client.get_block("ab" * 32)

        assert exc_info.value.code == -5
        assert exc_info.value.method == "getblock"

    def test_unauthorized_raises(self, rpc_config, node):
        client, _ = node(
            rpc_config, handler=lambda request: httpx.Response(401, text="")
        )

        with pytest.raises(RPCException, match="authentication failed") as exc_info:
            client.get_best_block_height()

        assert exc_info.value.code == 401

    def test_transport_error_raises(self, rpc_config, node):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = node(rpc_config, handler=handler)

        with pytest.raises(RPCException, match="connection refused"):
            client.get_block_hash(1)

    def test_non_json_body_raises(self, rpc_config, node):
        client, _ = node(
            rpc_config,
            handler=lambda request: httpx.Response(502, text="Bad Gateway"),
        )

        with pytest.raises(RPCException, match="HTTP 502"):
            client.get_block_hash(1)

    def test_missing_result_raises(self, rpc_config, node):
        client, _ = node(
            rpc_config,
            handler=lambda request: httpx.Response(200, json={"id": 1}),
        )

        with pytest.raises(RPCException, match="no result"):
            client.get_block_hash(1)


class TestBlockSourceMethods:
    def test_get_best_block_height(self, rpc_config, node):
        client, _ = node(
            rpc_config,
            results={"getbestblock": {"hash": "cd" * 32, "height": 812345}},
        )

        assert client.get_best_block_height() == 812345

    def test_malformed_best_block_raises(self, rpc_config, node):
        client, _ = node(rpc_config, results={"getbestblock": "oops"})

        with pytest.raises(RPCException, match="getbestblock"):
            client.get_best_block_height()

    def test_get_block_requests_verbose_transactions(
        self, rpc_config, node, ticket_hash
    ):
        block_json = {
            "hash": "ef" * 32,
            "height": 4096,
            "time": 1454954400,
            "rawstx": [
                {
                    "txid": ticket_hash,
                    "vin": [{"txid": "11" * 32, "vout": 0, "tree": 0}],
                    "vout": [
                        {
                            "value": 2.0,
                            "scriptPubKey": {"type": "stakesubmission"},
                        }
                    ],
                }
            ],
        }
        client, requests = node(rpc_config, results={"getblock": block_json})

        block = client.get_block("ef" * 32)

        assert json.loads(requests[0].content)["params"] == ["ef" * 32, True, True]
        assert block.height == 4096
        assert block.stake_transactions[0].txid == ticket_hash

    def test_incomplete_block_raises(self, rpc_config, node):
        client, _ = node(rpc_config, results={"getblock": {"hash": "ef" * 32}})

        with pytest.raises(RPCException, match="Unexpected getblock result"):
            client.get_block("ef" * 32)


def test_context_manager_closes_client(rpc_config):
    with DcrdClient(
        rpc_config, transport=httpx.MockTransport(lambda r: httpx.Response(200))
    ) as client:
        pass

    assert client._client.is_closed
