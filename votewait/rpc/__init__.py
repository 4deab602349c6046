from votewait.rpc.client import DcrdClient
from votewait.rpc.source import BlockSource

__all__ = ["BlockSource", "DcrdClient"]
