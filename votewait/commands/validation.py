from votewait.shared.exceptions import ConfigurationException


def validate_rpc_server(server: str) -> str:
    """Validate a host:port RPC server address"""
    if not server or not isinstance(server, str):
        raise ConfigurationException(
            "Invalid rpcserver: address must be a non-empty string"
        )
    server = server.strip()
    if "://" in server:
        return server
    host, sep, port = server.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ConfigurationException(
            f"Invalid rpcserver: {server} is not a host:port address"
        )
    if not 0 < int(port) < 65536:
        raise ConfigurationException(
            f"Invalid rpcserver: port {port} is out of range"
        )
    return server
