#!/usr/bin/env python3
"""
Mean ticket vote wait calculator for Decred.

Scans a dcrd node's chain from genesis to the best block and reports how
long tickets waited between maturity and voting.

Examples:
    votewait --rpcuser user --rpcpass pass
    votewait --network testnet3 --rpcserver 127.0.0.1:19109 --verbose
    votewait --notls --rpcserver 10.0.0.5:9109 --output votewait.json
"""

import argparse
import os
import platform
import sys
from pathlib import Path
from typing import List, Optional

from votewait import __version__
from votewait.chain.params import NETWORKS, get_chain_params
from votewait.commands.helpers import handle_command_error
from votewait.commands.validation import validate_rpc_server
from votewait.rpc.client import DcrdClient
from votewait.scan.scanner import format_summary, scan_chain
from votewait.shared.config import default_cert_path, load_rpc_config
from votewait.utils.formatters import console, save_json_output


def version_string(prog: Optional[str] = None) -> str:
    app_name = Path(prog or sys.argv[0]).stem or "votewait"
    return (
        f"{app_name} version {__version__} (Python version "
        f"{platform.python_version()} {sys.platform}/{platform.machine()})"
    )


def cmd_scan(args: argparse.Namespace) -> None:
    params = get_chain_params(args.network)
    server = validate_rpc_server(args.rpcserver) if args.rpcserver else None
    config = load_rpc_config(
        server=server,
        user=args.rpcuser,
        password=args.rpcpass,
        cert_path=args.rpccert,
        no_tls=args.notls,
        params=params,
    )

    with DcrdClient(config) as client:
        summary = scan_chain(client, params, verbose=args.verbose)

    console.print(format_summary(summary), markup=False)

    if args.output:
        save_json_output(
            {"network": params.name, **summary.to_dict()}, args.output
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="votewait",
        description="Calculate the mean time tickets wait to vote after maturity",
    )
    parser.add_argument(
        "--rpcserver",
        type=str,
        help="RPC server address (default: localhost:<network RPC port>)",
    )
    parser.add_argument("--rpcuser", type=str, help="RPC server username")
    parser.add_argument("--rpcpass", type=str, help="RPC server passphrase")
    parser.add_argument(
        "--rpccert",
        type=str,
        help=f"RPC server TLS certificate (default: {default_cert_path()})",
    )
    parser.add_argument(
        "--notls",
        action="store_true",
        help="Connect to the RPC server without TLS",
    )
    parser.add_argument(
        "--network",
        type=str,
        default=None,
        help=f"Network to scan, one of {sorted(NETWORKS)} (default: mainnet)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print details about every vote",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Also save the summary as JSON under output/",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Display version information and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        console.print(version_string(), markup=False)
        sys.exit(0)

    if args.network is None:
        args.network = os.getenv("VW_NETWORK", "mainnet")

    try:
        cmd_scan(args)
    except Exception as e:
        handle_command_error(e, show_usage_fn=parser.print_usage)


if __name__ == "__main__":
    main()
