"""Shared formatting and file utilities for console output."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

# Shared console instance
console = Console(highlight=False)

PROGRESS_MARKER_INTERVAL = 1000
PROGRESS_LINE_INTERVAL = 10000


def format_hash(tx_hash: str, length: int = 8) -> str:
    """
    Shorten a transaction hash to its leading characters.

    Args:
        tx_hash: Hex transaction hash
        length: Number of characters to keep (default: 8)

    Returns:
        Shortened hash like "1a2b3c4d..."
    """
    if not tx_hash:
        return "N/A"
    return f"{tx_hash[:length]}..."


def format_amount(amount: Decimal) -> str:
    """Format a DCR amount without trailing zeros, e.g. "142.5 DCR"."""
    return f"{Decimal(amount).normalize():f} DCR"


def format_days(days: float) -> str:
    return f"{days:.2f} days"


def progress_marker(height: int) -> str:
    """
    Progress text to print when the scan reaches a height.

    A marker every 1000 heights and a line break every 10000.
    """
    if height == 0:
        return ""
    marker = ""
    if height % PROGRESS_LINE_INTERVAL == 0:
        marker += "\n"
    if height % PROGRESS_MARKER_INTERVAL == 0:
        marker += f"..{height}"
    return marker


def save_json_output(
    data: Dict[str, Any],
    filename: str,
    output_dir: str = "output",
    print_path: bool = True,
) -> str:
    """
    Save data to a JSON file with automatic directory creation.

    Args:
        data: Data to save
        filename: Output filename (can include subdirectories)
        output_dir: Base output directory (default: 'output')
        print_path: Whether to print the saved file path

    Returns:
        Full path to saved file
    """
    output_path = Path(output_dir)
    filepath = output_path / filename
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)

    if print_path:
        console.print(f"[cyan]Data saved to:[/cyan] {filepath}")

    return str(filepath)
