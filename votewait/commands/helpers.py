"""Shared command helpers and utilities."""

import sys
from typing import Callable, Optional

from rich import print as rprint
from rich.markup import escape

from votewait.shared.exceptions import (
    ConfigurationException,
    NoVotesException,
    VoteWaitException,
)


def handle_command_error(
    error: Exception, show_usage_fn: Optional[Callable[[], None]] = None
) -> None:
    """
    Standard error handling for commands.

    Args:
        error: The exception that occurred
        show_usage_fn: Optional function to display usage instructions
    """
    if isinstance(error, NoVotesException):
        rprint(f"[yellow]No votes:[/yellow] {escape(error.message)}")
    elif isinstance(error, VoteWaitException):
        rprint(f"[red]Error:[/red] {escape(error.message)}")
    elif isinstance(error, ValueError):
        rprint(f"[red]Error:[/red] {escape(str(error))}")
    else:
        rprint(f"[red]Unexpected error:[/red] {escape(str(error))}")

    if show_usage_fn and isinstance(error, ConfigurationException):
        show_usage_fn()

    sys.exit(1)
