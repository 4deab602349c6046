"""
Exception hierarchy for votewait.

Exception Categories:
- ConfigurationException: Startup/config errors (missing credentials, bad cert)
- RPCException: The node could not be reached or returned an error
- DataConsistencyException: The chain data contradicts the ticket accounting
- NoVotesException: The scan finished without observing a single vote

None of these are retried: any of them aborts the scan.
"""

from typing import Optional


class VoteWaitException(Exception):
    """Base class for all votewait errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationException(VoteWaitException):
    """
    Exception for configuration/startup errors.

    Use when:
    - RPC credentials are missing
    - The RPC certificate cannot be read
    - An unknown network is requested
    """

    pass


class RPCException(VoteWaitException):
    """
    Exception for failures talking to the node.

    Covers transport errors, HTTP errors (including rejected credentials),
    malformed responses and JSON-RPC error objects.
    """

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        code: Optional[int] = None,
    ):
        super().__init__(message)
        self.method = method
        self.code = code


class DataConsistencyException(VoteWaitException):
    """
    Exception for chain data that breaks the scan's assumptions.

    Unreachable for a correctly validated chain supplied in height order.
    """

    pass


class TicketNotFoundException(DataConsistencyException):
    """A vote spends a ticket that was never seen (or was already spent)."""

    def __init__(self, ticket_hash: str, height: Optional[int] = None):
        message = f"Ticket {ticket_hash} not found"
        if height is not None:
            message += f" (vote in block {height})"
        super().__init__(message)
        self.ticket_hash = ticket_hash
        self.height = height


class NoVotesException(VoteWaitException):
    """The scanned range contained no votes, so no mean can be computed."""

    def __init__(self, best_height: int):
        super().__init__(
            f"No votes found through block height {best_height}; "
            "mean wait is undefined"
        )
        self.best_height = best_height
