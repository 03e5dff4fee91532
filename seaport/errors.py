"""Exception hierarchy for the seaport client."""

from __future__ import annotations


class SeaportError(Exception):
    """Base class for all seaport client errors."""

    pass


class OrderValidationError(SeaportError, ValueError):
    """Order parameters are invalid and the order cannot be built."""

    pass


class FeeError(OrderValidationError):
    """Fee or bounty basis points are out of range."""

    pass


class InsufficientBalanceError(SeaportError):
    """Account does not hold enough of the payment token."""

    pass


class OwnershipError(SeaportError):
    """Account does not own enough of an asset it is trying to sell."""

    pass


class ApprovalError(SeaportError):
    """An on-chain approval transaction could not be completed."""

    pass


class OrderMatchError(SeaportError):
    """A buy and sell order cannot be matched on the exchange.

    Attributes:
        reason: Machine-readable reason (a MatchError value), if known
    """

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class APIError(SeaportError):
    """The marketplace API returned an error or could not be reached.

    Attributes:
        status_code: HTTP status code (0 for transport failures)
        detail: Response body or transport error text
    """

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"API error {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail
