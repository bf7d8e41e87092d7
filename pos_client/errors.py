"""Error types for the POS client."""

from typing import Optional


class errmsg:
    """Error message constants for the order domain."""

    ORDER_EMPTY = "Order is empty"
    CHECKOUT_IN_PROGRESS = "Checkout already in progress"
    CHECKOUT_FAILED = "Checkout failed"
    COUNT_NEGATIVE = "Buyer count cannot be negative"
    UNKNOWN_PAYMENT_METHOD = "Unknown payment method"
    UNKNOWN_DISCOUNT_TYPE = "Unknown discount type"
    DISCOUNT_NEGATIVE = "Discount amount cannot be negative"
    PRICE_NEGATIVE = "Price cannot be negative"
    NOT_LOGGED_IN = "Not logged in"
    MISSING_TRANSACTION_CODE = "Response has no transaction code"


class ClientError(Exception):
    """Base class for client errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class TransportError(ClientError):
    """Network, timeout or server-side failure talking to the backend."""

    def __init__(self, cause: Exception):
        super().__init__("transport error", cause)


class RequestRejectedError(ClientError):
    """The backend answered with a 4xx status."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class SubmissionRejectedError(RequestRejectedError):
    """The backend refused a transaction for a business reason (e.g. stock conflict)."""


class InvalidArgumentError(ClientError):
    """Invalid argument provided by caller."""

    def __init__(self, message: str):
        super().__init__(f"invalid argument: {message}")


class CheckoutRejectedError(Exception):
    """Checkout was refused locally, before anything was sent."""


class EmptyOrderError(CheckoutRejectedError):
    """Checkout attempted with no order lines."""

    def __init__(self) -> None:
        super().__init__(errmsg.ORDER_EMPTY)


class CheckoutInProgressError(CheckoutRejectedError):
    """Checkout attempted while another submission is in flight."""

    def __init__(self) -> None:
        super().__init__(errmsg.CHECKOUT_IN_PROGRESS)
