"""Point-of-sale client: order assembly, pricing and checkout."""

from .errors import (
    ClientError,
    TransportError,
    RequestRejectedError,
    SubmissionRejectedError,
    InvalidArgumentError,
    CheckoutRejectedError,
    EmptyOrderError,
    CheckoutInProgressError,
    errmsg,
)
from .state import (
    PaymentMethod,
    DEFAULT_PAYMENT_METHOD,
    DiscountType,
    Product,
    Voucher,
    OrderLine,
    VoucherBinding,
    BuyerCounts,
    DerivedTotals,
    PayloadItem,
    TransactionPayload,
    CheckoutReceipt,
)
from .money import round_half_up, clamp_non_negative, to_decimal
from .registry import OrderLineRegistry
from .voucher import VoucherSlot, eligible
from .pricing import compute_totals
from .session import OrderSession
from .checkout import Checkout, CheckoutState, TransactionRecorder
from .auth import AuthSession, InMemoryStore, KeyValueStore
from .client import ApiClient, CatalogClient, VoucherClient, TransactionClient
from .config import ApiConfig, get_api_config, configure_logging
from .receipt import format_currency, format_receipt

__all__ = [
    # Errors
    "ClientError",
    "TransportError",
    "RequestRejectedError",
    "SubmissionRejectedError",
    "InvalidArgumentError",
    "CheckoutRejectedError",
    "EmptyOrderError",
    "CheckoutInProgressError",
    "errmsg",
    # Domain types
    "PaymentMethod",
    "DEFAULT_PAYMENT_METHOD",
    "DiscountType",
    "Product",
    "Voucher",
    "OrderLine",
    "VoucherBinding",
    "BuyerCounts",
    "DerivedTotals",
    "PayloadItem",
    "TransactionPayload",
    "CheckoutReceipt",
    # Core
    "round_half_up",
    "clamp_non_negative",
    "to_decimal",
    "OrderLineRegistry",
    "VoucherSlot",
    "eligible",
    "compute_totals",
    "OrderSession",
    "Checkout",
    "CheckoutState",
    "TransactionRecorder",
    # Collaborators
    "AuthSession",
    "InMemoryStore",
    "KeyValueStore",
    "ApiClient",
    "CatalogClient",
    "VoucherClient",
    "TransactionClient",
    # Runtime
    "ApiConfig",
    "get_api_config",
    "configure_logging",
    "format_currency",
    "format_receipt",
]
