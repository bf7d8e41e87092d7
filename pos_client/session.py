"""Order session: the in-progress order owned by whoever drives checkout."""

from typing import Optional

import structlog

from .errors import InvalidArgumentError, errmsg
from .pricing import compute_totals
from .registry import OrderLineRegistry
from .state import (
    DEFAULT_PAYMENT_METHOD,
    BuyerCounts,
    DerivedTotals,
    Id,
    OrderLine,
    PayloadItem,
    PaymentMethod,
    Product,
    TransactionPayload,
    VoucherBinding,
    parse_payment_method,
)
from .voucher import VoucherSlot

logger = structlog.get_logger()


class OrderSession:
    """Lines, voucher, buyer counts and payment method for one order.

    Totals are derived on every read, so they can never lag behind a
    mutation.
    """

    def __init__(self) -> None:
        self.lines = OrderLineRegistry()
        self.voucher = VoucherSlot()
        self.buyers = BuyerCounts()
        self.payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD
        self.log = logger.bind(component="order_session")

    # Lines

    def add_line(self, product: Product) -> OrderLine:
        return self.lines.add_line(product)

    def remove_line(self, product_id: Id) -> None:
        self.lines.remove_line(product_id)

    def set_quantity(self, product_id: Id, quantity: int) -> None:
        self.lines.set_quantity(product_id, quantity)

    def can_increment(self, product: Product) -> bool:
        return self.lines.can_increment(product)

    # Voucher

    def apply_voucher(self, voucher) -> VoucherBinding:
        return self.voucher.apply(voucher)

    def remove_voucher(self) -> None:
        self.voucher.remove()

    @property
    def voucher_binding(self) -> Optional[VoucherBinding]:
        return self.voucher.binding

    # Buyers and payment

    def set_male_count(self, count: int) -> None:
        self.buyers.male = _validate_count(count)

    def set_female_count(self, count: int) -> None:
        self.buyers.female = _validate_count(count)

    def set_payment_method(self, method) -> None:
        self.payment_method = parse_payment_method(method)

    # Derived

    @property
    def totals(self) -> DerivedTotals:
        return compute_totals(self.lines, self.voucher.binding)

    @property
    def is_empty(self) -> bool:
        return len(self.lines) == 0

    def build_payload(self) -> TransactionPayload:
        """Snapshot the current order for submission."""
        totals = self.totals
        binding = self.voucher.binding
        return TransactionPayload(
            items=tuple(
                PayloadItem(product_id=line.product_id, quantity=line.quantity, price=line.unit_price)
                for line in self.lines
            ),
            subtotal=totals.subtotal,
            discount=totals.discount,
            total=totals.total,
            payment_method=self.payment_method,
            male_count=self.buyers.male,
            female_count=self.buyers.female,
            voucher_id=binding.id if binding else None,
        )

    def clear(self) -> None:
        """Reset to an empty order with default buyer counts and payment method."""
        self.lines.clear()
        self.voucher.remove()
        self.buyers = BuyerCounts()
        self.payment_method = DEFAULT_PAYMENT_METHOD
        self.log.info("order_cleared")


def _validate_count(count: int) -> int:
    if count < 0:
        raise InvalidArgumentError(errmsg.COUNT_NEGATIVE)
    return int(count)
