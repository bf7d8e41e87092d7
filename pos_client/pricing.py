"""Pricing: derive order totals from lines and the bound voucher."""

from decimal import Decimal
from typing import Iterable, Optional

from .money import ZERO, clamp_non_negative, round_half_up
from .state import DerivedTotals, DiscountType, OrderLine, VoucherBinding


def subtotal_of(lines: Iterable[OrderLine]) -> Decimal:
    return sum((line.line_total for line in lines), ZERO)


def discount_for(subtotal: Decimal, voucher: Optional[VoucherBinding]) -> Decimal:
    """Nominal discount of ``voucher`` against ``subtotal``.

    Fixed vouchers are returned as-is, even when larger than the subtotal.
    Only the total is clamped.
    """
    if voucher is None:
        return ZERO
    if voucher.discount_type == DiscountType.PERCENTAGE:
        return round_half_up(subtotal * voucher.discount_amount / 100)
    return voucher.discount_amount


def compute_totals(lines: Iterable[OrderLine], voucher: Optional[VoucherBinding]) -> DerivedTotals:
    lines = list(lines)
    subtotal = subtotal_of(lines)
    discount = discount_for(subtotal, voucher)
    return DerivedTotals(
        subtotal=subtotal,
        discount=discount,
        total=clamp_non_negative(subtotal - discount),
        item_count=sum(line.quantity for line in lines),
    )
