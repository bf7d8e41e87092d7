"""Receipt formatting utilities."""

from .money import Number, to_decimal
from .state import CheckoutReceipt

CURRENCY = "IDR"


def format_currency(amount: Number) -> str:
    """Format with id-ID grouping: ``IDR 1.234.567`` or ``IDR 1.234,50``."""
    value = to_decimal(amount or 0)
    if value == value.to_integral_value():
        text = f"{int(value):,}"
    else:
        text = f"{value:,.2f}"
    # en grouping -> id-ID grouping
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{CURRENCY} {text}"


def format_receipt(receipt: CheckoutReceipt) -> str:
    """Format a human-readable checkout confirmation."""
    totals = receipt.totals
    lines = []

    lines.append("=" * 40)
    lines.append("         PAYMENT SUCCESSFUL")
    lines.append("=" * 40)
    lines.append(f"Transaction: {receipt.transaction_code}")
    lines.append(f"Payment: {receipt.payment_method.value}")
    lines.append("-" * 40)

    for line in receipt.lines:
        lines.append(
            f"{line.quantity} x {line.title} @ {format_currency(line.unit_price)}"
            f" = {format_currency(line.line_total)}"
        )
    if receipt.lines:
        lines.append("-" * 40)

    lines.append(f"Items: {totals.item_count}")
    lines.append(f"Subtotal: {format_currency(totals.subtotal)}")
    if totals.discount > 0:
        lines.append(f"Discount: -{format_currency(totals.discount)}")
    lines.append(f"TOTAL: {format_currency(totals.total)}")
    lines.append("=" * 40)

    return "\n".join(lines)
