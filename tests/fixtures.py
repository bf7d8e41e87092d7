"""Shared test data for order, voucher and checkout tests."""

from decimal import Decimal

from pos_client.state import DiscountType, Product, Voucher


def make_product(id="1", title="Kopi Susu", price=10000, stock=10) -> Product:
    return Product(id=id, title=title, price=Decimal(price), stock=stock)


def make_voucher(
    id="v-1",
    code="PROMO10",
    discount_type=DiscountType.PERCENTAGE,
    discount_amount=10,
    is_active=True,
) -> Voucher:
    return Voucher(
        id=id,
        code=code,
        name=code.title(),
        discount_type=discount_type,
        discount_amount=Decimal(discount_amount),
        is_active=is_active,
    )


class FakeRecorder:
    """Transaction recorder that returns a fixed code or raises a fixed error."""

    def __init__(self, code="TRX-001", error=None):
        self.code = code
        self.error = error
        self.payloads = []
        self.on_record = None

    def record(self, payload):
        self.payloads.append(payload)
        if self.on_record is not None:
            self.on_record(payload)
        if self.error is not None:
            raise self.error
        return self.code
