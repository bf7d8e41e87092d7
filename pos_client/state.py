"""Order domain types: catalog snapshots, order lines, vouchers and payloads."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from .errors import InvalidArgumentError, errmsg
from .money import ZERO, to_decimal, to_wire

# Ids are kept as the backend sends them, int or str.
Id = Union[str, int]


class PaymentMethod(str, Enum):
    CASH = "Cash"
    DEBIT_CARD = "Debit Card"
    CREDIT_CARD = "Credit Card"
    E_WALLET = "E-Wallet"


DEFAULT_PAYMENT_METHOD = PaymentMethod.CASH


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


def parse_payment_method(value) -> PaymentMethod:
    try:
        return PaymentMethod(value)
    except ValueError:
        raise InvalidArgumentError(f"{errmsg.UNKNOWN_PAYMENT_METHOD}: {value!r}") from None


def parse_discount_type(value) -> DiscountType:
    try:
        return DiscountType(value)
    except ValueError:
        raise InvalidArgumentError(f"{errmsg.UNKNOWN_DISCOUNT_TYPE}: {value!r}") from None


@dataclass(frozen=True)
class Product:
    """Catalog snapshot of a product as returned by the catalog lookup."""

    id: Id
    title: str
    price: Decimal
    stock: int
    image_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        price = to_decimal(data.get("price") or 0)
        if price < ZERO:
            raise InvalidArgumentError(errmsg.PRICE_NEGATIVE)
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            price=price,
            stock=int(data.get("stock") or 0),
            image_url=data.get("image_url") or "",
        )


@dataclass(frozen=True)
class Voucher:
    """Voucher as listed by the voucher lookup."""

    id: Id
    code: str
    name: str
    discount_type: DiscountType
    discount_amount: Decimal
    is_active: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Voucher":
        amount = to_decimal(data.get("discount_amount") or 0)
        if amount < ZERO:
            raise InvalidArgumentError(errmsg.DISCOUNT_NEGATIVE)
        return cls(
            id=data["id"],
            code=data.get("code") or "",
            name=data.get("name") or "",
            discount_type=parse_discount_type(data.get("discount_type")),
            discount_amount=amount,
            is_active=bool(data.get("is_active", False)),
        )


@dataclass
class OrderLine:
    product_id: Id
    title: str
    unit_price: Decimal
    quantity: int
    stock_ceiling: int

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class VoucherBinding:
    """The voucher attached to the current order. Replaced, never edited."""

    id: Id
    code: str
    discount_type: DiscountType
    discount_amount: Decimal

    @classmethod
    def of(cls, voucher) -> "VoucherBinding":
        """Bind any voucher-shaped object (a :class:`Voucher` or another binding)."""
        return cls(
            id=voucher.id,
            code=voucher.code,
            discount_type=parse_discount_type(voucher.discount_type),
            discount_amount=to_decimal(voucher.discount_amount),
        )


@dataclass
class BuyerCounts:
    male: int = 0
    female: int = 0


@dataclass(frozen=True)
class DerivedTotals:
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    item_count: int


@dataclass(frozen=True)
class PayloadItem:
    product_id: Id
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class TransactionPayload:
    """Immutable snapshot of an order handed to the transaction recorder."""

    items: tuple[PayloadItem, ...]
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    payment_method: PaymentMethod
    male_count: int
    female_count: int
    voucher_id: Optional[Id] = None

    def to_dict(self) -> dict[str, Any]:
        """Wire shape expected by the transactions endpoint."""
        return {
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "price": to_wire(item.price),
                }
                for item in self.items
            ],
            "subtotal": to_wire(self.subtotal),
            "discount": to_wire(self.discount),
            "total": to_wire(self.total),
            "payment_method": self.payment_method.value,
            "male_count": self.male_count,
            "female_count": self.female_count,
            "voucher_id": self.voucher_id,
        }


@dataclass(frozen=True)
class CheckoutReceipt:
    """What the confirmation screen needs after a successful checkout."""

    transaction_code: str
    payment_method: PaymentMethod
    totals: DerivedTotals
    lines: tuple[OrderLine, ...] = field(default_factory=tuple)
