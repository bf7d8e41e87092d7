"""Order line registry: the product lines of the in-progress order."""

from typing import Iterator

import structlog

from .state import Id, OrderLine, Product

logger = structlog.get_logger()


class OrderLineRegistry:
    """Lines keyed by product id, kept in insertion order.

    A line never holds a quantity below 1; dropping to zero removes it.
    Stock ceilings are recorded but not enforced here, callers consult
    :meth:`can_increment` before offering an increment.
    """

    def __init__(self) -> None:
        self._lines: dict[Id, OrderLine] = {}
        self.log = logger.bind(component="order_lines")

    def add_line(self, product: Product) -> OrderLine:
        """Add one unit of ``product``, seeding a new line from its snapshot."""
        line = self._lines.get(product.id)
        if line is not None:
            line.quantity += 1
            self.log.info("incrementing_line", product_id=product.id, quantity=line.quantity)
            return line

        line = OrderLine(
            product_id=product.id,
            title=product.title,
            unit_price=product.price,
            quantity=1,
            stock_ceiling=product.stock,
        )
        self._lines[product.id] = line
        self.log.info("adding_line", product_id=product.id)
        return line

    def remove_line(self, product_id: Id) -> None:
        if self._lines.pop(product_id, None) is not None:
            self.log.info("removing_line", product_id=product_id)

    def set_quantity(self, product_id: Id, quantity: int) -> None:
        quantity = int(quantity)
        if quantity <= 0:
            self.remove_line(product_id)
            return

        line = self._lines.get(product_id)
        if line is None:
            # No snapshot to seed a line from.
            self.log.debug("quantity_for_missing_line", product_id=product_id)
            return
        line.quantity = quantity
        self.log.info("updating_quantity", product_id=product_id, quantity=line.quantity)

    def clear(self) -> None:
        self._lines.clear()

    def quantity_of(self, product_id: Id) -> int:
        line = self._lines.get(product_id)
        return line.quantity if line else 0

    def can_increment(self, product: Product) -> bool:
        """Whether the UI should offer one more unit of ``product``."""
        return product.stock > 0 and self.quantity_of(product.id) < product.stock

    @property
    def lines(self) -> list[OrderLine]:
        return list(self._lines.values())

    def __iter__(self) -> Iterator[OrderLine]:
        return iter(list(self._lines.values()))

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines
