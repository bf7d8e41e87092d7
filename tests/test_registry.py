"""Tests for the order line registry."""

import pytest

from pos_client.registry import OrderLineRegistry

from .fixtures import make_product


@pytest.fixture
def registry():
    return OrderLineRegistry()


class TestAddLine:
    def test_new_product_gets_quantity_one(self, registry) -> None:
        """First add inserts a line seeded from the product snapshot."""
        product = make_product(id="p1", title="Es Teh", price=5000, stock=3)

        line = registry.add_line(product)

        assert line.product_id == "p1"
        assert line.title == "Es Teh"
        assert line.unit_price == 5000
        assert line.quantity == 1
        assert line.stock_ceiling == 3
        assert len(registry) == 1

    def test_same_product_increments(self, registry) -> None:
        """Adding an existing product increments instead of inserting."""
        product = make_product(id="p1")
        registry.add_line(product)
        registry.add_line(product)

        assert len(registry) == 1
        assert registry.quantity_of("p1") == 2

    def test_double_add_equals_add_then_set_two(self) -> None:
        """add twice is the same state as add + set_quantity(2)."""
        product = make_product(id="p1")
        a = OrderLineRegistry()
        a.add_line(product)
        a.add_line(product)

        b = OrderLineRegistry()
        b.add_line(product)
        b.set_quantity("p1", 2)

        assert a.lines == b.lines

    def test_snapshot_not_resynced(self, registry) -> None:
        """A later product snapshot with another price does not change the line."""
        registry.add_line(make_product(id="p1", price=10000))
        registry.add_line(make_product(id="p1", price=99999))

        line = registry.lines[0]
        assert line.unit_price == 10000
        assert line.quantity == 2

    def test_no_stock_check(self, registry) -> None:
        """Adding beyond the stock ceiling is recorded, not clamped."""
        product = make_product(id="p1", stock=1)
        registry.add_line(product)
        registry.add_line(product)

        assert registry.quantity_of("p1") == 2

    def test_insertion_order_preserved(self, registry) -> None:
        for pid in ("c", "a", "b"):
            registry.add_line(make_product(id=pid))
        registry.add_line(make_product(id="a"))

        assert [line.product_id for line in registry] == ["c", "a", "b"]


class TestRemoveLine:
    def test_removes_existing(self, registry) -> None:
        registry.add_line(make_product(id="p1"))
        registry.remove_line("p1")

        assert "p1" not in registry
        assert len(registry) == 0

    def test_missing_id_is_noop(self, registry) -> None:
        """Removing an unknown id is not an error."""
        registry.add_line(make_product(id="p1"))
        registry.remove_line("nope")

        assert registry.quantity_of("p1") == 1

    def test_idempotent(self, registry) -> None:
        registry.add_line(make_product(id="p1"))
        registry.add_line(make_product(id="p2"))

        registry.remove_line("p1")
        once = registry.lines
        registry.remove_line("p1")

        assert registry.lines == once


class TestSetQuantity:
    def test_overwrites_quantity(self, registry) -> None:
        registry.add_line(make_product(id="p1"))
        registry.set_quantity("p1", 7)

        assert registry.quantity_of("p1") == 7

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_removes(self, registry, quantity) -> None:
        registry.add_line(make_product(id="p1"))
        registry.set_quantity("p1", quantity)

        assert "p1" not in registry

    @pytest.mark.parametrize("quantity", [0.5, 0.99])
    def test_fraction_below_one_removes(self, registry, quantity) -> None:
        registry.add_line(make_product(id="p1"))
        registry.set_quantity("p1", quantity)

        assert "p1" not in registry
        assert all(line.quantity >= 1 for line in registry)

    def test_fraction_truncates_before_storing(self, registry) -> None:
        registry.add_line(make_product(id="p1"))
        registry.set_quantity("p1", 2.7)

        assert registry.quantity_of("p1") == 2
        assert isinstance(registry.quantity_of("p1"), int)

    def test_ignores_stock_ceiling(self, registry) -> None:
        registry.add_line(make_product(id="p1", stock=2))
        registry.set_quantity("p1", 50)

        assert registry.quantity_of("p1") == 50

    def test_missing_line_is_noop(self, registry) -> None:
        registry.set_quantity("ghost", 3)

        assert len(registry) == 0
        assert registry.quantity_of("ghost") == 0


class TestInvariants:
    def test_mixed_operations_keep_positive_quantities(self, registry) -> None:
        """After any sequence of edits no line sits at or below zero."""
        p1, p2, p3 = make_product(id="p1"), make_product(id="p2"), make_product(id="p3")
        registry.add_line(p1)
        registry.add_line(p2)
        registry.add_line(p2)
        registry.set_quantity("p1", 0)
        registry.add_line(p3)
        registry.set_quantity("p3", 4)
        registry.remove_line("p2")
        registry.add_line(p1)
        registry.set_quantity("p3", -2)

        assert all(line.quantity >= 1 for line in registry)
        assert [line.product_id for line in registry] == ["p1"]
        assert sum(line.quantity for line in registry) == 1

    def test_clear(self, registry) -> None:
        registry.add_line(make_product(id="p1"))
        registry.add_line(make_product(id="p2"))
        registry.clear()

        assert len(registry) == 0
        assert registry.lines == []


class TestCanIncrement:
    def test_below_ceiling(self, registry) -> None:
        product = make_product(id="p1", stock=2)
        assert registry.can_increment(product)
        registry.add_line(product)
        assert registry.can_increment(product)

    def test_at_ceiling(self, registry) -> None:
        product = make_product(id="p1", stock=2)
        registry.add_line(product)
        registry.add_line(product)

        assert not registry.can_increment(product)

    def test_out_of_stock(self, registry) -> None:
        assert not registry.can_increment(make_product(id="p1", stock=0))
