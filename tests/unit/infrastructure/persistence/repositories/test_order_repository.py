"""
Tests pour SQLModelOrderRepository sur SQLite en memoire.
"""

from decimal import Decimal

import pytest

from src.core.entities.order import Order, OrderItem, OrderStatus
from src.infrastructure.persistence.repositories import SQLModelOrderRepository


@pytest.fixture
def repo(session):
    return SQLModelOrderRepository(session)


def sample_order() -> Order:
    return Order(
        customer_email="client@example.com",
        total_amount=Decimal("29.00"),
        items=[
            OrderItem(product_id="1", quantity=2, unit_price=Decimal("12.50")),
            OrderItem(product_id="2", quantity=1, unit_price=Decimal("4.00")),
        ],
    )


class TestSQLModelOrderRepository:
    """Tests pour SQLModelOrderRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, repo):
        order = sample_order()

        assert await repo.save(order) is True
        assert order.id is not None
        assert order.created_at is not None

    @pytest.mark.asyncio
    async def test_roundtrip_keeps_items_in_order(self, repo):
        order = sample_order()
        await repo.save(order)

        found = await repo.get_by_id(order.id)

        assert found.customer_email == "client@example.com"
        assert found.total_amount == Decimal("29.00")
        assert found.status == OrderStatus.PENDING
        assert [(i.product_id, i.quantity) for i in found.items] == [("1", 2), ("2", 1)]
        assert found.items[0].unit_price == Decimal("12.50")

    @pytest.mark.asyncio
    async def test_update_status_and_items(self, repo):
        order = sample_order()
        await repo.save(order)
        order.status = OrderStatus.CONFIRMED
        order.items = order.items[:1]

        assert await repo.save(order) is True

        found = await repo.get_by_id(order.id)
        assert found.status == OrderStatus.CONFIRMED
        assert len(found.items) == 1

    @pytest.mark.asyncio
    async def test_get_missing(self, repo):
        assert await repo.get_by_id("404") is None

    @pytest.mark.asyncio
    async def test_get_non_numeric_id(self, repo):
        assert await repo.get_by_id("abc") is None

    @pytest.mark.asyncio
    async def test_non_numeric_product_id_fails_save(self, repo):
        order = Order(
            customer_email="client@example.com",
            items=[OrderItem(product_id="abc", quantity=1, unit_price=Decimal("1.00"))],
        )

        assert await repo.save(order) is False
        assert order.id is None
