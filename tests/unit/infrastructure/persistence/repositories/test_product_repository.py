"""
Tests pour SQLModelProductRepository sur SQLite en memoire.

Verifie en particulier la decrementation conditionnelle du stock.
"""

from decimal import Decimal

import pytest

from src.core.entities.product import Product
from src.infrastructure.persistence.repositories import SQLModelProductRepository


@pytest.fixture
def repo(session):
    return SQLModelProductRepository(session)


class TestSQLModelProductRepository:
    """Tests pour SQLModelProductRepository."""

    @pytest.mark.asyncio
    async def test_save_and_get(self, repo):
        saved = await repo.save(Product(name="Carafe", price=Decimal("12.50"), stock_quantity=5))

        found = await repo.get_by_id(saved.id)

        assert found is not None
        assert found.name == "Carafe"
        assert found.price == Decimal("12.50")
        assert found.stock_quantity == 5

    @pytest.mark.asyncio
    async def test_save_updates_existing(self, repo):
        saved = await repo.save(Product(name="Carafe", price=Decimal("12.50"), stock_quantity=5))
        saved.name = "Grande carafe"

        updated = await repo.save(saved)

        assert updated.id == saved.id
        assert (await repo.get_by_id(saved.id)).name == "Grande carafe"

    @pytest.mark.asyncio
    async def test_get_missing(self, repo):
        assert await repo.get_by_id("404") is None

    @pytest.mark.asyncio
    async def test_decrement_within_stock(self, repo):
        product = await repo.save(Product(name="Carafe", stock_quantity=5))

        assert await repo.decrement_stock(product.id, 2) is True
        assert (await repo.get_by_id(product.id)).stock_quantity == 3

    @pytest.mark.asyncio
    async def test_decrement_whole_stock(self, repo):
        product = await repo.save(Product(name="Carafe", stock_quantity=5))

        assert await repo.decrement_stock(product.id, 5) is True
        assert (await repo.get_by_id(product.id)).stock_quantity == 0

    @pytest.mark.asyncio
    async def test_decrement_beyond_stock_is_refused(self, repo):
        product = await repo.save(Product(name="Carafe", stock_quantity=5))

        assert await repo.decrement_stock(product.id, 10) is False
        assert (await repo.get_by_id(product.id)).stock_quantity == 5

    @pytest.mark.asyncio
    async def test_decrement_unknown_product(self, repo):
        assert await repo.decrement_stock("404", 1) is False

    @pytest.mark.asyncio
    async def test_increment_and_update(self, repo):
        product = await repo.save(Product(name="Carafe", stock_quantity=5))

        assert await repo.increment_stock(product.id, 2) is True
        assert (await repo.get_by_id(product.id)).stock_quantity == 7
        assert await repo.update_stock(product.id, 1) is True
        assert (await repo.get_by_id(product.id)).stock_quantity == 1

    @pytest.mark.asyncio
    async def test_update_unknown_product(self, repo):
        assert await repo.update_stock("404", 1) is False
        assert await repo.increment_stock("404", 1) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -7])
    async def test_non_positive_movements_are_refused(self, repo, quantity):
        product = await repo.save(Product(name="Carafe", stock_quantity=5))

        assert await repo.decrement_stock(product.id, quantity) is False
        assert await repo.increment_stock(product.id, quantity) is False
        assert (await repo.get_by_id(product.id)).stock_quantity == 5

    @pytest.mark.asyncio
    async def test_negative_stock_is_refused(self, repo):
        product = await repo.save(Product(name="Carafe", stock_quantity=5))

        assert await repo.update_stock(product.id, -1) is False
        assert (await repo.get_by_id(product.id)).stock_quantity == 5

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_unknown(self, repo):
        assert await repo.get_by_id("abc") is None
        assert await repo.update_stock("abc", 1) is False
        assert await repo.decrement_stock("abc", 1) is False
        assert await repo.increment_stock("abc", 1) is False

