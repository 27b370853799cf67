"""
Fixtures pytest partagees pour les tests Comptoir.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (repositories, service d'email)
- Session SQLModel sur une base SQLite en memoire
- Settings de test avec chemins temporaires
"""

from decimal import Decimal
from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from src.config import Settings
from src.core.entities.product import Product
from src.core.ports.notifications import IEmailService
from src.core.ports.repositories import (
    IOrderRepository,
    IPersonRepository,
    IProductRepository,
)
from src.infrastructure.persistence.database import init_db


@pytest.fixture
def products() -> dict[str, Product]:
    """
    Stock en memoire utilise par mock_product_repo.

    Par defaut : produit "1" (5 en stock) et produit "2" (3 en stock).
    """
    return {
        "1": Product(id="1", name="Carafe", price=Decimal("12.50"), stock_quantity=5),
        "2": Product(id="2", name="Verre", price=Decimal("4.00"), stock_quantity=3),
    }


@pytest.fixture
def mock_product_repo(products: dict[str, Product]) -> MagicMock:
    """
    Mock de IProductRepository adosse au dictionnaire ``products``.

    Les mouvements de stock modifient reellement les produits du dictionnaire,
    ce qui permet de verifier les quantites apres un appel au service.
    """
    repo = MagicMock(spec=IProductRepository)

    async def get_by_id(product_id: str):
        product = products.get(product_id)
        if product is None:
            return None
        # Copie : le service ne doit pas pouvoir modifier le stock par reference
        return Product(
            id=product.id,
            name=product.name,
            price=product.price,
            stock_quantity=product.stock_quantity,
        )

    async def update_stock(product_id: str, new_quantity: int) -> bool:
        if product_id not in products:
            return False
        products[product_id].stock_quantity = new_quantity
        return True

    async def decrement_stock(product_id: str, quantity: int) -> bool:
        product = products.get(product_id)
        if product is None or product.stock_quantity < quantity:
            return False
        product.stock_quantity -= quantity
        return True

    async def increment_stock(product_id: str, quantity: int) -> bool:
        if product_id not in products:
            return False
        products[product_id].stock_quantity += quantity
        return True

    repo.get_by_id = AsyncMock(side_effect=get_by_id)
    repo.update_stock = AsyncMock(side_effect=update_stock)
    repo.decrement_stock = AsyncMock(side_effect=decrement_stock)
    repo.increment_stock = AsyncMock(side_effect=increment_stock)
    return repo


@pytest.fixture
def mock_order_repo() -> MagicMock:
    """
    Mock de IOrderRepository.

    save() reussit et attribue l'ID "100" aux commandes sans ID.
    get_by_id() retourne None par defaut.
    """
    repo = MagicMock(spec=IOrderRepository)

    async def save(order) -> bool:
        if order.id is None:
            order.id = "100"
        return True

    repo.save = AsyncMock(side_effect=save)
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_email_service() -> MagicMock:
    """Mock de IEmailService."""
    service = MagicMock(spec=IEmailService)
    service.send_order_confirmation = AsyncMock(return_value=None)
    service.send_order_shipped_notification = AsyncMock(return_value=None)
    service.send_order_cancelled_notification = AsyncMock(return_value=None)
    return service


@pytest.fixture
def mock_person_repo() -> MagicMock:
    """Mock de IPersonRepository."""
    repo = MagicMock(spec=IPersonRepository)
    repo.get_by_id.return_value = None
    repo.delete.return_value = False
    return repo


@pytest.fixture
def session() -> Iterator[Session]:
    """
    Session SQLModel sur une base SQLite en memoire.

    StaticPool garantit que toutes les connexions partagent la meme base.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans un repertoire temporaire."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "logs" / "test.log",
        audit_log_file=tmp_path / "logs" / "audit.log",
        sender_email="test@comptoir.local",
        shop_name="Comptoir Test",
    )
