"""
Modeles SQLModel pour la base de donnees Comptoir.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- persons: Clients et contacts
- products: Catalogue et stock disponible
- orders: Commandes client
- order_items: Lignes de commande
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Horodatage UTC avec fuseau horaire."""
    return datetime.now(timezone.utc)


class PersonModel(SQLModel, table=True):
    """Modele representant une personne."""

    __tablename__ = "persons"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = ""
    last_name: str = Field(default="", index=True)
    email: str | None = Field(default=None, index=True)
    created_at: datetime | None = Field(default_factory=utc_now)


class ProductModel(SQLModel, table=True):
    """
    Modele representant un produit du catalogue.

    stock_quantity est modifie par des UPDATE conditionnels (voir
    SQLModelProductRepository.decrement_stock).
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    stock_quantity: int = Field(default=0, ge=0)
    updated_at: datetime | None = Field(default_factory=utc_now)


class OrderModel(SQLModel, table=True):
    """Modele representant une commande (sans ses lignes)."""

    __tablename__ = "orders"

    id: int | None = Field(default=None, primary_key=True)
    customer_email: str = Field(index=True)
    total_amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    status: str = Field(default="pending", index=True)  # Valeur de OrderStatus
    created_at: datetime | None = Field(default_factory=utc_now)
    updated_at: datetime | None = Field(default_factory=utc_now)


class OrderItemModel(SQLModel, table=True):
    """Ligne de commande, ordonnee par position dans la commande."""

    __tablename__ = "order_items"

    id: int | None = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", index=True)
    position: int = 0
    product_id: int = Field(foreign_key="products.id", index=True)
    quantity: int = Field(default=0, ge=0)
    unit_price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
