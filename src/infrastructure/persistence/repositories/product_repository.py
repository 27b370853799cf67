"""
Implementation SQLModel du repository Product.

Les mouvements de stock sont des UPDATE SQL conditionnels executes en une
seule instruction, sans lecture prealable cote Python. Un ID non numerique
ne correspond a aucun produit.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import update
from sqlmodel import Session

from src.core.entities.product import Product
from src.core.ports.repositories import IProductRepository
from src.infrastructure.persistence.models import ProductModel, utc_now
from src.infrastructure.persistence.repositories.identifiers import parse_id


class SQLModelProductRepository(IProductRepository):
    """
    Repository SQLModel pour les produits.

    Implemente IProductRepository avec conversion bidirectionnelle
    entre l'entite Product (domaine) et ProductModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Convertit un modele DB en entite domaine."""
        return Product(
            id=str(model.id) if model.id else None,
            name=model.name,
            price=model.price,
            stock_quantity=model.stock_quantity,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Convertit une entite domaine en modele DB."""
        model = ProductModel(
            name=entity.name,
            price=entity.price,
            stock_quantity=entity.stock_quantity,
        )
        model.id = parse_id(entity.id)
        return model

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Recupere un produit par son ID."""
        pk = parse_id(product_id)
        if pk is None:
            return None
        model = self._session.get(ProductModel, pk)
        if model:
            return self._to_entity(model)
        return None

    async def save(self, product: Product) -> Product:
        """Sauvegarde un produit (insertion ou mise a jour)."""
        existing = None
        pk = parse_id(product.id)
        if pk is not None:
            existing = self._session.get(ProductModel, pk)

        if existing:
            # Mise a jour
            existing.name = product.name
            existing.price = product.price
            existing.stock_quantity = product.stock_quantity
            existing.updated_at = utc_now()
            self._session.add(existing)
            self._session.commit()
            self._session.refresh(existing)
            return self._to_entity(existing)
        else:
            # Insertion
            model = self._to_model(product)
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
            return self._to_entity(model)

    async def update_stock(self, product_id: str, new_quantity: int) -> bool:
        """Fixe le stock d'un produit. Un stock negatif est refuse."""
        pk = parse_id(product_id)
        if pk is None or new_quantity < 0:
            return False
        statement = (
            update(ProductModel)
            .where(ProductModel.id == pk)
            .values(stock_quantity=new_quantity, updated_at=utc_now())
        )
        return self._execute_stock_update(statement)

    async def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """Decremente le stock si et seulement si il couvre la quantite (> 0)."""
        pk = parse_id(product_id)
        if pk is None or quantity <= 0:
            return False
        statement = (
            update(ProductModel)
            .where(ProductModel.id == pk)
            .where(ProductModel.stock_quantity >= quantity)
            .values(
                stock_quantity=ProductModel.stock_quantity - quantity,
                updated_at=utc_now(),
            )
        )
        return self._execute_stock_update(statement)

    async def increment_stock(self, product_id: str, quantity: int) -> bool:
        """Remet en stock une quantite strictement positive."""
        pk = parse_id(product_id)
        if pk is None or quantity <= 0:
            return False
        statement = (
            update(ProductModel)
            .where(ProductModel.id == pk)
            .values(
                stock_quantity=ProductModel.stock_quantity + quantity,
                updated_at=utc_now(),
            )
        )
        return self._execute_stock_update(statement)

    def _execute_stock_update(self, statement) -> bool:
        """Execute un UPDATE de stock et indique si une ligne a ete modifiee."""
        result = self._session.connection().execute(statement)
        self._session.commit()
        updated = result.rowcount == 1
        logger.debug(f"Mise a jour de stock: {updated}")
        return updated
