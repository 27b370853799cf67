"""
Implementation SQLModel du repository Order.

Une commande est stockee dans la table orders et ses lignes dans order_items.
Chaque sauvegarde remplace l'ensemble des lignes de la commande.
Une ligne dont le produit n'a pas d'ID numerique viole la contrainte NOT NULL
et fait echouer la sauvegarde.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.core.entities.order import Order, OrderItem, OrderStatus
from src.core.ports.repositories import IOrderRepository
from src.infrastructure.persistence.models import OrderItemModel, OrderModel, utc_now
from src.infrastructure.persistence.repositories.identifiers import parse_id


class SQLModelOrderRepository(IOrderRepository):
    """
    Repository SQLModel pour les commandes.

    Implemente IOrderRepository avec conversion bidirectionnelle
    entre l'entite Order (domaine) et OrderModel/OrderItemModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: OrderModel, item_models: list[OrderItemModel]) -> Order:
        """
        Convertit un modele DB et ses lignes en entite domaine.

        Args :
            model : Le modele OrderModel depuis la DB
            item_models : Les lignes de la commande, triees par position

        Retourne :
            L'entite Order correspondante
        """
        return Order(
            id=str(model.id) if model.id else None,
            customer_email=model.customer_email,
            total_amount=model.total_amount,
            items=[
                OrderItem(
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in item_models
            ],
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _items_of(self, order_id: int) -> list[OrderItemModel]:
        statement = (
            select(OrderItemModel)
            .where(OrderItemModel.order_id == order_id)
            .order_by(OrderItemModel.position)
        )
        return list(self._session.exec(statement).all())

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """Recupere une commande et ses lignes par son ID."""
        pk = parse_id(order_id)
        model = self._session.get(OrderModel, pk) if pk is not None else None
        if model is None:
            return None
        return self._to_entity(model, self._items_of(model.id))

    async def save(self, order: Order) -> bool:
        """
        Sauvegarde une commande (insertion ou mise a jour).

        Une violation de contrainte est traduite en echec (False) ; les autres
        erreurs de base de donnees remontent a l'appelant.
        """
        existing = None
        pk = parse_id(order.id)
        if pk is not None:
            existing = self._session.get(OrderModel, pk)

        now = utc_now()
        if existing:
            # Mise a jour
            model = existing
            model.customer_email = order.customer_email
            model.total_amount = order.total_amount
            model.status = order.status.value
            model.updated_at = now
        else:
            # Insertion
            model = OrderModel(
                customer_email=order.customer_email,
                total_amount=order.total_amount,
                status=order.status.value,
            )
            model.id = pk

        try:
            self._session.add(model)
            self._session.flush()

            for item_model in self._items_of(model.id):
                self._session.delete(item_model)
            for position, item in enumerate(order.items):
                self._session.add(
                    OrderItemModel(
                        order_id=model.id,
                        position=position,
                        product_id=parse_id(item.product_id),
                        quantity=item.quantity,
                        unit_price=item.unit_price,
                    )
                )
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            logger.error(f"Commande refusee par la base: {e.orig}")
            return False

        self._session.refresh(model)
        order.id = str(model.id)
        order.created_at = model.created_at
        order.updated_at = model.updated_at
        logger.debug(f"Commande {order.id} sauvegardee ({order.status.value})")
        return True
