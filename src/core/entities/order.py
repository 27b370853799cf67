"""
Entités commande.

Une commande regroupe des lignes (OrderItem) et suit un cycle de vie :

    PENDING -> CONFIRMED -> SHIPPED -> DELIVERED
    PENDING | CONFIRMED | SHIPPED -> CANCELLED

DELIVERED et CANCELLED sont des états terminaux.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from src.core.exceptions import InvalidStatusTransition


class OrderStatus(Enum):
    """Statut d'une commande."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

# Statuts pour lesquels le stock des lignes a deja ete reserve
STOCK_RESERVED_STATUSES = frozenset({OrderStatus.CONFIRMED, OrderStatus.SHIPPED})


@dataclass
class OrderItem:
    """
    Ligne de commande.

    Attributs :
        product_id : Référence du produit commandé
        quantity : Quantité demandée
        unit_price : Prix unitaire figé au moment de la commande
    """

    product_id: str = ""
    quantity: int = 0
    unit_price: Decimal = Decimal("0")

    @property
    def subtotal(self) -> Decimal:
        """Montant de la ligne (quantité x prix unitaire)."""
        return self.unit_price * self.quantity


@dataclass
class Order:
    """
    Commande client.

    Attributs :
        id : Identifiant interne (attribué à la première sauvegarde)
        customer_email : Adresse email du client pour les notifications
        total_amount : Montant total de la commande
        items : Lignes de commande, dans l'ordre de saisie
        status : Statut courant dans le cycle de vie
        created_at : Date de création de l'enregistrement
        updated_at : Date de dernière modification
    """

    id: Optional[str] = None
    customer_email: str = ""
    total_amount: Decimal = Decimal("0")
    items: list[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def compute_total(self) -> Decimal:
        """Somme des sous-totaux des lignes."""
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def can_transition_to(self, target: OrderStatus) -> bool:
        """Indique si le passage au statut cible est autorisé."""
        return target in _TRANSITIONS[self.status]

    def transition_to(self, target: OrderStatus) -> None:
        """
        Fait passer la commande au statut cible.

        Raises :
            InvalidStatusTransition : si la transition n'est pas autorisée
        """
        if not self.can_transition_to(target):
            raise InvalidStatusTransition(self.status, target)
        self.status = target

    @property
    def has_reserved_stock(self) -> bool:
        """True si le stock des lignes a été décrémenté pour cette commande."""
        return self.status in STOCK_RESERVED_STATUSES
