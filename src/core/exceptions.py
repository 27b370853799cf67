"""
Exceptions du domaine.

Les échecs de règles métier (stock insuffisant, état invalide) sont exprimés
par des booléens dans les services. Ces exceptions signalent un usage
incorrect des entités.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.core.entities.order import OrderStatus


class ComptoirError(Exception):
    """Exception de base de l'application."""


class InvalidStatusTransition(ComptoirError):
    """Transition de statut de commande non autorisée."""

    def __init__(self, current: "OrderStatus", target: "OrderStatus") -> None:
        self.current = current
        self.target = target
        super().__init__(
            f"Transition de statut invalide : {current.value} -> {target.value}"
        )
