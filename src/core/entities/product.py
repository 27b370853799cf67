"""
Entité produit du catalogue.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """
    Produit vendu par la boutique.

    Le stock disponible est décrémenté lors de la confirmation d'une commande.

    Attributs :
        id : Identifiant interne
        name : Nom du produit
        price : Prix unitaire courant
        stock_quantity : Quantité disponible en stock
    """

    id: Optional[str] = None
    name: str = ""
    price: Decimal = Decimal("0")
    stock_quantity: int = 0

    def has_stock(self, quantity: int) -> bool:
        """Vérifie que le stock couvre la quantité demandée (strictement positive)."""
        return 0 < quantity <= self.stock_quantity
