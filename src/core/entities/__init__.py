"""
Entités métier représentant les concepts du domaine.

Les entités sont des objets mutables avec une identité persistante.

Exports :
- Person : Client ou contact de la boutique
- Product : Produit du catalogue avec son stock
- Order : Commande client et son cycle de vie
- OrderItem : Ligne de commande
- OrderStatus : Statuts possibles d'une commande
"""

from src.core.entities.order import Order, OrderItem, OrderStatus
from src.core.entities.person import Person
from src.core.entities.product import Product

__all__ = [
    "Person",
    "Product",
    "Order",
    "OrderItem",
    "OrderStatus",
]
