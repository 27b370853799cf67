"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IPersonRepository : Stockage des personnes
- IProductRepository : Stockage des produits et gestion du stock
- IOrderRepository : Stockage des commandes

Ports notification : Contrats pour les services externes
- IEmailService : Envoi des emails de suivi de commande
"""

from src.core.ports.notifications import IEmailService
from src.core.ports.repositories import (
    IOrderRepository,
    IPersonRepository,
    IProductRepository,
)

__all__ = [
    # Repositories
    "IPersonRepository",
    "IProductRepository",
    "IOrderRepository",
    # Notifications
    "IEmailService",
]
