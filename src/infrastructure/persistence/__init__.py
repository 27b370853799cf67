"""
Module de persistance SQLite pour Comptoir.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from src.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
"""

from src.infrastructure.persistence.database import get_engine, get_session, init_db
from src.infrastructure.persistence.models import (
    OrderItemModel,
    OrderModel,
    PersonModel,
    ProductModel,
)

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
    "PersonModel",
    "ProductModel",
    "OrderModel",
    "OrderItemModel",
]
