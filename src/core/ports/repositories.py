"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

Les repositories de commandes et de produits sont asynchrones ; le repository
des personnes est synchrone.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.order import Order
from src.core.entities.person import Person
from src.core.entities.product import Product


class IPersonRepository(ABC):
    """
    Interface de stockage des personnes.

    Définit les opérations CRUD sur les entités Person.
    """

    @abstractmethod
    def get_by_id(self, person_id: str) -> Optional[Person]:
        """Récupère une personne par son ID."""
        ...

    @abstractmethod
    def add(self, person: Person) -> Person:
        """Ajoute une personne et retourne l'entité avec son ID attribué."""
        ...

    @abstractmethod
    def delete(self, person_id: str) -> bool:
        """Supprime une personne par ID. Retourne True si supprimée."""
        ...


class IProductRepository(ABC):
    """
    Interface de stockage des produits et de leur stock.
    """

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Récupère un produit par son ID."""
        ...

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Sauvegarde un produit (insertion ou mise à jour)."""
        ...

    @abstractmethod
    async def update_stock(self, product_id: str, new_quantity: int) -> bool:
        """Fixe le stock d'un produit. Retourne False si le produit est inconnu."""
        ...

    @abstractmethod
    async def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """
        Décrémente le stock de façon atomique et conditionnelle.

        Le stock n'est modifié que s'il est supérieur ou égal à la quantité
        demandée au moment de l'écriture.

        Retourne :
            True si le stock a été décrémenté, False sinon (stock insuffisant
            ou produit inconnu)
        """
        ...

    @abstractmethod
    async def increment_stock(self, product_id: str, quantity: int) -> bool:
        """Remet en stock une quantité. Retourne False si le produit est inconnu."""
        ...


class IOrderRepository(ABC):
    """
    Interface de stockage des commandes.
    """

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """Récupère une commande (avec ses lignes) par son ID."""
        ...

    @abstractmethod
    async def save(self, order: Order) -> bool:
        """
        Sauvegarde une commande (insertion ou mise à jour).

        En cas d'insertion, l'ID attribué est reporté sur l'entité.

        Retourne :
            True si la commande a été persistée
        """
        ...
