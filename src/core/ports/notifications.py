"""
Interface port pour l'envoi de notifications aux clients.
"""

from abc import ABC, abstractmethod

from src.core.entities.order import Order


class IEmailService(ABC):
    """
    Interface d'envoi des emails de suivi de commande.

    Les implémentations peuvent s'appuyer sur SMTP, une API transactionnelle
    ou simplement journaliser les messages.
    """

    @abstractmethod
    async def send_order_confirmation(self, order: Order) -> None:
        """Envoie la confirmation de commande au client."""
        ...

    @abstractmethod
    async def send_order_shipped_notification(self, order: Order) -> None:
        """Informe le client de l'expédition de sa commande."""
        ...

    @abstractmethod
    async def send_order_cancelled_notification(self, order: Order) -> None:
        """Informe le client de l'annulation de sa commande."""
        ...
