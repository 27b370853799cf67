"""
Service d'email journalise.

Implemente IEmailService en ecrivant chaque message dans les logs au lieu de
l'envoyer. Les messages construits sont conserves dans ``outbox`` pour
inspection (tests, environnement de developpement).
"""

from dataclasses import dataclass

from loguru import logger

from src.core.entities.order import Order
from src.core.ports.notifications import IEmailService


@dataclass(frozen=True)
class EmailMessage:
    """Message pret a l'envoi."""

    sender: str
    recipient: str
    subject: str
    body: str


class LoggingEmailService(IEmailService):
    """
    Implementation de IEmailService sans livraison reelle.

    Example:
        service = LoggingEmailService(sender="boutique@example.com", shop_name="Comptoir")
        await service.send_order_confirmation(order)
        service.outbox[-1].subject  # "Comptoir - commande 42 confirmee"
    """

    def __init__(self, sender: str, shop_name: str = "Comptoir") -> None:
        self._sender = sender
        self._shop_name = shop_name
        self.outbox: list[EmailMessage] = []

    async def send_order_confirmation(self, order: Order) -> None:
        lines = [
            f"- produit {item.product_id} x{item.quantity} : {item.subtotal}"
            for item in order.items
        ]
        body = "\n".join(
            ["Merci pour votre commande.", *lines, f"Total : {order.total_amount}"]
        )
        self._send(order, f"commande {order.id} confirmee", body)

    async def send_order_shipped_notification(self, order: Order) -> None:
        self._send(
            order,
            f"commande {order.id} expediee",
            "Votre commande a ete remise au transporteur.",
        )

    async def send_order_cancelled_notification(self, order: Order) -> None:
        self._send(
            order,
            f"commande {order.id} annulee",
            "Votre commande a ete annulee.",
        )

    def _send(self, order: Order, subject: str, body: str) -> None:
        message = EmailMessage(
            sender=self._sender,
            recipient=order.customer_email,
            subject=f"{self._shop_name} - {subject}",
            body=body,
        )
        self.outbox.append(message)
        logger.info(
            "Email envoye",
            recipient=message.recipient,
            subject=message.subject,
        )
