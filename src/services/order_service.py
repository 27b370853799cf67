"""
Service de commandes orchestrant la validation du stock, la confirmation et l'expedition.

Le OrderService coordonne les repositories de produits et de commandes avec le
service d'email. Les echecs metier (stock insuffisant, statut invalide) sont
retournes sous forme de booleens ; les erreurs d'infrastructure remontent
telles quelles a l'appelant.

Responsabilites:
- Passage de commande : validation du stock, reservation, confirmation, notification
- Expedition, livraison et annulation d'une commande
- Reapprovisionnement d'un produit
"""

from loguru import logger

from src.core.entities.order import Order, OrderItem, OrderStatus
from src.core.ports.notifications import IEmailService
from src.core.ports.repositories import IOrderRepository, IProductRepository

# Changements d'etat des commandes et du stock, routes vers le journal d'audit
audit_logger = logger.bind(audit=True)


class OrderService:
    """
    Service de gestion du cycle de vie des commandes.

    La reservation du stock passe par une decrementation atomique conditionnelle
    (IProductRepository.decrement_stock) : deux commandes concurrentes ne peuvent
    pas consommer le meme stock. Toute reservation est compensee si une etape
    ulterieure echoue.

    Example:
        service = OrderService(
            order_repo=order_repo,
            product_repo=product_repo,
            email_service=email_service,
        )

        if await service.place_order(order):
            await service.ship_order(order.id)
    """

    def __init__(
        self,
        order_repo: IOrderRepository,
        product_repo: IProductRepository,
        email_service: IEmailService,
    ) -> None:
        """
        Initialise le service de commandes.

        Args:
            order_repo: Repository pour la persistance des commandes
            product_repo: Repository des produits et du stock
            email_service: Service d'envoi des notifications client
        """
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._email_service = email_service

    async def place_order(self, order: Order) -> bool:
        """
        Valide le stock, reserve les quantites puis confirme la commande.

        Etapes:
        1. Refus des lignes a quantite nulle ou negative, puis verification
           du stock de chaque ligne, sans aucune modification
        2. Reservation atomique ligne par ligne (annulee si une ligne echoue)
        3. Passage au statut CONFIRMED et sauvegarde (stock restitue si la
           sauvegarde echoue ou leve une exception)
        4. Envoi de la confirmation si la sauvegarde reussit

        Args:
            order: Commande a placer, avec au moins une ligne

        Returns:
            True si la commande est confirmee et persistee, False sinon
        """
        if not order.items:
            logger.warning("Commande sans ligne refusee")
            return False

        invalid = [item for item in order.items if item.quantity <= 0]
        if invalid:
            logger.warning(
                f"Commande refusee: quantite non positive pour le produit {invalid[0].product_id}"
            )
            return False

        if not order.can_transition_to(OrderStatus.CONFIRMED):
            logger.warning(
                f"Commande {order.id} au statut {order.status.value}, confirmation impossible"
            )
            return False

        if not await self._check_stock(order.items):
            return False

        reserved = await self._reserve_stock(order.items)
        if reserved is None:
            return False

        previous_status = order.status
        previous_total = order.total_amount
        order.total_amount = order.compute_total()
        order.transition_to(OrderStatus.CONFIRMED)

        try:
            saved = await self._order_repo.save(order)
        except Exception:
            logger.exception(
                f"Erreur de sauvegarde de la commande pour {order.customer_email}, "
                "restauration du stock"
            )
            order.status = previous_status
            order.total_amount = previous_total
            await self._release_stock(reserved)
            raise

        if not saved:
            logger.error(
                f"Echec de sauvegarde de la commande pour {order.customer_email}, "
                "restauration du stock"
            )
            order.status = previous_status
            order.total_amount = previous_total
            await self._release_stock(reserved)
            return False

        audit_logger.info(
            f"Commande {order.id} confirmee ({len(order.items)} lignes, "
            f"total {order.total_amount})"
        )
        await self._email_service.send_order_confirmation(order)
        return True

    async def ship_order(self, order_id: str) -> bool:
        """
        Marque une commande confirmee comme expediee.

        Args:
            order_id: ID de la commande

        Returns:
            Le resultat de la sauvegarde, False si la commande est absente
            ou n'est pas au statut CONFIRMED
        """
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            logger.warning(f"Commande {order_id} introuvable, expedition impossible")
            return False

        if order.status != OrderStatus.CONFIRMED:
            logger.warning(
                f"Commande {order_id} au statut {order.status.value}, expedition impossible"
            )
            return False

        if not await self._save_transition(order, OrderStatus.SHIPPED):
            return False

        audit_logger.info(f"Commande {order_id} expediee")
        await self._email_service.send_order_shipped_notification(order)
        return True

    async def deliver_order(self, order_id: str) -> bool:
        """
        Marque une commande expediee comme livree.

        Returns:
            Le resultat de la sauvegarde, False si la commande est absente
            ou n'est pas au statut SHIPPED
        """
        order = await self._order_repo.get_by_id(order_id)
        if order is None or order.status != OrderStatus.SHIPPED:
            logger.warning(f"Commande {order_id} non livrable")
            return False

        if not await self._save_transition(order, OrderStatus.DELIVERED):
            return False

        audit_logger.info(f"Commande {order_id} livree")
        return True

    async def cancel_order(self, order_id: str) -> bool:
        """
        Annule une commande non terminee et remet son stock en rayon.

        Le stock n'est restitue que si la commande l'avait reserve
        (statuts CONFIRMED ou SHIPPED).

        Returns:
            True si l'annulation est persistee, False sinon
        """
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            logger.warning(f"Commande {order_id} introuvable, annulation impossible")
            return False

        if not order.can_transition_to(OrderStatus.CANCELLED):
            logger.warning(
                f"Commande {order_id} au statut {order.status.value}, annulation impossible"
            )
            return False

        release_stock = order.has_reserved_stock
        if not await self._save_transition(order, OrderStatus.CANCELLED):
            return False

        if release_stock:
            await self._release_stock(order.items)

        audit_logger.info(f"Commande {order_id} annulee")
        await self._email_service.send_order_cancelled_notification(order)
        return True

    async def restock(self, product_id: str, quantity: int) -> bool:
        """
        Fixe le stock disponible d'un produit.

        Args:
            product_id: ID du produit
            quantity: Nouvelle quantite en stock (positive ou nulle)

        Returns:
            True si le produit existe et a ete mis a jour

        Raises:
            ValueError: si la quantite est negative
        """
        if quantity < 0:
            raise ValueError(f"Quantite de stock negative: {quantity}")

        updated = await self._product_repo.update_stock(product_id, quantity)
        if updated:
            audit_logger.info(f"Stock du produit {product_id} fixe a {quantity}")
        else:
            logger.warning(f"Produit {product_id} introuvable, stock inchange")
        return updated

    async def _check_stock(self, items: list[OrderItem]) -> bool:
        """Verifie que chaque ligne est couverte par le stock courant."""
        for item in items:
            product = await self._product_repo.get_by_id(item.product_id)
            if product is None:
                logger.warning(f"Produit {item.product_id} introuvable")
                return False
            if not product.has_stock(item.quantity):
                logger.info(
                    f"Stock insuffisant pour {product.name}: "
                    f"{product.stock_quantity} < {item.quantity}"
                )
                return False
        return True

    async def _reserve_stock(self, items: list[OrderItem]) -> list[OrderItem] | None:
        """
        Decremente le stock de chaque ligne.

        Returns:
            Les lignes reservees, ou None si une reservation a echoue
            (les lignes deja reservees sont alors restituees)
        """
        reserved: list[OrderItem] = []
        for item in items:
            if not await self._product_repo.decrement_stock(item.product_id, item.quantity):
                logger.warning(
                    f"Reservation du produit {item.product_id} refusee, "
                    f"restitution de {len(reserved)} lignes"
                )
                await self._release_stock(reserved)
                return None
            reserved.append(item)
        return reserved

    async def _release_stock(self, items: list[OrderItem]) -> None:
        """Remet en stock les quantites des lignes donnees."""
        for item in items:
            await self._product_repo.increment_stock(item.product_id, item.quantity)

    async def _save_transition(self, order: Order, target: OrderStatus) -> bool:
        """Applique la transition et sauvegarde ; restaure le statut en cas d'echec."""
        previous_status = order.status
        order.transition_to(target)
        saved = await self._order_repo.save(order)
        if not saved:
            logger.error(f"Echec de sauvegarde de la commande {order.id}")
            order.status = previous_status
        return saved
