"""
Container d'injection de dependances via dependency-injector.

Assemble la configuration, le logging, la base SQLite, les repositories SQLModel,
le service d'email et les services applicatifs.
"""

from dependency_injector import containers, providers

from .adapters.notifications import LoggingEmailService
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelOrderRepository,
    SQLModelPersonRepository,
    SQLModelProductRepository,
)
from .logging_config import configure_logging
from .services.order_service import OrderService
from .services.person_service import PersonService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.init_resources()  # Logging + creation des tables
        order_service = container.order_service()
        await order_service.place_order(order)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Logging - Resource initialisee une fois
    logging = providers.Resource(configure_logging, settings=config)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories
    person_repository = providers.Factory(
        SQLModelPersonRepository,
        session=session,
    )
    product_repository = providers.Factory(
        SQLModelProductRepository,
        session=session,
    )
    order_repository = providers.Factory(
        SQLModelOrderRepository,
        session=session,
    )

    # Notifications (stateless - Singleton)
    email_service = providers.Singleton(
        LoggingEmailService,
        sender=config.provided.sender_email,
        shop_name=config.provided.shop_name,
    )

    # Services
    person_service = providers.Factory(
        PersonService,
        person_repo=person_repository,
    )
    order_service = providers.Factory(
        OrderService,
        order_repo=order_repository,
        product_repo=product_repository,
        email_service=email_service,
    )
