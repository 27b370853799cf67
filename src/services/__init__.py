"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- PersonService: person CRUD
- OrderService: order placement, shipping, delivery and cancellation

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/ or adapters/.
"""

from src.services.order_service import OrderService
from src.services.person_service import PersonService

__all__ = [
    "OrderService",
    "PersonService",
]
