"""
Couche adaptateurs sortants.

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- notifications/ : Envoi des emails de suivi de commande

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
Cela permet de changer les implémentations sans affecter la logique métier.
"""

from src.adapters.notifications import LoggingEmailService

__all__ = [
    "LoggingEmailService",
]
