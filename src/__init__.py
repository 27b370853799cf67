"""
Comptoir - Couche de services pour la gestion des commandes d'une boutique.

Ce package fournit les cas d'utilisation de gestion des personnes (CRUD)
et de passage de commandes (validation du stock, confirmation, expedition).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (cas d'utilisation, orchestration)
- adapters/ : Adaptateurs sortants (notifications)
- infrastructure/ : Persistance SQLite via SQLModel
"""
