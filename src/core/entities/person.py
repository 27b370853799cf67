"""
Entité personne.

Représente un client ou un contact de la boutique, géré par le PersonService.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Person:
    """
    Une personne connue de la boutique.

    Attributs :
        id : Identifiant interne (ID base de données)
        first_name : Prénom
        last_name : Nom de famille
        email : Adresse email de contact
    """

    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Prénom et nom séparés par un espace."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
