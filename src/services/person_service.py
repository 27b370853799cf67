"""
Service de gestion des personnes (CRUD).

Delegue la persistance a un IPersonRepository injecte.
"""

from typing import Optional

from loguru import logger

from src.core.entities.person import Person
from src.core.ports.repositories import IPersonRepository


class PersonService:
    """Cas d'utilisation de lecture, creation et suppression des personnes."""

    def __init__(self, person_repo: IPersonRepository) -> None:
        self._person_repo = person_repo

    def get_person(self, person_id: str) -> Optional[Person]:
        """Retourne la personne ou None si elle n'existe pas."""
        return self._person_repo.get_by_id(person_id)

    def create_person(self, person: Person) -> Person:
        """Enregistre une nouvelle personne et la retourne avec son ID."""
        created = self._person_repo.add(person)
        logger.info(f"Personne creee: {created.full_name} (id={created.id})")
        return created

    def remove_person(self, person_id: str) -> bool:
        """Supprime une personne. Retourne False si elle n'existait pas."""
        removed = self._person_repo.delete(person_id)
        if removed:
            logger.info(f"Personne {person_id} supprimee")
        else:
            logger.debug(f"Personne {person_id} absente, rien a supprimer")
        return removed
