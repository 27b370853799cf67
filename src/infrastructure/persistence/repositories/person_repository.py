"""
Implementation SQLModel du repository Person.

Implemente l'interface IPersonRepository pour la persistance des personnes
dans la base de donnees SQLite via SQLModel.
"""

from typing import Optional

from loguru import logger
from sqlmodel import Session

from src.core.entities.person import Person
from src.core.ports.repositories import IPersonRepository
from src.infrastructure.persistence.models import PersonModel
from src.infrastructure.persistence.repositories.identifiers import parse_id


class SQLModelPersonRepository(IPersonRepository):
    """
    Repository SQLModel pour les personnes.

    Implemente IPersonRepository avec conversion bidirectionnelle
    entre l'entite Person (domaine) et PersonModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: PersonModel) -> Person:
        """Convertit un modele DB en entite domaine."""
        return Person(
            id=str(model.id) if model.id else None,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
        )

    def _to_model(self, entity: Person) -> PersonModel:
        """Convertit une entite domaine en modele DB."""
        model = PersonModel(
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
        )
        model.id = parse_id(entity.id)
        return model

    def get_by_id(self, person_id: str) -> Optional[Person]:
        """Recupere une personne par son ID."""
        pk = parse_id(person_id)
        if pk is None:
            return None
        model = self._session.get(PersonModel, pk)
        if model:
            return self._to_entity(model)
        return None

    def add(self, person: Person) -> Person:
        """Ajoute une personne et retourne l'entite avec son ID."""
        model = self._to_model(person)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        logger.debug(f"Personne inseree id={model.id}")
        return self._to_entity(model)

    def delete(self, person_id: str) -> bool:
        """Supprime une personne par ID. Retourne True si supprimee."""
        pk = parse_id(person_id)
        model = self._session.get(PersonModel, pk) if pk is not None else None
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True
