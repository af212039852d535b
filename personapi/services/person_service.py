"""Person use cases: create, look up, list, update and delete records."""

from __future__ import annotations

import logging
from typing import List, Optional

from personapi.mappers.person_mapper import PersonMapper
from personapi.repositories.person_repository import PersonRepository
from personapi.schemas.person import MessageResponseDTO, PersonDTO

logger = logging.getLogger(__name__)


class PersonNotFoundError(Exception):
    """Raised when no person matches the requested identifier."""

    def __init__(self, person_id: int):
        super().__init__(f"Person not found with ID {person_id}")
        self.person_id = person_id
        self.message = str(self)


class PersonService:
    """Orchestrates the mapper and the repository; holds no state of its own."""

    def __init__(
        self,
        repository: Optional[PersonRepository] = None,
        mapper: Optional[PersonMapper] = None,
    ) -> None:
        self.repository = repository or PersonRepository()
        self.mapper = mapper or PersonMapper()

    def create_person(self, person_dto: PersonDTO) -> MessageResponseDTO:
        person_to_save = self.mapper.to_model(person_dto)
        saved_person = self.repository.save(person_to_save)
        logger.info("Created person %s", saved_person.id)
        return self._message_response(saved_person.id, "Created")

    def find_by_id(self, person_id: int) -> PersonDTO:
        person = self._verify_if_exists(person_id)
        return self.mapper.to_dto(person)

    def list_all(self) -> List[PersonDTO]:
        return [self.mapper.to_dto(person) for person in self.repository.find_all()]

    def update_by_id(self, person_id: int, person_dto: PersonDTO) -> MessageResponseDTO:
        self._verify_if_exists(person_id)
        # The request replaces the stored record as a whole; only the id comes from the path.
        person_to_update = self.mapper.to_model(person_dto)
        person_to_update.id = person_id
        updated_person = self.repository.save(person_to_update)
        logger.info("Updated person %s", updated_person.id)
        return self._message_response(updated_person.id, "Updated")

    def delete(self, person_id: int) -> None:
        self._verify_if_exists(person_id)
        self.repository.delete_by_id(person_id)
        logger.info("Deleted person %s", person_id)

    # -------------------------------------- helpers --------------------------------------
    def _verify_if_exists(self, person_id: int):
        person = self.repository.find_by_id(person_id)
        if person is None:
            logger.warning("Person %s not found", person_id)
            raise PersonNotFoundError(person_id)
        return person

    @staticmethod
    def _message_response(person_id: int, verb: str) -> MessageResponseDTO:
        return MessageResponseDTO(message=f"{verb} person with ID {person_id}")
