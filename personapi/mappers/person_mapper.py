"""Conversion between PersonDTO (wire) and Person (ORM entity)."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from personapi.core.config import get_settings
from personapi.db.models import Person, Phone
from personapi.schemas.person import PersonDTO, PhoneDTO


class InvalidBirthDateError(ValueError):
    """Raised when the birth date text does not match the configured format."""

    def __init__(self, value: str, date_format: str):
        super().__init__(f"Invalid birth date {value!r}, expected format {date_format}")
        self.value = value
        self.date_format = date_format


class PersonMapper:
    def __init__(self, date_format: Optional[str] = None) -> None:
        self.date_format = date_format or get_settings().birth_date_format

    def parse_birth_date(self, value: Optional[str]) -> Optional[date]:
        text = (value or "").strip()
        if not text:
            return None
        try:
            return datetime.strptime(text, self.date_format).date()
        except ValueError:
            raise InvalidBirthDateError(text, self.date_format) from None

    def format_birth_date(self, value: Optional[date]) -> Optional[str]:
        return value.strftime(self.date_format) if value else None

    def to_model(self, dto: PersonDTO) -> Person:
        """Build a transient entity; the caller decides whether it is an insert or update."""
        return Person(
            id=dto.id,
            first_name=dto.first_name,
            last_name=dto.last_name,
            cpf=dto.cpf,
            birth_date=self.parse_birth_date(dto.birth_date),
            phones=[Phone(id=p.id, type=p.type, number=p.number) for p in dto.phones],
        )

    def to_dto(self, entity: Person) -> PersonDTO:
        # Stored rows were validated on the way in.
        return PersonDTO.model_construct(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            cpf=entity.cpf,
            birth_date=self.format_birth_date(entity.birth_date),
            phones=[PhoneDTO.model_construct(id=p.id, type=p.type, number=p.number) for p in entity.phones],
        )
