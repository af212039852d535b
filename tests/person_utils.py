"""Fake people/phones shared by the test modules."""
from __future__ import annotations

from datetime import date

from personapi.db.models import Person, Phone
from personapi.domain.phones import PhoneType
from personapi.schemas.person import PersonDTO, PhoneDTO

FIRST_NAME = "Jose"
LAST_NAME = "da Silva"
CPF = "549.064.910-06"
OTHER_CPF = "111.444.777-35"
PERSON_ID = 1
BIRTH_DATE = date(2010, 10, 1)
BIRTH_DATE_TEXT = "01-10-2010"

PHONE_ID = 1
PHONE_TYPE = PhoneType.MOBILE
PHONE_NUMBER = "11 99999-9999"


def create_fake_phone_dto(**overrides) -> PhoneDTO:
    data = {"id": PHONE_ID, "type": PHONE_TYPE, "number": PHONE_NUMBER}
    data.update(overrides)
    return PhoneDTO(**data)


def create_fake_phone_entity(**overrides) -> Phone:
    data = {"id": PHONE_ID, "type": PHONE_TYPE, "number": PHONE_NUMBER}
    data.update(overrides)
    return Phone(**data)


def create_fake_dto(**overrides) -> PersonDTO:
    data = {
        "first_name": FIRST_NAME,
        "last_name": LAST_NAME,
        "cpf": CPF,
        "birth_date": BIRTH_DATE_TEXT,
        "phones": [create_fake_phone_dto()],
    }
    data.update(overrides)
    return PersonDTO(**data)


def create_fake_entity(**overrides) -> Person:
    data = {
        "id": PERSON_ID,
        "first_name": FIRST_NAME,
        "last_name": LAST_NAME,
        "cpf": CPF,
        "birth_date": BIRTH_DATE,
        "phones": [create_fake_phone_entity()],
    }
    data.update(overrides)
    return Person(**data)


def as_json(dto: PersonDTO) -> dict:
    return dto.model_dump(mode="json", by_alias=True, exclude_none=True)
