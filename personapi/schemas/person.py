"""
Pydantic models exchanged with API clients.

``PersonDTO`` is used both as request body and as response item. Field names
are snake_case in Python and camelCase on the wire (``firstName``,
``birthDate``); both spellings are accepted on input.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from personapi.domain.cpf import format_cpf, is_valid_cpf
from personapi.domain.phones import (
    PHONE_NUMBER_MAX_LENGTH,
    PHONE_NUMBER_MIN_LENGTH,
    PhoneType,
)


class PhoneDTO(BaseModel):
    id: Optional[int] = None
    type: PhoneType = Field(..., examples=["MOBILE"])
    number: str = Field(
        ...,
        min_length=PHONE_NUMBER_MIN_LENGTH,
        max_length=PHONE_NUMBER_MAX_LENGTH,
        examples=["11 99999-9999"],
    )


class PersonDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    first_name: str = Field(..., alias="firstName", min_length=2, max_length=100, examples=["Jose"])
    last_name: str = Field(..., alias="lastName", min_length=2, max_length=100, examples=["da Silva"])
    cpf: str = Field(..., examples=["549.064.910-06"])
    # Texto livre no formato dd-MM-yyyy; a conversao fica a cargo do mapper.
    birth_date: Optional[str] = Field(None, alias="birthDate", examples=["01-10-2010"])
    phones: List[PhoneDTO] = Field(..., min_length=1)

    @field_validator("first_name", "last_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("cpf")
    @classmethod
    def _valid_cpf(cls, value: str) -> str:
        if not is_valid_cpf(value):
            raise ValueError("invalid CPF")
        return format_cpf(value)


class MessageResponseDTO(BaseModel):
    """One-line confirmation returned by create/update."""

    message: str
