from __future__ import annotations

from typing import List

from fastapi import APIRouter, Request, Response, status

from personapi.schemas.person import MessageResponseDTO, PersonDTO
from personapi.services.person_service import PersonService

router = APIRouter(prefix="/api/v1/people", tags=["people"])


def _get_person_service(request: Request) -> PersonService:
    svc = getattr(getattr(request.app, "state", None), "person_service", None)
    if not svc:
        raise RuntimeError("PersonService nao configurado")
    return svc


@router.post("", response_model=MessageResponseDTO, status_code=status.HTTP_201_CREATED)
def create_person(person: PersonDTO, request: Request):
    return _get_person_service(request).create_person(person)


@router.get("", response_model=List[PersonDTO])
def list_people(request: Request):
    return _get_person_service(request).list_all()


@router.get("/{person_id}", response_model=PersonDTO)
def get_person(person_id: int, request: Request):
    return _get_person_service(request).find_by_id(person_id)


@router.put("/{person_id}", response_model=MessageResponseDTO)
def update_person(person_id: int, person: PersonDTO, request: Request):
    return _get_person_service(request).update_by_id(person_id, person)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: int, request: Request):
    _get_person_service(request).delete(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
