#!/usr/bin/env python3
"""
Cadastrar uma pessoa diretamente no banco configurado em DATABASE_URL.

Uso:
  python scripts/add_person.py --first-name Jose --last-name "da Silva" \
      --cpf 549.064.910-06 [--birth-date 01-10-2010] --phone "MOBILE:11 99999-9999"
"""
from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from personapi.db.create_tables import create_all
from personapi.domain.phones import parse_phone_type
from personapi.repositories.person_repository import PersonRepository
from personapi.schemas.person import PersonDTO, PhoneDTO
from personapi.services.person_service import PersonService


def parse_phone(value: str) -> PhoneDTO:
    """``TYPE:NUMBER`` -> PhoneDTO (ex.: ``MOBILE:11 99999-9999``)."""
    kind, sep, number = (value or "").partition(":")
    if not sep:
        raise argparse.ArgumentTypeError("use TIPO:NUMERO (ex.: MOBILE:11 99999-9999)")
    try:
        return PhoneDTO(type=parse_phone_type(kind), number=number.strip())
    except (ValueError, ValidationError) as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Cadastrar pessoa no banco")
    ap.add_argument("--first-name", required=True, help="Nome")
    ap.add_argument("--last-name", required=True, help="Sobrenome")
    ap.add_argument("--cpf", required=True, help="CPF (000.000.000-00)")
    ap.add_argument("--birth-date", help="Data de nascimento dd-MM-yyyy")
    ap.add_argument("--phone", action="append", type=parse_phone, default=[], help="TIPO:NUMERO (repetivel)")
    args = ap.parse_args(argv)

    try:
        dto = PersonDTO(
            first_name=args.first_name,
            last_name=args.last_name,
            cpf=args.cpf,
            birth_date=args.birth_date,
            phones=args.phone,
        )
    except ValidationError as exc:
        raise SystemExit(f"Dados invalidos:\n{exc}")

    create_all()
    repo = PersonRepository()
    if repo.exists_by_cpf(dto.cpf):
        raise SystemExit(f"CPF '{dto.cpf}' ja cadastrado")

    result = PersonService(repository=repo).create_person(dto)
    print(f"OK: {result.message}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
