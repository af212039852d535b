from __future__ import annotations

import argparse
import importlib.util
from pathlib import Path

import pytest

from personapi.domain.phones import PhoneType
from personapi.repositories.person_repository import PersonRepository

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "add_person.py"


@pytest.fixture(scope="module")
def add_person():
    spec = importlib.util.spec_from_file_location("add_person", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


ARGS = ["--first-name", "Jose", "--last-name", "da Silva", "--cpf", "54906491006", "--birth-date", "01-10-2010"]


def test_parse_phone(add_person):
    phone = add_person.parse_phone("mobile:11 99999-9999")

    assert phone.type is PhoneType.MOBILE
    assert phone.number == "11 99999-9999"


@pytest.mark.parametrize("value", ["11 99999-9999", "FAX:11 99999-9999", "HOME:123"])
def test_parse_phone_rejects_bad_values(add_person, value):
    with pytest.raises(argparse.ArgumentTypeError):
        add_person.parse_phone(value)


def test_main_registers_person(add_person, temp_db, capsys):
    add_person.main(ARGS + ["--phone", "MOBILE:11 99999-9999"])

    assert "OK: Created person with ID 1" in capsys.readouterr().out
    stored = PersonRepository().find_by_id(1)
    assert stored.cpf == "549.064.910-06"
    assert stored.phones[0].number == "11 99999-9999"


def test_main_refuses_duplicate_cpf(add_person, temp_db):
    add_person.main(ARGS + ["--phone", "MOBILE:11 99999-9999"])

    with pytest.raises(SystemExit, match="ja cadastrado"):
        add_person.main(ARGS + ["--phone", "HOME:11 3333-44445"])


def test_main_requires_a_phone(add_person, temp_db):
    with pytest.raises(SystemExit, match="Dados invalidos"):
        add_person.main(ARGS)
