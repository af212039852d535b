"""Domain helpers for CPF (Cadastro de Pessoas Fisicas) validation."""
from __future__ import annotations

import re

CPF_PATTERN = re.compile(r"\d{3}\.?\d{3}\.?\d{3}-?\d{2}")


def only_digits(value: str | None) -> str:
    return re.sub(r"\D", "", value or "")


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    rest = (total * 10) % 11
    return 0 if rest == 10 else rest


def is_valid_cpf(value: str | None) -> bool:
    """Return True when value is a well-formed CPF with matching check digits."""
    if not value:
        return False
    candidate = value.strip()
    if not CPF_PATTERN.fullmatch(candidate):
        return False
    digits = only_digits(candidate)
    # Sequencias repetidas (000.000.000-00 etc.) passam no calculo mas sao invalidas
    if len(set(digits)) == 1:
        return False
    if _check_digit(digits[:9]) != int(digits[9]):
        return False
    return _check_digit(digits[:10]) == int(digits[10])


def format_cpf(value: str) -> str:
    """Normalize to the punctuated ``000.000.000-00`` form."""
    digits = only_digits(value)
    if len(digits) != 11:
        return value
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"
