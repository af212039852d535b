"""Phone-related domain values."""
from __future__ import annotations

import enum


class PhoneType(str, enum.Enum):
    HOME = "HOME"
    MOBILE = "MOBILE"
    COMMERCIAL = "COMMERCIAL"


PHONE_NUMBER_MIN_LENGTH = 13
PHONE_NUMBER_MAX_LENGTH = 14


def parse_phone_type(value: str | None) -> PhoneType:
    """Accept enum names case-insensitively (``mobile`` -> MOBILE)."""
    candidate = (value or "").strip().upper()
    try:
        return PhoneType(candidate)
    except ValueError:
        allowed = ", ".join(t.value for t in PhoneType)
        raise ValueError(f"Tipo de telefone invalido: {value!r} (use {allowed})") from None
