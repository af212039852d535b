"""Database layer: engine/session helpers and the Person/Phone models."""

from .session import Base, get_engine, get_session
from .models import Person, Phone

__all__ = ["Base", "get_engine", "get_session", "Person", "Phone"]
