"""SQLAlchemy models for people and their phones."""
from __future__ import annotations

from sqlalchemy import (
    Column,
    Date,
    Enum,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from personapi.domain.phones import PhoneType

from .session import Base


class Person(Base):
    __tablename__ = "person"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    cpf = Column(String(14), unique=True, nullable=False)
    birth_date = Column(Date, nullable=True)

    phones = relationship(
        "Phone",
        back_populates="person",
        cascade="all,delete-orphan",
        order_by="Phone.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"Person(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"


class Phone(Base):
    __tablename__ = "phone"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(Enum(PhoneType, name="phone_type"), nullable=False)
    number = Column(String(14), nullable=False)
    person_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), nullable=False)

    person = relationship("Person", back_populates="phones")

    def __repr__(self) -> str:
        return f"Phone(id={self.id!r}, type={self.type!r}, number={self.number!r})"
