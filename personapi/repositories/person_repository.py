"""Data access for Person aggregates backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from personapi.db.models import Person
from personapi.db.session import get_session


class PersonRepository:
    """CRUD helpers wrapping the SQLAlchemy session.

    Phones are loaded together with their owner (``lazy="selectin"``), so the
    returned entities are usable after the session is closed. Without a
    ``database_url`` the one from ``DATABASE_URL`` is used.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def find_by_id(self, person_id: int) -> Optional[Person]:
        with get_session(self.database_url) as session:
            return session.get(Person, person_id)

    def find_all(self) -> list[Person]:
        with get_session(self.database_url) as session:
            return list(session.execute(select(Person).order_by(Person.id)).scalars().all())

    def save(self, person: Person) -> Person:
        """Insert when ``person.id`` is unset, otherwise overwrite the stored row.

        Phone ids are assigned by the database. On insert any incoming phone id
        is dropped. On update the phone list is replaced: phones whose id
        already belongs to this person are updated, every other phone is
        inserted as new and the stored phones left out are deleted as orphans.
        """
        with get_session(self.database_url) as session:
            if person.id is None:
                for phone in person.phones:
                    phone.id = None
                session.add(person)
                entity = person
            else:
                stored = session.get(Person, person.id)
                owned_ids = {p.id for p in stored.phones} if stored is not None else set()
                for phone in person.phones:
                    if phone.id not in owned_ids:
                        phone.id = None
                entity = session.merge(person)
            session.commit()
            session.refresh(entity)
            return entity

    def delete_by_id(self, person_id: int) -> None:
        with get_session(self.database_url) as session:
            entity = session.get(Person, person_id)
            if entity is None:
                return
            # ORM delete so the phone cascade runs even without FK enforcement (SQLite)
            session.delete(entity)
            session.commit()

    def exists_by_cpf(self, cpf: str, exclude_id: int | None = None) -> bool:
        value = (cpf or "").strip()
        if not value:
            return False
        with get_session(self.database_url) as session:
            stmt = select(Person.id).where(Person.cpf == value)
            if exclude_id is not None:
                stmt = stmt.where(Person.id != exclude_id)
            return session.execute(stmt.limit(1)).first() is not None
