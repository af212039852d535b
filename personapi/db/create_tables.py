"""Create (or recreate) the person/phone tables.

Uso:
  python -m personapi.db.create_tables [--drop]
"""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers Person/Phone on Base.metadata

logger = logging.getLogger(__name__)


def create_all(database_url: str | None = None, *, drop_existing: bool = False) -> None:
    engine = get_engine(database_url)
    if drop_existing:
        logger.warning("Dropping tables on %s", engine.url)
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


def main() -> None:
    ap = argparse.ArgumentParser(description="Create the Person API schema")
    ap.add_argument("--drop", action="store_true", help="Drop existing tables first (destroys data)")
    args = ap.parse_args()
    create_all(drop_existing=args.drop)
    print("Database tables created successfully.")


if __name__ == "__main__":
    try:
        main()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
