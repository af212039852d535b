"""
FastAPI application for the Person API.

Run with::

    uvicorn personapi.app:app --reload
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from personapi.core.config import Settings, get_settings
from personapi.core.logging_config import setup_logging
from personapi.db.create_tables import create_all
from personapi.mappers.person_mapper import InvalidBirthDateError, PersonMapper
from personapi.repositories.person_repository import PersonRepository
from personapi.routers import people as people_router
from personapi.services.person_service import PersonNotFoundError, PersonService

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(PersonNotFoundError)
    async def _person_not_found(request: Request, exc: PersonNotFoundError):
        return JSONResponse({"detail": exc.message}, status_code=404)

    @app.exception_handler(InvalidBirthDateError)
    async def _invalid_birth_date(request: Request, exc: InvalidBirthDateError):
        return JSONResponse({"detail": str(exc)}, status_code=400)

    @app.exception_handler(IntegrityError)
    async def _integrity_error(request: Request, exc: IntegrityError):
        logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse({"detail": "Request conflicts with an existing record"}, status_code=409)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if settings.auto_create_schema:
            create_all(settings.database_url)
        yield

    app = FastAPI(title="Person API", version="1.0.0", lifespan=lifespan)
    app.state.person_service = PersonService(
        repository=PersonRepository(settings.database_url),
        mapper=PersonMapper(settings.birth_date_format),
    )
    _register_error_handlers(app)
    app.include_router(people_router.router)
    logger.info("Person API ready (env=%s)", settings.app_env)
    return app


app = create_app()
