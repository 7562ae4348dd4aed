"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sprintsync import __version__
from sprintsync.api.dependencies import close_task_store, init_task_store
from sprintsync.api.models import APIResponse
from sprintsync.api.routes import integrations, projects
from sprintsync.config import Settings
from sprintsync.task_store import ProjectNotFoundError, TaskStoreError
from sprintsync.youtrack import DecodeError, InvalidInputError, UpstreamError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger("sprintsync.api")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    db_path = app.state.db_path or Settings.from_env().db_path
    init_task_store(db_path)
    logger.info("Task store opened at %s", db_path)

    yield

    close_task_store()


def create_app(db_path: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite path for the task store. Defaults to SPRINTSYNC_DB_PATH.
    """
    app = FastAPI(
        title="sprintsync API",
        description="Sync open YouTrack sprint issues into Todo tasks",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.db_path = db_path

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(_request: Request, exc: InvalidInputError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(ProjectNotFoundError)
    async def project_not_found_handler(
        _request: Request, exc: ProjectNotFoundError
    ) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(_request: Request, exc: UpstreamError) -> JSONResponse:
        logger.warning("YouTrack upstream error: %s", exc)
        return _error_response(status.HTTP_502_BAD_GATEWAY, str(exc))

    @app.exception_handler(DecodeError)
    async def decode_error_handler(_request: Request, exc: DecodeError) -> JSONResponse:
        logger.warning("YouTrack decode error: %s", exc)
        return _error_response(status.HTTP_502_BAD_GATEWAY, str(exc))

    @app.exception_handler(TaskStoreError)
    async def task_store_error_handler(_request: Request, exc: TaskStoreError) -> JSONResponse:
        logger.error("Task store error: %s", exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    # Include routers
    app.include_router(projects.router, prefix="/api/v1")
    app.include_router(integrations.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
