"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .db import TaskStore
from .errors import (
    TaskError,
    request_validation_handler,
    task_error_handler,
    unhandled_error_handler,
)
from .routers import items
from .services import TaskService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application with its own store, opened for the app's lifetime."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open and initialize the store on startup, close it on shutdown."""
        store = TaskStore(settings.database_path, seed=settings.seed_sample_data)
        store.initialize()
        app.state.task_service = TaskService(store)
        yield
        store.close()
        logger.info("TaskStore closed db=%s", settings.database_path)

    app = FastAPI(
        title=settings.app_name,
        description="Minimal task tracking API",
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.add_exception_handler(TaskError, task_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(items.router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "task-tracker",
            "version": settings.version,
        }

    return app


app = create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    from .logging_setup import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "task_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
