"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Handler and shared collaborators stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from loguru import logger

from email_validation.cache import ExpiringCache
from email_validation.config import Settings
from email_validation.domain_checker import DomainChecker
from email_validation.handlers import ValidationHandler
from email_validation.logging_config import setup_logging


def get_handler(request: Request) -> ValidationHandler:
    """Dependency injection for ValidationHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ValidationHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "validation_handler", None)
    if handler is None:
        raise RuntimeError("ValidationHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(settings: Settings):
    """Build the lifespan context manager for an app using ``settings``."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for FastAPI app.

        Initializes, in order:
        1. Logging (stderr + daily file in settings.log_dir)
        2. Working directory for uploads and reports
        3. Shared domain lookup cache
        4. Handler - stored in app.state.validation_handler

        Cleanup:
            Removes everything from app.state on shutdown
        """
        setup_logging(level=settings.log_level, log_dir=settings.log_dir)
        Path(settings.work_dir).mkdir(parents=True, exist_ok=True)

        domain_checker = DomainChecker(cache=ExpiringCache(), ttl=settings.domain_cache_ttl)
        app.state.domain_checker = domain_checker
        app.state.validation_handler = ValidationHandler(settings=settings, domain_checker=domain_checker)

        logger.info("Email Validation API starting up")
        logger.info(f"Working directory: {Path(settings.work_dir).resolve()}")
        logger.info(f"Validation policy: {settings.validation_policy}")

        yield

        del app.state.validation_handler
        del app.state.domain_checker
        logger.info("Email Validation API shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[ValidationHandler, Depends(get_handler)]
