"""Request logging middleware."""

import time

from fastapi import Request
from loguru import logger

from email_validation.utils import format_duration


async def log_requests(request: Request, call_next):
    """Log each request and the status and duration of its response."""
    start = time.perf_counter()
    path = request.url.path

    params = ", ".join(f"{key}: {value}" for key, value in request.query_params.items())
    logger.info(f"API Request: {request.method} {path} [{params}]")

    response = await call_next(request)

    logger.info(
        f"API Response: {path} [{response.status_code}] "
        f"in {format_duration(time.perf_counter() - start)}"
    )
    return response
