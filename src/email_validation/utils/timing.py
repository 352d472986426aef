"""Timing helpers shared by the pipeline stages and the HTTP middleware."""

import time
from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger as default_logger


def format_duration(seconds: float) -> str:
    """Format a duration in a human-readable form.

    Args:
        seconds: Elapsed time in seconds

    Returns:
        e.g. "850 µs", "12.40 ms", "3.25 s" or "2m 5.00s"
    """
    if seconds < 0.001:
        return f"{int(seconds * 1_000_000)} µs"
    if seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    if seconds < 60:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - minutes * 60:.2f}s"


@contextmanager
def log_execution_time(label: str, log=None) -> Iterator[None]:
    """Log DEBUG start/finish lines around a block, with its duration."""
    log = log or default_logger
    start = time.perf_counter()
    log.debug(f"Starting {label}")
    try:
        yield
    finally:
        log.debug(f"Completed {label} in {format_duration(time.perf_counter() - start)}")
