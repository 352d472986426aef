"""Utility modules for the validation pipeline."""

from .parallel import parallel_map
from .timing import format_duration, log_execution_time

__all__ = [
    "format_duration",
    "log_execution_time",
    "parallel_map",
]
