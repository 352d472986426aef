"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import ValidationOptions
from .responses import HealthCheckResponse, SummaryItem, ValidationResponse

__all__ = [
    "ValidationOptions",
    "SummaryItem",
    "ValidationResponse",
    "HealthCheckResponse",
]
