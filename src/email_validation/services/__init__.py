"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (File Access)

Usage:
    ```python
    from email_validation.services import process_validation_request

    outcome = process_validation_request("first.csv", "second.xlsx", "excel")
    print(outcome.file_name, outcome.summary.matching_count)
    ```
"""

from .comparison_service import ComparisonService, compare_entries
from .extraction_service import ExtractionService
from .pipeline_service import PipelineContext, ValidationPipeline, process_validation_request
from .report_service import ReportService
from .validation_service import ValidationService

__all__ = [
    "ComparisonService",
    "ExtractionService",
    "PipelineContext",
    "ReportService",
    "ValidationPipeline",
    "ValidationService",
    "compare_entries",
    "process_validation_request",
]
