"""Email Validation - compare and validate email lists from two files.

This package provides a layered architecture for email list comparison:

Layers:
    - protocols: Interface contracts (AddressExtractor, ValidationPolicy, ReportWriter)
    - repositories: CSV/Excel readers and report writers
    - services: Extraction, validation, comparison, reporting and the pipeline
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from email_validation.services import process_validation_request

    outcome = process_validation_request("a.csv", "b.xlsx", "excel")
    print(outcome.output_path)
    ```

For HTTP API:
    ```python
    from email_validation.api.app import app
    ```
"""

from email_validation.config import Settings, get_settings, settings
from email_validation.entities import (
    ClassifiedEntry,
    ComparisonResult,
    OutputFormat,
    Source,
    Summary,
    ValidationOutcome,
)
from email_validation.errors import EmailValidationError, ReadError, UnsupportedFormatError, WriteError
from email_validation.normalization import normalize_email
from email_validation.protocols import AddressExtractor, ReportWriter, ValidationPolicy
from email_validation.services import (
    ComparisonService,
    ExtractionService,
    ReportService,
    ValidationPipeline,
    ValidationService,
    process_validation_request,
)

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    "Settings",
    # Protocols (interfaces)
    "AddressExtractor",
    "ValidationPolicy",
    "ReportWriter",
    # Services (business logic)
    "ExtractionService",
    "ValidationService",
    "ComparisonService",
    "ReportService",
    "ValidationPipeline",
    "process_validation_request",
    # Entities (domain models)
    "ClassifiedEntry",
    "ComparisonResult",
    "OutputFormat",
    "Source",
    "Summary",
    "ValidationOutcome",
    # Errors
    "EmailValidationError",
    "ReadError",
    "UnsupportedFormatError",
    "WriteError",
    "normalize_email",
]
