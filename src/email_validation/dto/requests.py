"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from email_validation.entities import OutputFormat


class ValidationOptions(BaseModel):
    """Form options sent alongside the two uploaded files.

    The handler builds this from the multipart form and converts a
    validation failure into a 400 response.
    """

    output_format: OutputFormat = Field(
        OutputFormat.CSV,
        description="Report format: 'csv' or 'excel'",
    )
