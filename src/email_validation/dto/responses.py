"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from email_validation.entities import Summary


class SummaryItem(BaseModel):
    """Summary statistics of one comparison."""

    total_emails_first_file: int = Field(..., description="Addresses read from the first file", ge=0)
    total_emails_second_file: int = Field(..., description="Addresses read from the second file", ge=0)
    valid_emails_first_file: int = Field(..., description="Valid addresses in the first file", ge=0)
    valid_emails_second_file: int = Field(..., description="Valid addresses in the second file", ge=0)
    matching_count: int = Field(..., description="Addresses present in both files", ge=0)
    missing_in_first_count: int = Field(..., description="Addresses only in the second file", ge=0)
    missing_in_second_count: int = Field(..., description="Addresses only in the first file", ge=0)
    disposable_emails_count: int = Field(..., description="Disposable addresses in both files", ge=0)
    processing_time_seconds: float = Field(..., description="Wall time of the request", ge=0.0)

    @classmethod
    def from_entity(cls, summary: Summary) -> "SummaryItem":
        """Build the DTO from the domain summary."""
        return cls(
            total_emails_first_file=summary.total_first,
            total_emails_second_file=summary.total_second,
            valid_emails_first_file=summary.valid_first,
            valid_emails_second_file=summary.valid_second,
            matching_count=summary.matching_count,
            missing_in_first_count=summary.missing_in_first_count,
            missing_in_second_count=summary.missing_in_second_count,
            disposable_emails_count=summary.disposable_count,
            processing_time_seconds=summary.processing_time_seconds,
        )


class ValidationResponse(BaseModel):
    """Response DTO for the JSON comparison endpoint."""

    matching_emails: list[str] = Field(default_factory=list, description="Addresses in both files")
    missing_in_first_file: list[str] = Field(
        default_factory=list,
        description="Addresses only in the second file",
    )
    missing_in_second_file: list[str] = Field(
        default_factory=list,
        description="Addresses only in the first file",
    )
    file_name: str = Field(..., description="Name of the generated report")
    output_file_url: str = Field(..., description="Download URL of the generated report")
    summary: SummaryItem


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    work_dir_writable: bool = Field(..., description="Whether reports can be written")
