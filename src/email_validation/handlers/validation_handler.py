"""HTTP handlers for email validation.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, uploads and downloads.
"""

import shutil
import uuid
from pathlib import Path

from fastapi import HTTPException, UploadFile, status
from fastapi.responses import FileResponse
from loguru import logger
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from email_validation.config import Settings
from email_validation.domain_checker import DomainChecker
from email_validation.dto import HealthCheckResponse, SummaryItem, ValidationOptions, ValidationResponse
from email_validation.entities import ValidationOutcome, media_type_for
from email_validation.errors import EmailValidationError
from email_validation.services import PipelineContext, process_validation_request

SUPPORTED_UPLOAD_EXTENSIONS = (".csv", ".xlsx", ".xls")
DOWNLOAD_PREFIX = "/api/v1/download"


class ValidationHandler:
    """HTTP handlers for the validation endpoints.

    This handler delegates business logic to the pipeline service
    and handles HTTP-specific concerns like:
    - Checking and saving uploads
    - Converting entities to DTOs
    - Setting appropriate status codes and content types

    Uploaded files are kept in the working directory after the request;
    cleaning that directory is left to the deployment.
    """

    def __init__(self, settings: Settings, domain_checker: DomainChecker | None = None) -> None:
        """Initialize the validation handler.

        Args:
            settings: Working directory and pipeline settings (required).
            domain_checker: Shared domain lookup cache for strict validation.
        """
        self._settings = settings
        self._work_dir = Path(settings.work_dir)
        self._domain_checker = domain_checker

    async def validate_emails(
        self,
        first_file: UploadFile | None,
        second_file: UploadFile | None,
        output_format: str,
    ) -> FileResponse:
        """Handle POST /validate-emails requests.

        Returns:
            The generated report as a file download

        Raises:
            HTTPException: 400 on bad input, 500 if the pipeline fails
        """
        outcome = await self._run(first_file, second_file, output_format)
        logger.info(
            f"Returning validation result: {len(outcome.matching_emails)} matching, "
            f"{len(outcome.missing_in_first_file)} missing in first, "
            f"{len(outcome.missing_in_second_file)} missing in second"
        )
        return self._file_response(outcome.output_path)

    async def compare_emails(
        self,
        first_file: UploadFile | None,
        second_file: UploadFile | None,
        output_format: str,
    ) -> ValidationResponse:
        """Handle POST /compare-emails requests.

        Returns:
            ValidationResponse with address lists, report link and summary

        Raises:
            HTTPException: 400 on bad input, 500 if the pipeline fails
        """
        outcome = await self._run(first_file, second_file, output_format)
        return ValidationResponse(
            matching_emails=outcome.matching_emails,
            missing_in_first_file=outcome.missing_in_first_file,
            missing_in_second_file=outcome.missing_in_second_file,
            file_name=outcome.file_name,
            output_file_url=f"{DOWNLOAD_PREFIX}/{outcome.file_name}",
            summary=SummaryItem.from_entity(outcome.summary),
        )

    async def download(self, filename: str) -> FileResponse:
        """Handle GET /download/{filename} requests.

        Raises:
            HTTPException: 400 for names outside the working directory,
                404 if the report does not exist
        """
        if not filename or Path(filename).name != filename or filename.startswith("."):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid file name")

        path = self._work_dir / filename
        if not path.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")

        return self._file_response(path)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        writable = self._work_dir.is_dir() and _is_writable(self._work_dir)
        return HealthCheckResponse(
            status="healthy" if writable else "unhealthy",
            work_dir_writable=writable,
        )

    async def _run(
        self,
        first_file: UploadFile | None,
        second_file: UploadFile | None,
        output_format: str,
    ) -> ValidationOutcome:
        """Check the request, save uploads and run the pipeline."""
        if first_file is None or not first_file.filename:
            logger.warning("First file is missing from request")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="First file is required")
        if second_file is None or not second_file.filename:
            logger.warning("Second file is missing from request")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Second file is required")

        try:
            options = ValidationOptions(output_format=output_format)
        except ValidationError as e:
            logger.warning(f"Invalid output format: {output_format}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Output format must be 'csv' or 'excel'",
            ) from e

        for upload in (first_file, second_file):
            if Path(upload.filename).suffix.lower() not in SUPPORTED_UPLOAD_EXTENSIONS:
                logger.warning(f"Invalid file format: {upload.filename}")
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Invalid file format. Only CSV and Excel files are supported",
                )

        try:
            first_path = await run_in_threadpool(self._save_upload, first_file, "first")
            second_path = await run_in_threadpool(self._save_upload, second_file, "second")
        except OSError as e:
            logger.error(f"Failed to save uploaded file: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to save uploaded file",
            ) from e

        context = PipelineContext.create(settings=self._settings, domain_checker=self._domain_checker)
        try:
            return await run_in_threadpool(
                process_validation_request,
                first_path,
                second_path,
                options.output_format,
                context,
            )
        except EmailValidationError as e:
            logger.error(f"Email validation failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

    def _save_upload(self, upload: UploadFile, label: str) -> Path:
        """Copy an upload into the working directory under a unique name."""
        self._work_dir.mkdir(parents=True, exist_ok=True)
        name = Path(upload.filename).name
        path = self._work_dir / f"{label}_{uuid.uuid4().hex[:8]}_{name}"

        upload.file.seek(0)
        with path.open("wb") as out:
            shutil.copyfileobj(upload.file, out)

        logger.debug(f"Saved {upload.filename} to {path}")
        return path

    @staticmethod
    def _file_response(path: Path) -> FileResponse:
        return FileResponse(
            path,
            media_type=media_type_for(path.suffix),
            filename=path.name,
            headers={"Content-Description": "File Transfer"},
        )


def _is_writable(directory: Path) -> bool:
    probe = directory / f".probe_{uuid.uuid4().hex[:8]}"
    try:
        probe.touch()
        probe.unlink()
    except OSError:
        return False
    return True
