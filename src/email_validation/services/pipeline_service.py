"""Pipeline service: end-to-end processing of one validation request.

Flow:
    extract (both files in parallel)
      -> validate (both lists in parallel, each over a worker pool)
      -> compare (single pass)
      -> write report
"""

import time
import uuid
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from loguru import logger

from email_validation.config import Settings, get_settings
from email_validation.domain_checker import DomainChecker
from email_validation.entities import OutputFormat, Source, ValidationOutcome
from email_validation.errors import WriteError
from email_validation.policies import StrictPolicy, build_policy
from email_validation.protocols import ValidationPolicy
from email_validation.utils import format_duration

from .comparison_service import ComparisonService
from .extraction_service import ExtractionService
from .report_service import ReportService
from .validation_service import ValidationService


@dataclass
class PipelineContext:
    """Everything a pipeline run needs from its surroundings.

    Passed in explicitly so the pipeline never reaches for process-wide
    state and can be exercised in isolation.

    Attributes:
        settings: Directories, column and worker limits
        log: Logger (usually a loguru logger bound to a request id)
        domain_checker: Shared, cached domain lookup for strict policies
        policy: Validation policy; None means the shallow default
    """

    settings: Settings = field(default_factory=get_settings)
    log: object = field(default_factory=lambda: logger)
    domain_checker: DomainChecker | None = None
    policy: ValidationPolicy | None = None

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        domain_checker: DomainChecker | None = None,
    ) -> "PipelineContext":
        """Create a context for one request.

        The logger is bound to a fresh request id and the policy is built
        from ``settings.validation_policy``. A strict policy reuses the given
        domain checker so lookups stay cached across requests.
        """
        settings = settings or get_settings()
        if settings.validation_policy == StrictPolicy.name and domain_checker is None:
            domain_checker = DomainChecker(ttl=settings.domain_cache_ttl)

        return cls(
            settings=settings,
            log=logger.bind(request_id=uuid.uuid4().hex[:8]),
            domain_checker=domain_checker,
            policy=build_policy(settings.validation_policy, domain_checker),
        )


class ValidationPipeline:
    """Wires extraction, validation, comparison and reporting together."""

    def __init__(self, context: PipelineContext | None = None) -> None:
        """Initialize the pipeline.

        Args:
            context: Settings, logger and shared collaborators. Defaults to a
                fresh PipelineContext.
        """
        self._context = context or PipelineContext.create()
        log = self._context.log
        settings = self._context.settings

        self._extraction = ExtractionService.create(column=settings.email_column, log=log)
        self._validation = ValidationService.create(
            policy=self._context.policy,
            max_workers=settings.validation_max_workers,
            log=log,
        )
        self._comparison = ComparisonService(log=log)
        self._reports = ReportService.create(log=log)

    @property
    def context(self) -> PipelineContext:
        """Get the pipeline context."""
        return self._context

    def run(
        self,
        first_path: Path,
        second_path: Path,
        output_format: str | OutputFormat = OutputFormat.CSV,
    ) -> ValidationOutcome:
        """Process two address files and write the comparison report.

        Args:
            first_path: First input file (.csv, .xlsx or .xls)
            second_path: Second input file
            output_format: "csv" or "excel"

        Returns:
            ValidationOutcome with address lists, report name and summary

        Raises:
            ValueError: If output_format is not "csv" or "excel"
            UnsupportedFormatError: If an input has an unsupported extension
            ReadError: If an input cannot be read
            WriteError: If the report cannot be written
        """
        output_format = OutputFormat(output_format)
        log = self._context.log
        first_path, second_path = Path(first_path), Path(second_path)

        log.info(f"Starting email validation process for files: {first_path} and {second_path}")
        start = time.perf_counter()

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="extract") as executor:
            first_future = executor.submit(self._extraction.extract_all, first_path)
            second_future = executor.submit(self._extraction.extract_all, second_path)
            wait([first_future, second_future])
        first_emails = first_future.result()
        second_emails = second_future.result()

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="validate") as executor:
            first_future = executor.submit(
                self._validation.validate_batch, first_emails, Source.FIRST_FILE
            )
            second_future = executor.submit(
                self._validation.validate_batch, second_emails, Source.SECOND_FILE
            )
            first_entries = first_future.result()
            second_entries = second_future.result()

        result = self._comparison.compare(first_entries, second_entries)
        summary = result.summary.with_processing_time(time.perf_counter() - start)

        output_path = self._output_path(output_format)
        self._reports.write(output_path, result)

        outcome = ValidationOutcome(
            matching_emails=[entry.original for entry in result.matched],
            missing_in_first_file=[entry.original for entry in result.only_in_second],
            missing_in_second_file=[entry.original for entry in result.only_in_first],
            file_name=output_path.name,
            output_path=output_path,
            summary=summary,
        )

        log.info(
            f"Email validation completed in {format_duration(time.perf_counter() - start)}. "
            f"Results: {len(outcome.matching_emails)} matching, "
            f"{len(outcome.missing_in_first_file)} missing in first, "
            f"{len(outcome.missing_in_second_file)} missing in second"
        )
        return outcome

    def _output_path(self, output_format: OutputFormat) -> Path:
        """Timestamped report path inside the working directory, unique per run."""
        work_dir = Path(self._context.settings.work_dir)
        try:
            work_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(f"failed to create output directory: {e}", {"path": str(work_dir)}) from e

        file_name = (
            f"validation_result_{datetime.now():%Y%m%d_%H%M%S}_{uuid.uuid4().hex[:8]}"
            f"{output_format.extension}"
        )
        return work_dir / file_name


def process_validation_request(
    first_path: Path,
    second_path: Path,
    output_format: str | OutputFormat = OutputFormat.CSV,
    context: PipelineContext | None = None,
) -> ValidationOutcome:
    """Run one validation request with a fresh pipeline.

    See ``ValidationPipeline.run`` for arguments and errors.
    """
    return ValidationPipeline(context).run(first_path, second_path, output_format)
