"""Validation service: classifies addresses one by one or in parallel batches."""

from collections.abc import Sequence
from functools import partial

from loguru import logger

from email_validation.config import settings
from email_validation.entities import ClassifiedEntry, Source
from email_validation.normalization import normalize_email
from email_validation.policies import ShallowPolicy
from email_validation.protocols import ValidationPolicy
from email_validation.utils import log_execution_time, parallel_map


class ValidationService:
    """Turns raw addresses into ClassifiedEntry objects.

    This service depends on the ValidationPolicy PROTOCOL. The default is
    the shallow one-``@`` check; a stricter policy is only used when passed
    in explicitly.

    Example:
        ```python
        service = ValidationService.create()
        entries = service.validate_batch(["a@x.com", "nope"], Source.FIRST_FILE)

        strict = ValidationService.create(policy=StrictPolicy())
        ```
    """

    def __init__(
        self,
        policy: ValidationPolicy | None = None,
        max_workers: int | None = None,
        log=None,
    ) -> None:
        """Initialize the validation service.

        Args:
            policy: Validity strategy. Defaults to ShallowPolicy.
            max_workers: Cap on batch worker threads. Defaults to settings.
            log: Logger to use. Defaults to the loguru logger.
        """
        self._policy = policy or ShallowPolicy()
        self._max_workers = settings.validation_max_workers if max_workers is None else max_workers
        self._log = log or logger

        if self._max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @classmethod
    def create(
        cls,
        policy: ValidationPolicy | None = None,
        max_workers: int | None = None,
        log=None,
    ) -> "ValidationService":
        """Factory method to create ValidationService with sensible defaults.

        Args:
            policy: Validity strategy. If None, uses ShallowPolicy.
            max_workers: Batch worker cap. If None, uses settings.
            log: Logger to use.

        Returns:
            Configured ValidationService instance
        """
        return cls(policy=policy, max_workers=max_workers, log=log)

    def validate(self, address: str, source: Source = Source.FIRST_FILE) -> ClassifiedEntry:
        """Classify a single address. Never raises.

        The normalized key is always computed, even for invalid input, so
        invalid addresses can still be grouped in the comparison.

        Args:
            address: Raw address text
            source: File the address came from

        Returns:
            ClassifiedEntry for the address
        """
        email = address.strip()
        is_valid, is_disposable, reason = self._policy.evaluate(email)

        return ClassifiedEntry(
            original=email,
            source=source,
            normalized_key=normalize_email(address),
            is_valid=is_valid,
            is_disposable=is_disposable,
            invalid_reason=reason,
        )

    def validate_batch(
        self,
        addresses: Sequence[str],
        source: Source = Source.FIRST_FILE,
    ) -> list[ClassifiedEntry]:
        """Classify many addresses across a bounded worker pool.

        Args:
            addresses: Raw addresses
            source: File the addresses came from

        Returns:
            One entry per address, in input order
        """
        self._log.info(f"Validating {len(addresses)} emails from {source.value}")

        with log_execution_time(f"validate_batch({source.value})", self._log):
            self._log.debug(
                f"Using {min(len(addresses), self._max_workers)} workers "
                f"for email validation (policy: {self._policy.name})"
            )
            entries = parallel_map(
                partial(self.validate, source=source),
                addresses,
                max_workers=self._max_workers,
            )

        valid = sum(1 for entry in entries if entry.is_valid)
        disposable = sum(1 for entry in entries if entry.is_disposable)
        self._log.info(
            f"Batch validation completed: {valid}/{len(entries)} valid, {disposable} disposable"
        )
        return entries

    @property
    def policy(self) -> ValidationPolicy:
        """Get the active validation policy."""
        return self._policy

    @property
    def max_workers(self) -> int:
        """Get the batch worker cap."""
        return self._max_workers
