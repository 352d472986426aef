#!/usr/bin/env python3
"""
Demo script for email validation.

This script writes two small contact lists (one CSV, one Excel workbook),
compares them and prints what ended up where.
"""

import csv
import tempfile
import time
from pathlib import Path

from openpyxl import Workbook

from email_validation.config import Settings
from email_validation.entities import Source
from email_validation.logging_config import setup_logging
from email_validation.normalization import normalize_email
from email_validation.policies import StrictPolicy
from email_validation.services import PipelineContext, ValidationService, process_validation_request

FIRST_LIST = [
    "alice@example.com",
    "John.Doe@gmail.com",
    "bob@example.com",
    "not-an-email",
    "carol@mailinator.com",
]

SECOND_LIST = [
    "johndoe+newsletter@GMAIL.com",
    "bob@example.com",
    "dave@example.org",
    "eve@@example.org",
]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def write_inputs(directory: Path) -> tuple[Path, Path]:
    """Write the demo lists as a CSV file and an Excel workbook."""
    first = directory / "crm_export.csv"
    with first.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["email", "name"])
        for email in FIRST_LIST:
            writer.writerow([email, email.split("@")[0]])

    second = directory / "newsletter.xlsx"
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(["Email"])
    for email in SECOND_LIST:
        sheet.append([email])
    workbook.save(second)

    return first, second


def demo_normalization() -> None:
    """Demonstrate comparison keys."""
    print_section("Normalization")

    for email in ["  Alice@Example.COM ", "John.Doe@gmail.com", "johndoe+newsletter@GMAIL.com"]:
        print(f"  {email!r:<36} -> {normalize_email(email)}")


def demo_policies() -> None:
    """Demonstrate shallow and strict validation."""
    print_section("Validation Policies")

    shallow = ValidationService.create(max_workers=4)
    strict = ValidationService.create(policy=StrictPolicy(), max_workers=4)
    samples = ["bob@example.com", "not-an-email", "a b@example.com", "carol@mailinator.com"]

    print(f"\n{'Email':<26} {'Shallow':<10} {'Strict':<10} {'Disposable':<12}")
    print("-" * 70)
    for email, loose, tight in zip(
        samples,
        shallow.validate_batch(samples, Source.FIRST_FILE),
        strict.validate_batch(samples, Source.FIRST_FILE),
    ):
        print(
            f"{email:<26} "
            f"{'valid' if loose.is_valid else 'invalid':<10} "
            f"{'valid' if tight.is_valid else 'invalid':<10} "
            f"{'yes' if tight.is_disposable else 'no':<12}"
        )


def demo_comparison(work_dir: Path) -> None:
    """Demonstrate a full comparison request."""
    print_section("Comparison")

    first, second = write_inputs(work_dir)
    settings = Settings(work_dir=work_dir / "reports", log_dir=work_dir / "logs")
    context = PipelineContext.create(settings=settings)

    for output_format in ("csv", "excel"):
        start = time.time()
        outcome = process_validation_request(first, second, output_format, context)
        duration = (time.time() - start) * 1000

        print(f"\n📄 {output_format} report: {outcome.output_path} ({duration:.2f}ms)")

    print("\n✓ Matching:")
    for email in outcome.matching_emails:
        print(f"  {email}")
    print("\n✗ Missing in first file:")
    for email in outcome.missing_in_first_file:
        print(f"  {email}")
    print("\n✗ Missing in second file:")
    for email in outcome.missing_in_second_file:
        print(f"  {email}")

    print("\n📊 Summary:")
    for label, value in outcome.summary.metrics():
        print(f"  {label:<32} {value}")


def main() -> None:
    """Run all demos."""
    setup_logging(level="WARNING")

    print("\n🚀 Email Validation Demo")
    print("=" * 70)
    print("This demo compares a CSV export with an Excel newsletter list")

    try:
        with tempfile.TemporaryDirectory(prefix="email-validation-demo-") as tmp:
            demo_normalization()
            demo_policies()
            demo_comparison(Path(tmp))

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except Exception as e:
        print(f"\n❌ Error: {e}")


if __name__ == "__main__":
    main()
