"""
Tests for validation policies and the validation service.
"""

import pytest

from email_validation.domain_checker import DomainChecker
from email_validation.entities import Source
from email_validation.policies import (
    AT_SIGN_REASON,
    DOMAIN_REASON,
    EMPTY_REASON,
    FORMAT_REASON,
    ShallowPolicy,
    StrictPolicy,
    build_policy,
    is_disposable_domain,
)
from email_validation.protocols import ValidationPolicy
from email_validation.services import ValidationService


@pytest.fixture
def service():
    """Shallow validation service with a small pool."""
    return ValidationService.create(max_workers=4)


def test_valid_address(service):
    """A plain address is valid and keeps its trimmed original text."""
    entry = service.validate("  User@Example.com ", Source.SECOND_FILE)

    assert entry.original == "User@Example.com"
    assert entry.normalized_key == "user@example.com"
    assert entry.source is Source.SECOND_FILE
    assert entry.is_valid is True
    assert entry.is_disposable is False
    assert entry.invalid_reason is None


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("", EMPTY_REASON),
        ("   ", EMPTY_REASON),
        ("no-at-sign", AT_SIGN_REASON),
        ("a@b@c.com", AT_SIGN_REASON),
    ],
)
def test_invalid_addresses(service, raw, reason):
    """Empty input and wrong @ counts are rejected with a reason."""
    entry = service.validate(raw)
    assert entry.is_valid is False
    assert entry.invalid_reason == reason


def test_invalid_address_still_gets_a_key(service):
    """Invalid addresses are normalized so they can be compared."""
    entry = service.validate("  Not@Valid@X.com ")
    assert entry.normalized_key == "not@valid@x.com"


def test_shallow_policy_accepts_odd_but_single_at(service):
    """The default check only counts @ signs."""
    assert service.validate("@").is_valid is True
    assert service.validate("a b@c").is_valid is True


@pytest.mark.parametrize("max_workers", [1, 2, 10, 100])
def test_validate_batch_preserves_order(max_workers):
    """Batch output is one entry per input, in input order."""
    addresses = [f"user{i}@example.com" if i % 3 else f"broken{i}" for i in range(57)]
    entries = ValidationService.create(max_workers=max_workers).validate_batch(
        addresses, Source.FIRST_FILE
    )

    assert [entry.original for entry in entries] == addresses
    assert [entry.is_valid for entry in entries] == [bool(i % 3) for i in range(57)]
    assert all(entry.source is Source.FIRST_FILE for entry in entries)


def test_validate_batch_empty(service):
    """An empty batch returns an empty list."""
    assert service.validate_batch([], Source.SECOND_FILE) == []


def test_service_rejects_zero_workers():
    """max_workers must be positive."""
    with pytest.raises(ValueError):
        ValidationService(max_workers=0)


def test_policies_satisfy_protocol():
    """Both policies are structural ValidationPolicy implementations."""
    assert isinstance(ShallowPolicy(), ValidationPolicy)
    assert isinstance(StrictPolicy(), ValidationPolicy)


def test_strict_policy_format_and_disposable():
    """The strict policy checks the format and flags throwaway domains."""
    policy = StrictPolicy()

    assert policy.evaluate("user@example.com") == (True, False, None)
    assert policy.evaluate("a b@example.com") == (False, False, FORMAT_REASON)
    assert policy.evaluate("user@-bad.com") == (False, False, FORMAT_REASON)
    assert policy.evaluate("user@Mailinator.com") == (True, True, None)
    assert policy.evaluate("") == (False, False, EMPTY_REASON)
    assert policy.evaluate("x@y@z.com") == (False, False, AT_SIGN_REASON)


def test_strict_policy_domain_lookup():
    """With a domain checker, unresolvable domains are invalid."""
    checker = DomainChecker(ttl=60, resolver=lambda domain: domain == "example.com")
    policy = StrictPolicy(domain_checker=checker)

    assert policy.evaluate("user@example.com") == (True, False, None)
    assert policy.evaluate("user@nowhere.test") == (False, False, DOMAIN_REASON)


def test_service_with_strict_policy_counts_disposable():
    """A service built with the strict policy marks disposable entries."""
    service = ValidationService.create(policy=StrictPolicy(), max_workers=2)
    entries = service.validate_batch(["a@yopmail.com", "b@example.com"], Source.FIRST_FILE)

    assert [entry.is_disposable for entry in entries] == [True, False]
    assert all(entry.is_valid for entry in entries)


def test_is_disposable_domain():
    """Domain matching ignores case and surrounding whitespace."""
    assert is_disposable_domain(" TempMail.com ") is True
    assert is_disposable_domain("example.com") is False


def test_build_policy():
    """Policies are built from their configured names."""
    assert isinstance(build_policy("shallow"), ShallowPolicy)
    assert isinstance(build_policy("strict"), StrictPolicy)
    with pytest.raises(ValueError):
        build_policy("paranoid")


def test_validate_batch_original_is_trimmed_input(service):
    """The original text is the input without surrounding whitespace."""
    addresses = ["  padded@x.com", "plain@x.com", "\ttabbed@x.com \n"]
    entries = service.validate_batch(addresses, Source.SECOND_FILE)
    assert [entry.original for entry in entries] == [a.strip() for a in addresses]
