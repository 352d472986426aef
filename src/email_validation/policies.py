"""
Validation policies.

``ShallowPolicy`` is what the service runs by default: an address is valid
when it contains exactly one ``@``. ``StrictPolicy`` carries the richer
checks (format regex, disposable domains, domain lookup) and is only used
when a caller passes it in explicitly.
"""

import re

from email_validation.domain_checker import DomainChecker

EMPTY_REASON = "Email cannot be empty"
AT_SIGN_REASON = "Email must contain exactly one @ symbol"
FORMAT_REASON = "Email format is invalid"
DOMAIN_REASON = "Email domain does not resolve"

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

DISPOSABLE_DOMAINS = frozenset(
    {
        "mailinator.com",
        "tempmail.com",
        "temp-mail.org",
        "guerrillamail.com",
        "10minutemail.com",
        "yopmail.com",
        "sharklasers.com",
        "throwawaymail.com",
        "dispostable.com",
        "mailnesia.com",
        "mailcatch.com",
        "trashmail.com",
        "getnada.com",
        "temp-mail.ru",
        "fakeinbox.com",
        "tempinbox.com",
        "emailfake.com",
    }
)


def is_disposable_domain(domain: str, domains: frozenset[str] = DISPOSABLE_DOMAINS) -> bool:
    """Check if a domain is a known disposable email provider."""
    return domain.strip().lower() in domains


class ShallowPolicy:
    """Accepts any non-empty address with exactly one ``@``."""

    name = "shallow"

    def evaluate(self, email: str) -> tuple[bool, bool, str | None]:
        if not email:
            return False, False, EMPTY_REASON
        if email.count("@") != 1:
            return False, False, AT_SIGN_REASON
        return True, False, None


class StrictPolicy:
    """Format, disposable-domain and optional domain-resolution checks.

    Disposable addresses stay valid; they are only flagged.
    """

    name = "strict"

    def __init__(
        self,
        domain_checker: DomainChecker | None = None,
        disposable_domains: frozenset[str] = DISPOSABLE_DOMAINS,
    ) -> None:
        """
        Initialize the strict policy.

        Args:
            domain_checker: If given, the domain must resolve for the address
                to be valid. If None, no lookup is made.
            disposable_domains: Domains flagged as disposable.
        """
        self._domain_checker = domain_checker
        self._disposable_domains = disposable_domains

    def evaluate(self, email: str) -> tuple[bool, bool, str | None]:
        if not email:
            return False, False, EMPTY_REASON
        if email.count("@") != 1:
            return False, False, AT_SIGN_REASON
        if not EMAIL_PATTERN.match(email):
            return False, False, FORMAT_REASON

        domain = email.split("@", 1)[1]
        disposable = is_disposable_domain(domain, self._disposable_domains)

        if self._domain_checker is not None and not self._domain_checker.has_mx_record(domain):
            return False, disposable, DOMAIN_REASON

        return True, disposable, None


def build_policy(name: str, domain_checker: DomainChecker | None = None) -> ShallowPolicy | StrictPolicy:
    """Build a policy from its configured name ("shallow" or "strict").

    Raises:
        ValueError: If the name is unknown
    """
    if name == ShallowPolicy.name:
        return ShallowPolicy()
    if name == StrictPolicy.name:
        return StrictPolicy(domain_checker=domain_checker)
    raise ValueError(f"unknown validation policy: {name}")
