"""Canonical comparison keys for email addresses."""

GMAIL_DOMAIN = "gmail.com"


def normalize_email(address: str) -> str:
    """Map an address to the key used to compare it across files.

    Trims and lowercases. For Gmail addresses the local part additionally
    loses every dot and anything from the first ``+`` onward (unless the
    ``+`` is the first character). Addresses without exactly one ``@`` are
    only trimmed and lowercased.

    Args:
        address: Raw address text

    Returns:
        The normalized key; applying this function again returns it unchanged
    """
    email = address.strip().lower()

    parts = email.split("@")
    if len(parts) == 2 and parts[1] == GMAIL_DOMAIN:
        local = parts[0].replace(".", "")
        plus_index = local.find("+")
        if plus_index > 0:
            local = local[:plus_index]
        return f"{local}@{GMAIL_DOMAIN}"

    return email
