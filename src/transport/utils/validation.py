"""Contact detail validation and phone number normalization."""

import re

COUNTRY_CODE = "254"

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# +254XXXXXXXXX, 07XXXXXXXX or 01XXXXXXXX
_PHONE_RE = re.compile(r"(\+254|0)[17]\d{8}")
_WHITESPACE_RE = re.compile(r"\s")


def is_valid_email(email: str) -> bool:
    """Shape check only; no DNS or mailbox verification."""
    return _EMAIL_RE.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    return _PHONE_RE.fullmatch(_WHITESPACE_RE.sub("", phone)) is not None


def sanitize_phone(phone: str) -> str:
    """Convert a Kenyan phone number to international format.

    Values that are neither national (``07…``) nor bare country-code
    (``254…``) numbers are returned with whitespace removed and otherwise
    unchanged.
    """
    cleaned = _WHITESPACE_RE.sub("", phone.strip())
    if cleaned.startswith("0"):
        return f"+{COUNTRY_CODE}{cleaned[1:]}"
    if cleaned.startswith(COUNTRY_CODE):
        return f"+{cleaned}"
    return cleaned
