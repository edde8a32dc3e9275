"""
Input validation utilities for booking form fields.
"""

import re
from typing import Any, Optional

from utils.constants import MAX_PHONE_DIGITS, MIN_PHONE_DIGITS

# local-part@domain.tld with no whitespace and a single "@"
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def validate_email(email: str) -> bool:
    """
    Validate email address format.

    Args:
        email: Email address string

    Returns:
        True if valid format, False otherwise
    """
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def normalize_phone(phone: str) -> str:
    """Strip every non-digit character from a phone number."""
    if not phone or not isinstance(phone, str):
        return ""
    return NON_DIGIT_PATTERN.sub("", phone)


def validate_phone(phone: str) -> bool:
    """
    Validate phone number length.
    Any formatting is accepted; only the digit count matters.

    Args:
        phone: Phone number string, e.g. "+91 (123) 456-7890"

    Returns:
        True if it holds 7 to 15 digits, False otherwise
    """
    digits = normalize_phone(phone)
    return MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS


def parse_party_size(value: Any) -> Optional[int]:
    """
    Coerce a party size coming from a form field into an int.

    Accepts ints, integral floats and integer strings ("3", " 4 ").

    Returns:
        The integer value, or None if the input is not an integer
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            return None
    return None


def sanitize_text(text: str, max_length: Optional[int] = None) -> str:
    """
    Sanitize free-text user input.

    Args:
        text: Input text
        max_length: Optional maximum length

    Returns:
        Sanitized text
    """
    if not text:
        return ""

    # Remove control characters except newlines and tabs
    sanitized = re.sub(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]", "", str(text))
    sanitized = sanitized.strip()

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized
