"""
Per-field validation rules for the registration form.

Every validator is total: it never raises and returns an empty string when
the value is valid, or a human-readable message when it is not.
"""

import re
from datetime import datetime
from typing import Optional

from registration.core.models import FormValues
from registration.core.schema import ValidationResult

MIN_AGE = 13

# Loose shape check, not RFC 5322
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"(\+358|0)[0-9]{6,12}")
PHONE_SEPARATORS = re.compile(r"[\s-]")
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_full_name(value: str) -> str:
    if not value:
        return "Please enter your full name (first and last)."
    parts = value.split()
    if len(parts) < 2:
        return "Please include at least two names (e.g., first and last)."
    for part in parts:
        if len(part) < 2:
            return "Each name in your full name must be at least 2 characters."
    return ""


def validate_email(value: str) -> str:
    if not value:
        return "Please enter your email address."
    if not EMAIL_PATTERN.fullmatch(value):
        return "That doesn't look like a valid email address."
    return ""


def normalize_phone(value: str) -> str:
    """Drop whitespace and hyphens."""
    return PHONE_SEPARATORS.sub("", value)


def validate_phone(value: str) -> str:
    if not value:
        return "Please enter your phone number."
    if not PHONE_PATTERN.fullmatch(normalize_phone(value)):
        return ("Phone must start with +358 or 0 and contain 6–12 digits after that "
                "(e.g., +358401234567 or 0401234567).")
    return ""


def parse_birth_date(value: str) -> Optional[datetime]:
    """Parse an ISO calendar date as local midnight, or None if unparseable."""
    if not ISO_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None


def age_on(birth: datetime, now: datetime) -> int:
    """Whole years between birth and now; a matching month and day counts as a birthday."""
    age = now.year - birth.year
    if (now.month, now.day) < (birth.month, birth.day):
        age -= 1
    return age


def validate_birth_date(value: str, now: Optional[datetime] = None) -> str:
    if not value:
        return "Please provide your birth date."
    birth = parse_birth_date(value)
    if birth is None:
        return "Invalid date format."
    if now is None:
        now = datetime.now()
    if birth > now:
        return "Birth date cannot be in the future."
    if age_on(birth, now) < MIN_AGE:
        return f"You must be at least {MIN_AGE} years old to register."
    return ""


def validate_terms(checked: bool) -> str:
    return "" if checked else "You must accept the terms to continue."


def validate_all(values: FormValues, now: Optional[datetime] = None) -> ValidationResult:
    """
    Run every field validator once.

    There is no short-circuit, so each field's entry reflects this pass even
    when an earlier field already failed.
    """
    if now is None:
        now = datetime.now()
    return ValidationResult(
        full_name=validate_full_name(values.full_name),
        email=validate_email(values.email),
        phone=validate_phone(values.phone),
        birth_date=validate_birth_date(values.birth_date, now),
        terms=validate_terms(values.terms),
    )
