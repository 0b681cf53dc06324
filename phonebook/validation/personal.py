"""
Birth date and gender validation.

File: validation/personal.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import re
from datetime import date

from ..errors import InvalidBirthdateError, InvalidGenderError

GENDERS = ("M", "F")

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def validate_birthdate(value: str) -> date:
    """
    Parse an ISO-8601 calendar date (YYYY-MM-DD).

    Raises:
        InvalidBirthdateError: if the value is not a real calendar date
    """
    if not _ISO_DATE.fullmatch(value):
        raise InvalidBirthdateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidBirthdateError(value) from None


def validate_gender(value: str) -> str:
    """
    Accept exactly "M" or "F".

    Raises:
        InvalidGenderError: for any other value
    """
    if value not in GENDERS:
        raise InvalidGenderError(value)
    return value
