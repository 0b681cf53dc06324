"""
Empty-on-failure coercion for validated contact fields.

A failed validation never aborts the enclosing add/edit: the value is
replaced by an empty string and a warning is logged. Blank input means
"no data" and is stored as-is without a warning.

File: validation/coerce.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import Callable

from ..errors import InvalidPhoneError, ValidationFailure
from .personal import validate_birthdate, validate_gender
from .phone import check_phone

log = logging.getLogger(__name__)


def _coerce(value: str, validate: Callable[[str], object]) -> str:
    if value == "":
        return value
    try:
        validate(value)
    except ValidationFailure as e:
        log.warning(e.warning)
        return ""
    return value


def _validate_phone_or_raise(value: str) -> None:
    if not check_phone(value):
        raise InvalidPhoneError(value)


def coerce_phone(value: str) -> str:
    return _coerce(value, _validate_phone_or_raise)


def coerce_birthdate(value: str) -> str:
    return _coerce(value, validate_birthdate)


def coerce_gender(value: str) -> str:
    return _coerce(value, validate_gender)
