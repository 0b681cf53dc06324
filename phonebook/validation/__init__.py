"""
Validation policies for contact fields.

File: validation/__init__.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from .coerce import coerce_birthdate, coerce_gender, coerce_phone
from .personal import GENDERS, validate_birthdate, validate_gender
from .phone import (
    PhonePolicy,
    check_phone,
    get_phone_policy,
    is_possible_phone_number,
    set_phone_policy,
    strict_policy,
    use_phone_policy,
    validate_phone,
)

__all__ = [
    "GENDERS",
    "PhonePolicy",
    "check_phone",
    "coerce_birthdate",
    "coerce_gender",
    "coerce_phone",
    "get_phone_policy",
    "is_possible_phone_number",
    "set_phone_policy",
    "strict_policy",
    "use_phone_policy",
    "validate_birthdate",
    "validate_gender",
    "validate_phone",
]
