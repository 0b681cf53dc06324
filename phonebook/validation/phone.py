"""
Phone number validation policies.

The default (permissive) policy checks the textual grammar only:
- an optional leading "+"
- groups of letters/digits separated by a single space or hyphen
- the first group may be any length, later groups need 2+ characters
- at most one group in parentheses, and only the first or the second

The strict policy asks the phonenumbers library whether the number is
possible for a region.

File: validation/phone.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
import re
from typing import Callable

import phonenumbers

from ..errors import ConfigError

log = logging.getLogger(__name__)

PhonePolicy = Callable[[str], bool]

_GROUP = r"[A-Za-z0-9]"
_SEP = r"[ -]"

PHONE_PATTERN = re.compile(
    rf"""
    \+?
    (?:
        \({_GROUP}+\)                       # (first) - any length
      | {_GROUP}+ (?:{_SEP}\({_GROUP}{{2,}}\))? # first, optionally (second)
    )
    (?:{_SEP}{_GROUP}{{2,}})*               # remaining groups
    """,
    re.VERBOSE,
)


def validate_phone(phone: str) -> bool:
    """
    Check a phone number against the permissive grammar.

    Examples:
        >>> validate_phone("+1-234-5678")
        True
        >>> validate_phone("(123) 234 345-456")
        True
        >>> validate_phone("123 (12) (34)")
        False
        >>> validate_phone("abc!!")
        False
    """
    return PHONE_PATTERN.fullmatch(phone) is not None


def is_possible_phone_number(phone: str, default_region: str = "US") -> bool:
    """
    Check a phone number with the phonenumbers library.

    Args:
        phone: Raw phone number (e.g. "(555) 123-4567", "+44 20 7123 4567")
        default_region: Region assumed when the number has no country code

    Returns:
        True if the number parses and is a possible number for its region
    """
    if not phone or not phone.strip():
        return False

    try:
        parsed = phonenumbers.parse(phone, default_region)
    except phonenumbers.NumberParseException as e:
        log.debug(f"Could not parse phone number '{phone}': {e}")
        return False

    return phonenumbers.is_possible_number(parsed)


def strict_policy(default_region: str = "US") -> PhonePolicy:
    """Build a strict policy bound to a default region."""

    def check(phone: str) -> bool:
        return is_possible_phone_number(phone, default_region)

    return check


_active_policy: PhonePolicy = validate_phone


def get_phone_policy() -> PhonePolicy:
    return _active_policy


def set_phone_policy(policy: PhonePolicy) -> PhonePolicy:
    """
    Replace the policy used when contacts store a phone number.

    Returns:
        The previously active policy
    """
    global _active_policy
    previous = _active_policy
    _active_policy = policy
    return previous


def use_phone_policy(name: str, default_region: str = "US") -> PhonePolicy:
    """Activate a policy by its configuration name ("permissive" or "strict")."""
    if name == "permissive":
        policy = validate_phone
    elif name == "strict":
        policy = strict_policy(default_region)
    else:
        raise ConfigError(f"Unknown phone policy: {name}")

    log.debug(f"Using {name} phone policy")
    set_phone_policy(policy)
    return policy


def check_phone(phone: str) -> bool:
    """Validate a phone number with the active policy."""
    return _active_policy(phone)
