"""
Exception hierarchy for the phone book.

Validation failures are recovered by the caller (the field is reset to an
empty string and a warning is logged). Everything else propagates.

File: phonebook/errors.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""


class PhonebookError(Exception):
    """Base class for all phone book errors."""


class ValidationFailure(PhonebookError, ValueError):
    """A user-supplied value did not pass a validation policy."""

    warning = "Invalid value!"

    def __init__(self, value: str):
        super().__init__(f"{self.warning} ({value!r})")
        self.value = value


class InvalidPhoneError(ValidationFailure):
    warning = "Wrong number format!"


class InvalidBirthdateError(ValidationFailure):
    warning = "Bad birth date!"


class InvalidGenderError(ValidationFailure):
    warning = "Bad gender!"


class UnknownFieldError(PhonebookError, KeyError):
    """A field name that is not in the contact's property registry."""

    def __init__(self, field_name: str, available: list):
        super().__init__(field_name)
        self.field_name = field_name
        self.available = available

    def __str__(self) -> str:
        return f"Unknown field {self.field_name!r} (expected one of: {', '.join(self.available)})"


class ConfigError(PhonebookError):
    """Invalid configuration value."""


__all__ = [
    "PhonebookError",
    "ValidationFailure",
    "InvalidPhoneError",
    "InvalidBirthdateError",
    "InvalidGenderError",
    "UnknownFieldError",
    "ConfigError",
]
