"""
File: models/person.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from typing import List

from pydantic import Field, field_validator

from ..validation import coerce_birthdate, coerce_gender
from .contact import NO_NUMBER, Contact, or_placeholder
from .property import FieldAccessor


class Person(Contact):
    """A private individual."""

    name: str = Field(..., description="First name")
    surname: str = Field("", description="Last name")
    birthdate: str = Field("", description="ISO birth date (YYYY-MM-DD), empty if unknown")
    gender: str = Field("", description='"M", "F" or empty')

    @field_validator("birthdate")
    @classmethod
    def check_birthdate(cls, value: str) -> str:
        return coerce_birthdate(value)

    @field_validator("gender")
    @classmethod
    def check_gender(cls, value: str) -> str:
        return coerce_gender(value)

    def _build_properties(self) -> List[FieldAccessor]:
        return [
            self._accessor("name", "name"),
            self._accessor("surname", "surname"),
            self._accessor("birth", "birthdate", coerce_birthdate),
            self._accessor("gender", "gender", coerce_gender),
            self._number_accessor(),
        ]

    def display_label(self) -> str:
        return f"{self.name} {self.surname}"

    def _detail_lines(self) -> List[str]:
        return [
            f"Name: {self.name}",
            f"Surname: {self.surname}",
            f"Birth date: {or_placeholder(self.birthdate)}",
            f"Gender: {or_placeholder(self.gender)}",
            f"Number: {or_placeholder(self.phone_number, NO_NUMBER)}",
        ]
