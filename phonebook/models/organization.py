"""
File: models/organization.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from typing import List

from pydantic import Field

from .contact import NO_NUMBER, Contact, or_placeholder
from .property import FieldAccessor


class Organization(Contact):
    """A company, shop or any other non-person contact."""

    name: str = Field(..., description="Organization name")
    address: str = Field("", description="Postal address")

    def _build_properties(self) -> List[FieldAccessor]:
        return [
            self._accessor("name", "name"),
            self._accessor("address", "address"),
            self._number_accessor(),
        ]

    def display_label(self) -> str:
        return self.name

    def _detail_lines(self) -> List[str]:
        return [
            f"Organization name: {self.name}",
            f"Address: {self.address}",
            f"Number: {or_placeholder(self.phone_number, NO_NUMBER)}",
        ]
