"""
Base contact model.

Every contact owns a property registry: an ordered mapping from field name
to a FieldAccessor bound to that instance. The registry is what lets the
record editor change any field by name without knowing the concrete
contact type.

File: models/contact.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from ..errors import UnknownFieldError
from ..validation import coerce_phone
from .property import FieldAccessor

NO_DATA = "[no data]"
NO_NUMBER = "[no number]"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def or_placeholder(value: str, placeholder: str = NO_DATA) -> str:
    return value if value else placeholder


class Contact(BaseModel, ABC):
    """A phone book record. Identity is object identity."""

    phone_number: str = Field("", description="Phone number, empty if unknown or invalid")
    created_at: datetime = Field(default_factory=utcnow, frozen=True, description="UTC creation time")
    edited_at: datetime = Field(default_factory=utcnow, description="UTC time of the last field edit")

    _properties: Dict[str, FieldAccessor] = PrivateAttr(default_factory=dict)

    @field_validator("phone_number")
    @classmethod
    def check_phone_number(cls, value: str) -> str:
        return coerce_phone(value)

    def model_post_init(self, __context: Any) -> None:
        if "edited_at" not in self.model_fields_set:
            self.edited_at = self.created_at
        self._properties = {accessor.name: accessor for accessor in self._build_properties()}

    @abstractmethod
    def _build_properties(self) -> List[FieldAccessor]:
        """Return the editable fields in display/edit order."""

    @abstractmethod
    def display_label(self) -> str:
        """Short label used in numbered lists."""

    @abstractmethod
    def _detail_lines(self) -> List[str]:
        """Variant-specific lines of the record dump."""

    def _accessor(
        self,
        name: str,
        attribute: str,
        coerce: Optional[Callable[[str], str]] = None,
    ) -> FieldAccessor:
        def setter(value: str) -> None:
            setattr(self, attribute, coerce(value) if coerce else value)

        def getter() -> str:
            return getattr(self, attribute)

        return FieldAccessor(name=name, setter=setter, getter=getter)

    def _number_accessor(self) -> FieldAccessor:
        return self._accessor("number", "phone_number", coerce_phone)

    def list_field_names(self) -> List[str]:
        return list(self._properties)

    def field_value(self, name: str) -> str:
        return self._lookup(name).getter()

    def update_field(self, name: str, value: str) -> None:
        """
        Set a field by its registry name.

        Validated fields that reject the value are set to "" (with a logged
        warning). The edit time is stamped either way.

        Raises:
            UnknownFieldError: if name is not one of list_field_names()
        """
        self._lookup(name).setter(value)
        self.touch()

    def touch(self) -> None:
        self.edited_at = utcnow()

    def _lookup(self, name: str) -> FieldAccessor:
        try:
            return self._properties[name]
        except KeyError:
            raise UnknownFieldError(name, self.list_field_names()) from None

    def search_key(self) -> str:
        """Raw field values in registry order, one per line."""
        return "\n".join(accessor.getter() for accessor in self._properties.values())

    def details(self) -> str:
        lines = self._detail_lines() + [
            f"Time created: {self.created_at.strftime(TIMESTAMP_FORMAT)}",
            f"Time last edit: {self.edited_at.strftime(TIMESTAMP_FORMAT)}",
        ]
        return "\n".join(lines)

    def describe(self, emit: Callable[[str], None] = print) -> None:
        emit(self.details())

    def __str__(self) -> str:
        return self.display_label()
