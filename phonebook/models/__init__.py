"""
Contact models for the phone book.
"""

from .contact import NO_DATA, NO_NUMBER, Contact, utcnow
from .organization import Organization
from .person import Person
from .property import FieldAccessor

__all__ = [
    "Contact",
    "FieldAccessor",
    "NO_DATA",
    "NO_NUMBER",
    "Organization",
    "Person",
    "utcnow",
]
