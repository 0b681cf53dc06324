"""
Case-insensitive substring search over contacts.

File: store/search.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from typing import Iterable, List

from ..models import Contact


def matches(contact: Contact, query: str) -> bool:
    """True if the contact's search key contains query, ignoring case."""
    return query.lower() in contact.search_key().lower()


def filter_contacts(contacts: Iterable[Contact], query: str) -> List[Contact]:
    """Keep the matching contacts, preserving their order."""
    return [contact for contact in contacts if matches(contact, query)]
