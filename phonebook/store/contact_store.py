"""
In-memory contact store.

The store owns every contact for the lifetime of the process. Contacts are
compared by identity, never by value: two records with the same fields are
still two records.

File: store/contact_store.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import Iterable, Iterator, List, Optional, Protocol

from ..models import Contact
from .search import filter_contacts

log = logging.getLogger(__name__)


class ContactRepository(Protocol):
    """What the menus need from a store."""

    def add(self, contact: Contact) -> None: ...

    def remove_all(self, contacts: Iterable[Contact]) -> int: ...

    def count(self) -> int: ...

    def contacts(self) -> List[Contact]: ...

    def search(self, query: str) -> List[Contact]: ...


class ContactStore:
    """Ordered, mutable collection of contacts (insertion order = display order)."""

    def __init__(self, contacts: Optional[Iterable[Contact]] = None):
        self._contacts: List[Contact] = list(contacts or [])

    def add(self, contact: Contact) -> None:
        self._contacts.append(contact)
        log.debug(f"Added {contact.display_label()!r} ({len(self._contacts)} records)")

    def remove_all(self, contacts: Iterable[Contact]) -> int:
        """
        Remove the given contacts by identity.

        Contacts that are not in the store are ignored.

        Returns:
            Number of records removed
        """
        doomed = {id(contact) for contact in contacts}
        before = len(self._contacts)
        self._contacts = [c for c in self._contacts if id(c) not in doomed]
        removed = before - len(self._contacts)
        log.debug(f"Removed {removed} record(s) ({len(self._contacts)} left)")
        return removed

    def count(self) -> int:
        return len(self._contacts)

    def contacts(self) -> List[Contact]:
        """Snapshot of the records in display order."""
        return list(self._contacts)

    def search(self, query: str) -> List[Contact]:
        return filter_contacts(self._contacts, query)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))

    def __contains__(self, contact: object) -> bool:
        return any(c is contact for c in self._contacts)
