"""
Contact storage and search.
"""

from .contact_store import ContactRepository, ContactStore
from .search import filter_contacts, matches

__all__ = [
    "ContactRepository",
    "ContactStore",
    "filter_contacts",
    "matches",
]
