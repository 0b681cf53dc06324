"""
Numbered contact lists: the "list" and "search" menus.

File: menu/selection.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from abc import abstractmethod
from typing import List, Sequence

from ..models import Contact
from .node import AGAIN, BACK, MenuContext, MenuNode, parse_position
from .record import RecordMenu


class SelectionMenu(MenuNode):
    """
    Shows a numbered list of contacts and lets the user open one.

    Typing a number in 1..N opens the record menu for that contact. Any
    other input that is not one of the extra actions is rejected and the
    prompt is shown again.
    """

    extra_actions: Sequence[str] = (BACK,)

    def __init__(self, context: MenuContext, record: RecordMenu):
        super().__init__(context)
        self.record = record

    @property
    def children(self) -> Sequence[MenuNode]:
        return (self.record,)

    @abstractmethod
    def collect(self) -> List[Contact]:
        """Fetch and print the contacts to choose from."""

    def act(self, *selected: Contact) -> bool:
        while True:
            contacts = self.collect()
            self.terminal.print()
            if not self.select_from(contacts):
                return True

    def select_from(self, contacts: List[Contact]) -> bool:
        """
        Read choices until one is valid.

        Returns:
            True if the list should be fetched and shown again
        """
        actions = [child.name for child in self.children] + list(self.extra_actions)

        while True:
            choice = self.ask(self.name, actions)
            if choice == BACK:
                return False
            if choice == AGAIN and AGAIN in self.extra_actions:
                return True

            index = parse_position(choice, len(contacts))
            if index is None:
                self.unknown()
                continue
            return self.record.act(contacts[index])


class ListMenu(SelectionMenu):
    name = "list"

    def collect(self) -> List[Contact]:
        contacts = self.store.contacts()
        self.show_numbered(contacts)
        return contacts


class SearchMenu(SelectionMenu):
    name = "search"
    extra_actions = (BACK, AGAIN)

    def collect(self) -> List[Contact]:
        query = self.terminal.read_line("Enter search query: ")
        found = self.store.search(query)
        self.terminal.print(f"Found {len(found)} results:" if found else "Found 0 results")
        self.show_numbered(found)
        return found
