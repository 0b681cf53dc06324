"""
Record menu: inspect, edit or delete one contact.

File: menu/record.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import Sequence

from ..models import Contact
from .node import MENU, MenuContext, MenuNode

log = logging.getLogger(__name__)


class EditAction(MenuNode):
    name = "edit"

    def act(self, *selected: Contact) -> bool:
        contact = selected[0]
        fields = contact.list_field_names()

        while True:
            field = self.terminal.read_line(f"Select a field ({', '.join(fields)}): ").strip()
            if field in fields:
                break
            self.unknown("Unknown field...")

        value = self.terminal.read_line(f"Enter {field}: ")
        contact.update_field(field, value)
        log.debug(f"Edited {field} of {contact.display_label()!r}")

        self.terminal.print("The record updated!", style="green")
        return True


class DeleteAction(MenuNode):
    name = "delete"

    def act(self, *selected: Contact) -> bool:
        self.store.remove_all(selected)
        self.terminal.print("The record removed!", style="green")
        self.terminal.print()
        return False


class RecordMenu(MenuNode):
    """
    Shows one contact and offers edit, delete and menu.

    Entered from a numbered list with the chosen contact. Always returns
    False when left: after a delete the caller's numbering is stale, and
    "menu" means go back to the main menu.
    """

    name = "[number]"
    menu_name = "record"

    def __init__(self, context: MenuContext):
        super().__init__(context)
        self._children = (EditAction(context), DeleteAction(context))

    @property
    def children(self) -> Sequence[MenuNode]:
        return self._children

    def act(self, *selected: Contact) -> bool:
        contact = selected[0]
        actions = {child.name: child for child in self.children}
        names = list(actions) + [MENU]

        while True:
            contact.describe(self.terminal.print)
            self.terminal.print()

            choice = self.ask(self.menu_name, names)
            while choice != MENU and choice not in actions:
                self.unknown()
                choice = self.ask(self.menu_name, names)

            if choice == MENU:
                return False
            if not actions[choice].act(contact):
                return False
