"""
Main menu and its leaf actions (add, count, exit).

File: menu/root.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from typing import Sequence

from ..models import Contact, Organization, Person
from ..validation import coerce_birthdate, coerce_gender
from .node import MenuContext, MenuNode
from .record import RecordMenu
from .selection import ListMenu, SearchMenu

CONTACT_TYPES = ("person", "organization")


class AddAction(MenuNode):
    name = "add"

    def act(self, *selected: Contact) -> bool:
        kind = self._read_type()
        contact = self._read_person() if kind == "person" else self._read_organization()
        self.store.add(contact)
        self.terminal.print("The record added.", style="green")
        self.terminal.print()
        return True

    def _read(self, prompt: str) -> str:
        return self.terminal.read_line(prompt)

    def _read_type(self) -> str:
        while True:
            kind = self._read(f"Enter the type ({', '.join(CONTACT_TYPES)}): ").strip()
            if kind in CONTACT_TYPES:
                return kind
            self.unknown("Unknown type...")

    def _read_person(self) -> Person:
        # Birth date and gender are checked as they are typed so the
        # warning shows up next to the prompt.
        return Person(
            name=self._read("Enter the name of the person: "),
            surname=self._read("Enter the surname of the person: "),
            birthdate=coerce_birthdate(self._read("Enter the birth date: ")),
            gender=coerce_gender(self._read("Enter the gender (M, F): ")),
            phone_number=self._read("Enter the number: "),
        )

    def _read_organization(self) -> Organization:
        return Organization(
            name=self._read("Enter the organization name: "),
            address=self._read("Enter the address: "),
            phone_number=self._read("Enter the number: "),
        )


class CountAction(MenuNode):
    name = "count"

    def act(self, *selected: Contact) -> bool:
        self.terminal.print(f"The Phone Book has {self.store.count()} records.")
        self.terminal.print()
        return True


class ExitAction(MenuNode):
    name = "exit"

    def act(self, *selected: Contact) -> bool:
        return False


class RootMenu(MenuNode):
    """Top of the menu tree. Its action only returns once "exit" is chosen."""

    name = "menu"

    def __init__(self, context: MenuContext):
        super().__init__(context)
        record = RecordMenu(context)
        self._children = (
            AddAction(context),
            ListMenu(context, record),
            SearchMenu(context, record),
            CountAction(context),
            ExitAction(context),
        )

    @property
    def children(self) -> Sequence[MenuNode]:
        return self._children

    def act(self, *selected: Contact) -> bool:
        actions = {child.name: child for child in self.children}

        while True:
            choice = self.ask(self.name, list(actions))
            action = actions.get(choice)
            if action is None:
                self.unknown()
                continue
            if not action.act():
                return False
