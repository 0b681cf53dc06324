"""
Menu node base class.

A menu node has a name, an ordered list of child nodes and an action. The
action returns True when the caller should show its own prompt again and
False when control should pop back further (or, at the root, stop).

File: menu/node.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models import Contact
from ..store import ContactRepository
from .terminal import Terminal

BACK = "back"
AGAIN = "again"
MENU = "menu"
UNKNOWN_ACTION = "Unknown action..."


@dataclass
class MenuContext:
    """Collaborators shared by every node of one menu tree."""

    store: ContactRepository
    terminal: Terminal


class MenuNode(ABC):
    name: str = ""

    def __init__(self, context: MenuContext):
        self.context = context

    @property
    def store(self) -> ContactRepository:
        return self.context.store

    @property
    def terminal(self) -> Terminal:
        return self.context.terminal

    @property
    def children(self) -> Sequence["MenuNode"]:
        return ()

    @abstractmethod
    def act(self, *selected: Contact) -> bool:
        """Run the node's action on the selected contacts (may be none)."""

    def ask(self, menu_name: str, actions: Sequence[str]) -> str:
        prompt = f"[{menu_name}] Enter action ({', '.join(actions)}): "
        return self.terminal.read_line(prompt).strip()

    def unknown(self, message: str = UNKNOWN_ACTION) -> None:
        self.terminal.print(message, style="red")
        self.terminal.print()

    def show_numbered(self, contacts: Sequence[Contact]) -> None:
        for position, contact in enumerate(contacts, 1):
            self.terminal.print(f"{position}. {contact.display_label()}")


def parse_position(choice: str, count: int) -> Optional[int]:
    """
    Turn a 1-based list choice into a list index.

    Returns:
        Index into a list of `count` items, or None if the choice is not a
        number in 1..count
    """
    try:
        position = int(choice)
    except ValueError:
        return None
    if 1 <= position <= count:
        return position - 1
    return None
