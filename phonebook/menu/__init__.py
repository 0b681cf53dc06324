"""
Menu tree and navigator for the phone book.
"""

from .navigator import Navigator
from .node import MenuContext, MenuNode, parse_position
from .record import DeleteAction, EditAction, RecordMenu
from .root import AddAction, CountAction, ExitAction, RootMenu
from .selection import ListMenu, SearchMenu, SelectionMenu
from .terminal import ConsoleTerminal, Terminal

__all__ = [
    "AddAction",
    "ConsoleTerminal",
    "CountAction",
    "DeleteAction",
    "EditAction",
    "ExitAction",
    "ListMenu",
    "MenuContext",
    "MenuNode",
    "Navigator",
    "RecordMenu",
    "RootMenu",
    "SearchMenu",
    "SelectionMenu",
    "Terminal",
    "parse_position",
]
