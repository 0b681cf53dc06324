"""
Console input/output for the menus.

File: menu/terminal.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from typing import Optional, Protocol

from rich.console import Console
from rich.text import Text


class Terminal(Protocol):
    def read_line(self, prompt: str) -> str: ...

    def print(self, text: str = "", style: Optional[str] = None) -> None: ...


class ConsoleTerminal:
    """Terminal backed by a rich Console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read_line(self, prompt: str) -> str:
        # Text() so "[menu]" style prompts are not parsed as markup
        return self.console.input(Text(prompt))

    def print(self, text: str = "", style: Optional[str] = None) -> None:
        # Contact data is user input: never interpret it as markup
        self.console.print(text, style=style, markup=False, highlight=False)
