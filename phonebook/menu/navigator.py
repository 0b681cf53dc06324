"""
File: menu/navigator.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging

from ..store import ContactRepository
from .node import MenuContext
from .root import RootMenu
from .terminal import Terminal

log = logging.getLogger(__name__)


class Navigator:
    """Drives the read-act loop from the main menu until "exit"."""

    def __init__(self, store: ContactRepository, terminal: Terminal):
        self.context = MenuContext(store=store, terminal=terminal)
        self.root = RootMenu(self.context)

    def run(self) -> None:
        log.debug("Entering main menu")
        self.root.act()
        log.debug("Main menu exited")
