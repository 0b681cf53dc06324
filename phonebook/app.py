"""
Application entry point for the phone book.

File: phonebook/app.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from .config import PhonebookConfig
from .errors import ConfigError
from .logs import setup_logging
from .menu import ConsoleTerminal, Navigator
from .store import ContactStore
from .validation import use_phone_policy

log = logging.getLogger(__name__)


def main(config: Optional[PhonebookConfig] = None, console: Optional[Console] = None) -> int:
    """
    Run an interactive session until the user picks "exit".

    Returns:
        Process exit status
    """
    console = console or Console()

    if config is None:
        try:
            config = PhonebookConfig.from_env()
        except ConfigError as e:
            console.print(f"[red]Configuration error:[/] {e}")
            return 1

    setup_logging(config, console)
    use_phone_policy(config.phone_policy, config.phone_region)
    log.debug(f"Starting phone book with {config}")

    console.print(Panel.fit("[bold cyan]Phone Book[/]", border_style="cyan"))
    console.print()

    navigator = Navigator(ContactStore(), ConsoleTerminal(console))
    try:
        navigator.run()
    except (EOFError, KeyboardInterrupt):
        console.print()

    console.print("[dim]Goodbye![/]")
    return 0
