"""
End-to-end tests for the application entry point.
"""

import builtins
from io import StringIO

import pytest
from rich.console import Console

from phonebook.app import main
from phonebook.config import PhonebookConfig


def _console() -> Console:
    return Console(file=StringIO(), width=120, force_terminal=False, color_system=None)


@pytest.fixture
def scripted_input(monkeypatch):
    def install(*lines):
        pending = list(lines)

        def fake_input(prompt=""):
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr(builtins, "input", fake_input)

    return install


def test_session_until_exit(scripted_input, restore_root_logging):
    scripted_input("add", "organization", "Acme", "Main St", "[bold]123", "count", "exit")
    console = _console()

    assert main(PhonebookConfig(), console) == 0

    output = console.file.getvalue()
    assert "Phone Book" in output
    assert "The record added." in output
    assert "The Phone Book has 1 records." in output
    assert "Wrong number format!" in output
    assert "Goodbye!" in output


def test_end_of_input_ends_session(scripted_input, restore_root_logging):
    scripted_input("count")
    console = _console()

    assert main(PhonebookConfig(), console) == 0
    assert "Goodbye!" in console.file.getvalue()


def test_bad_configuration_exits_with_error(monkeypatch):
    monkeypatch.setenv("PHONEBOOK_PHONE_POLICY", "loose")
    console = _console()

    assert main(console=console) == 1
    assert "Configuration error" in console.file.getvalue()


def test_validation_warnings_survive_a_quiet_log_level(scripted_input, restore_root_logging):
    scripted_input("add", "person", "Sam", "Ray", "", "X", "", "exit")
    console = _console()

    assert main(PhonebookConfig(log_level="ERROR"), console) == 0

    output = console.file.getvalue()
    assert "The record added." in output
    assert "Bad gender!" in output
