"""
Shared fixtures for the phone book tests.
"""

import logging
from typing import List, Optional

import pytest

from phonebook.models import Organization, Person
from phonebook.store import ContactStore
from phonebook.validation import set_phone_policy, validate_phone


class ScriptedTerminal:
    """Terminal that replays canned input lines and records output."""

    def __init__(self, *lines: str):
        self.lines: List[str] = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError(f"No scripted input left for prompt {prompt!r}")
        return self.lines.pop(0)

    def print(self, text: str = "", style: Optional[str] = None) -> None:
        self.output.extend(text.split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture(autouse=True)
def permissive_phone_policy():
    previous = set_phone_policy(validate_phone)
    yield
    set_phone_policy(previous)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def ann() -> Person:
    return Person(
        name="Ann",
        surname="Lee",
        birthdate="1990-01-01",
        gender="F",
        phone_number="+1-234-5678",
    )


@pytest.fixture
def bob() -> Person:
    return Person(name="Bob", surname="Stone", phone_number="(555) 123-4567")


@pytest.fixture
def acme() -> Organization:
    return Organization(name="Acme", address="1 Main St, Leeds", phone_number="+44 20 7123 4567")


@pytest.fixture
def store(ann, acme, bob) -> ContactStore:
    return ContactStore([ann, acme, bob])
