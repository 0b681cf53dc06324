"""
Name-addressed field accessors.

File: models/property.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class FieldAccessor:
    """One editable field of one contact instance."""

    name: str
    setter: Callable[[str], None]
    getter: Callable[[], str]
