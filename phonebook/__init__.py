"""
Phone Book: an interactive, in-memory contact manager.

File: phonebook/__init__.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
