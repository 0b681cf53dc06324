"""
Main entry point for the phone book.

Usage:
    >>> python main.py

File: main.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import sys

from phonebook.app import main

if __name__ == "__main__":
    sys.exit(main())
