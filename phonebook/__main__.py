"""
Run the phone book with `python -m phonebook`.

File: phonebook/__main__.py
Created: 2026-10-19
Last Modified: 2026-10-20
"""

import sys

from .app import main

sys.exit(main())
