"""
Runtime configuration for the phone book.

Settings are read from the environment (and a local .env file, if present).
None of them are required; the defaults give the standard interactive
behavior.

File: phonebook/config.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError

PHONE_POLICIES = ("permissive", "strict")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PhonebookConfig:
    """Ambient settings for a phone book session."""

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    # Phone validation
    phone_policy: str = "permissive"
    phone_region: str = "US"  # Only used by the strict policy

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

        self.phone_policy = self.phone_policy.lower()
        if self.phone_policy not in PHONE_POLICIES:
            raise ConfigError(
                f"Unknown phone policy: {self.phone_policy} "
                f"(expected one of: {', '.join(PHONE_POLICIES)})"
            )

        self.phone_region = self.phone_region.upper()

        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PhonebookConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ after
                loading a .env file from the working directory.

        Returns:
            PhonebookConfig
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            log_level=environ.get("PHONEBOOK_LOG_LEVEL", "WARNING"),
            log_file=environ.get("PHONEBOOK_LOG_FILE") or None,
            phone_policy=environ.get("PHONEBOOK_PHONE_POLICY", "permissive"),
            phone_region=environ.get("PHONEBOOK_PHONE_REGION", "US"),
        )


__all__ = [
    "PhonebookConfig",
    "PHONE_POLICIES",
]
