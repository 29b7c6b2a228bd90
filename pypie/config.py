"""
Global toggles for the object model.

Two switches exist: whether diagnostic warnings are emitted, and whether
callers may write unknown keys onto a public facade.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Process-wide configuration."""
    warnings: bool = True
    allow_writing: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment.

        PYPIE_WARNINGS=0 silences warnings, PYPIE_ALLOW_WRITING=1 enables
        permissive external writes.
        """
        return cls(
            warnings=os.environ.get("PYPIE_WARNINGS", "1") != "0",
            allow_writing=os.environ.get("PYPIE_ALLOW_WRITING", "0") == "1",
        )


settings = Settings.from_env()


def show_warnings(enabled: bool) -> None:
    """Toggle displaying of warnings."""
    settings.warnings = bool(enabled)


def allow_writing_to_objects(enabled: bool) -> None:
    """Toggle whether unknown keys may be written onto objects from outside."""
    settings.allow_writing = bool(enabled)


def warn(message: str) -> None:
    """Emit a diagnostic warning when warnings are enabled."""
    if settings.warnings:
        logger.warning(message)
