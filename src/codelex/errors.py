"""Error types for the outer surfaces (config, themes).

Tokenizing, detection and style lookup never raise; these errors come only
from reading user configuration.
"""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised on an unreadable or invalid config file, with location context."""

    def __init__(self, message: str, path: Path | None = None, line: int | None = None) -> None:
        self.message = message
        self.path = path
        self.line = line
        super().__init__(self.format())

    def format(self) -> str:
        result = f"error: {self.message}"
        if self.path is not None:
            location = str(self.path)
            if self.line is not None:
                location += f":{self.line}"
            result += f"\n  --> {location}"
        return result


class ThemeError(ConfigError):
    """Raised for an unknown theme name or an invalid colour override."""
