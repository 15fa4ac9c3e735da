"""Configuration model for mk.

Config structure (``~/.mk/config.yml`` and ``./.mk/config.yml``):
    file_editor: "vim"
    dir_editor: "code -n"
    file_mode: "0644"
    dir_mode: "0755"
    log_level: WARNING

Editor values are fallbacks; ``$_MK_FILE_EDITOR`` / ``$_MK_DIR_EDITOR``
win when set.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from mk.domain.constants import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class MkConfig(BaseModel):
    """Validated mk configuration."""

    model_config = ConfigDict(extra="forbid")

    file_editor: str | None = None
    dir_editor: str | None = None
    file_mode: int = DEFAULT_FILE_MODE
    dir_mode: int = DEFAULT_DIR_MODE
    log_level: str = "WARNING"

    @field_validator("file_mode", "dir_mode", mode="before")
    @classmethod
    def _parse_mode(cls, v: Any) -> Any:
        # Strings are octal ("0644", "0o644"); ints pass through (PyYAML reads 0644 as octal).
        if isinstance(v, str):
            text = v.strip().lower()
            if text.startswith("0o"):
                text = text[2:]
            try:
                return int(text, 8)
            except ValueError:
                raise ValueError(f"mode must be an octal number, got {v!r}")
        return v

    @field_validator("file_mode", "dir_mode")
    @classmethod
    def _mode_in_range(cls, v: int) -> int:
        if not 0 <= v <= 0o7777:
            raise ValueError(f"mode must be between 0 and 0o7777, got {oct(v)}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)
