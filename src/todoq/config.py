"""Configuration models for todoq."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class ReplConfig(BaseModel):
    """Configuration for interactive sessions."""

    prompt: str = "todo> "
    banner: bool = True


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    trace: bool = False
    file: str | None = None


class TodoqConfig(BaseModel):
    """Main configuration for todoq."""

    repl: ReplConfig = Field(default_factory=ReplConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TodoqConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
TODOQ_DIR = Path(".todoq")
CONFIG_FILE = TODOQ_DIR / "config.json"
