"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from better_console.utils.constants import DEFAULT_QUESTION

_TRUTHY = ("1", "true", "yes", "on")


def get_config_dir() -> Path:
    """Get the better-console config directory (XDG-compliant)."""
    if env_dir := os.environ.get("BETTER_CONSOLE_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "better-console"


class Config:
    """Application configuration.

    Read only: values come from defaults, an optional config.json and
    environment variables. Nothing is written back.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Load config from directory."""
        self.config_dir = config_dir or get_config_dir()
        self._config_file = self.config_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        self.question = DEFAULT_QUESTION
        self.debug = False

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.question = data.get("question", DEFAULT_QUESTION)
                self.debug = bool(data.get("debug", False))
            except (json.JSONDecodeError, IOError):
                pass

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Shell env vars win over config.json."""
        if (value := os.environ.get("BETTER_CONSOLE_DEBUG")) is not None:
            self.debug = value.strip().lower() in _TRUTHY
        if question := os.environ.get("BETTER_CONSOLE_QUESTION"):
            self.question = question
