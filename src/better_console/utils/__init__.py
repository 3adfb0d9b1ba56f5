"""Utilities for better-console."""

from better_console.utils.config import Config, get_config_dir
from better_console.utils.exceptions import (
    BetterConsoleError,
    InvalidOptionsError,
    InvalidQuestionError,
    NotConfiguredError,
)

__all__ = [
    "Config",
    "get_config_dir",
    "BetterConsoleError",
    "InvalidOptionsError",
    "InvalidQuestionError",
    "NotConfiguredError",
]
