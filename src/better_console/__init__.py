"""better-console - Arrow-key selection menus for the terminal."""

from importlib.metadata import version

__version__ = version("better-console")

from better_console.menu import BetterConsole, MenuState, Option
from better_console.utils.exceptions import (
    BetterConsoleError,
    InvalidOptionsError,
    InvalidQuestionError,
    NotConfiguredError,
)

__all__ = [
    "BetterConsole",
    "MenuState",
    "Option",
    "BetterConsoleError",
    "InvalidOptionsError",
    "InvalidQuestionError",
    "NotConfiguredError",
]
