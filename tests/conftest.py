"""Shared pytest fixtures."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from better_console.menu import BetterConsole
from better_console.utils.debug import reload_config


class FakeKeyboard:
    """Scripted key source that records capture changes."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.enabled = False
        self.reads = 0
        self.enable_calls = 0

    def feed(self, *keys):
        self.keys.extend(keys)

    def enable(self):
        self.enabled = True
        self.enable_calls += 1

    def disable(self):
        self.enabled = False

    def read_key(self):
        if not self.keys:
            raise AssertionError("menu asked for a key but none are left")
        self.reads += 1
        return self.keys.pop(0)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_config_dir(temp_dir, monkeypatch):
    """Point better-console at an empty config directory."""
    config_dir = temp_dir / ".better-console"
    config_dir.mkdir()
    monkeypatch.setenv("BETTER_CONSOLE_DIR", str(config_dir))
    monkeypatch.delenv("BETTER_CONSOLE_DEBUG", raising=False)
    monkeypatch.delenv("BETTER_CONSOLE_QUESTION", raising=False)
    reload_config()
    yield config_dir
    reload_config()


@pytest.fixture
def keyboard():
    return FakeKeyboard()


@pytest.fixture
def console():
    """Console writing plain text into memory."""
    return Console(file=io.StringIO(), width=80, color_system=None)


@pytest.fixture
def exits():
    """Exit statuses passed to the menu's shutdown callable."""
    return []


@pytest.fixture
def make_menu(console, keyboard, exits):
    """Build a BetterConsole wired to the fake keyboard and console."""
    menus = []

    def factory(question="Pick one", options=None, **kwargs):
        kwargs.setdefault("handle_signals", False)
        kwargs.setdefault("keyboard", keyboard)
        menu = BetterConsole(
            question=question,
            options=options,
            console=console,
            shutdown=exits.append,
            **kwargs,
        )
        menus.append(menu)
        return menu

    yield factory

    for menu in menus:
        menu.dispose()


@pytest.fixture
def screen(console):
    """Return the most recently rendered frame as a list of lines."""

    def last_frame(question="Pick one"):
        output = console.file.getvalue()
        frame = output.rsplit(question + "\n", 1)[1]
        return [line for line in frame.splitlines() if line.startswith(("> ", "  "))]

    return last_frame
