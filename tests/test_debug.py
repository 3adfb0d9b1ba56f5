"""Tests for debug logging."""

from better_console.utils.debug import debug, reload_config


def test_debug_disabled_writes_nothing(mock_config_dir):
    debug("menu", "hello")

    assert not (mock_config_dir / "debug.log").exists()


def test_debug_enabled_writes_log(mock_config_dir, monkeypatch):
    monkeypatch.setenv("BETTER_CONSOLE_DEBUG", "1")
    reload_config()

    debug("menu", "Selected", option="A", index=0)
    debug("key", "Ignored key")

    lines = (mock_config_dir / "debug.log").read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[better-console:menu]")
    assert lines[0].endswith("Selected | option=A index=0")
    assert lines[1].startswith("[better-console:key]")


def test_debug_config_is_cached(mock_config_dir, monkeypatch):
    """Debug mode changes apply after reload_config()."""
    debug("menu", "before")
    monkeypatch.setenv("BETTER_CONSOLE_DEBUG", "1")
    debug("menu", "still cached")

    assert not (mock_config_dir / "debug.log").exists()

    reload_config()
    debug("menu", "after")

    assert "after" in (mock_config_dir / "debug.log").read_text()


def test_menu_logs_selection(mock_config_dir, monkeypatch, make_menu, keyboard):
    monkeypatch.setenv("BETTER_CONSOLE_DEBUG", "1")
    reload_config()
    menu = make_menu(options=[{"name": "A", "callback": lambda: None}])
    keyboard.feed("\r")

    menu.start()

    assert "option=A" in (mock_config_dir / "debug.log").read_text()
