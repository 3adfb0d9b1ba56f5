"""Arrow-key selection menu.

BetterConsole owns the question, the option list, the highlighted row and
the keyboard capture. It renders to a Rich console, reads raw keys in a
blocking loop and runs the chosen option's callback on enter.
"""

import signal
import sys
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

from rich.console import Console

from better_console.keys import (
    ENTER_KEYS,
    KEY_DOWN,
    KEY_INTERRUPT,
    KEY_UP,
    Keyboard,
    decode_key,
)
from better_console.utils.config import Config
from better_console.utils.constants import (
    EXIT_OPTION_NAME,
    EXIT_SUCCESS,
    FAREWELL_MESSAGE,
    SELECTED_MARKER,
    UNSELECTED_MARKER,
)
from better_console.utils.debug import debug
from better_console.utils.exceptions import (
    InvalidOptionsError,
    InvalidQuestionError,
    NotConfiguredError,
)


@dataclass(frozen=True)
class Option:
    """A named menu entry and the action to run when it is selected."""

    name: str
    callback: Callable[[], Any]


class MenuState(Enum):
    """Lifecycle of a menu."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    RUNNING = "running"
    STOPPED = "stopped"
    TERMINATED = "terminated"


def _field(entry: Any, name: str) -> Any:
    """Read name/callback from a mapping or an attribute holder."""
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


class BetterConsole:
    """Interactive terminal menu.

    Example:
        menu = BetterConsole(
            question="Pick one",
            options=[{"name": "Build", "callback": build}],
        )
        menu.start()
    """

    def __init__(
        self,
        question: Optional[str] = None,
        options: Optional[Sequence[Any]] = None,
        *,
        console: Optional[Console] = None,
        keyboard: Optional[Keyboard] = None,
        shutdown: Optional[Callable[[int], Any]] = None,
        handle_signals: bool = True,
        config: Optional[Config] = None,
    ):
        """Create a menu.

        Args:
            question: Prompt shown above the options
            options: Entries with a name and a zero-argument callback
            console: Display output (a fresh Console by default)
            keyboard: Key source (readchar-backed Keyboard by default)
            shutdown: Called with the exit status on interrupt (sys.exit
                by default)
            handle_signals: Install the interrupt handler for SIGINT
            config: Source of the default question
        """
        self.console = console or Console()
        self._keyboard = keyboard or Keyboard()
        self._shutdown = shutdown or sys.exit

        self.question = ""
        self.options: Optional[tuple[Option, ...]] = None
        self.current_selection = 0
        self.input_active = False
        self.terminated = False
        self._started = False
        self._listening = False
        self._previous_sigint: Any = None
        self._signal_installed = False

        if question is None:
            question = (config or Config()).question
        self.set_question(question)
        if options is not None:
            self.set_options(options)

        if handle_signals:
            self._install_signal_handler()

    # --- configuration ---

    def set_question(self, question: str) -> None:
        """Set the prompt text.

        Raises:
            InvalidQuestionError: If question is not a non-empty string
        """
        if not isinstance(question, str):
            raise InvalidQuestionError("Question must be a string")
        if not question:
            raise InvalidQuestionError("Question must not be empty")
        self.question = question

    def set_options(self, options: Sequence[Any]) -> None:
        """Replace the option list and append the Exit option.

        Entries may be Option instances, mappings or any object with
        ``name`` and ``callback`` attributes. The caller's list is copied,
        never modified.

        Raises:
            InvalidOptionsError: If options are missing, not a list, empty
                or an entry has no name or callback
        """
        if options is None:
            raise InvalidOptionsError("Options not provided")
        if not isinstance(options, (list, tuple)):
            raise InvalidOptionsError("Options must be a list")
        if len(options) == 0:
            raise InvalidOptionsError("Options list must not be empty")

        parsed = []
        for entry in options:
            name = _field(entry, "name")
            callback = _field(entry, "callback")
            if not name or not isinstance(name, str) or not callable(callback):
                raise InvalidOptionsError(
                    "Options must have name and callback properties"
                )
            parsed.append(Option(name, callback))

        parsed.append(Option(EXIT_OPTION_NAME, self.handle_interrupt))
        self.options = tuple(parsed)
        self.current_selection = 0
        debug("menu", "Options set", count=len(self.options))

    def configure(
        self,
        question: Optional[str] = None,
        options: Optional[Sequence[Any]] = None,
    ) -> None:
        """Set question (when given) and options in one call."""
        if question is not None:
            self.set_question(question)
        self.set_options(options)

    @property
    def state(self) -> MenuState:
        """Current lifecycle stage, derived from the capture flags."""
        if self.terminated:
            return MenuState.TERMINATED
        if self.input_active:
            return MenuState.RUNNING
        if self.options is None:
            return MenuState.UNCONFIGURED
        if self._started:
            return MenuState.STOPPED
        return MenuState.CONFIGURED

    # --- rendering ---

    def render(self) -> None:
        """Clear the screen and draw the question and options."""
        self.console.clear()
        self.console.print(self.question, markup=False, highlight=False)
        for index, option in enumerate(self.options or ()):
            marker = (
                SELECTED_MARKER
                if index == self.current_selection
                else UNSELECTED_MARKER
            )
            self.console.print(
                f"{marker}{option.name}", markup=False, highlight=False
            )

    # --- lifecycle ---

    def start(self) -> None:
        """Show the menu and process key presses until capture stops.

        Calling start() while the key loop is already running does nothing.

        Raises:
            NotConfiguredError: If no options have been set
        """
        if not self.options:
            raise NotConfiguredError("Options not set")
        if self._listening:
            debug("menu", "start() ignored, key loop already running")
            return

        self._started = True
        self.render()
        self._enable_input()
        self._listen()

    def resume(self) -> None:
        """Return to the top of the menu and capture keys again.

        From inside a callback the running key loop picks up again once
        the callback returns. Otherwise this runs the loop itself.

        Raises:
            NotConfiguredError: If no options have been set
        """
        if not self.options:
            raise NotConfiguredError("Options not set")
        self.current_selection = 0
        self.render()
        self._enable_input()
        self._listen()

    def stop(self) -> None:
        """Release keyboard capture, keeping the current selection."""
        self._keyboard.disable()
        self.input_active = False

    def dispose(self) -> None:
        """Stop capture and put back the SIGINT handler found at construction."""
        self.stop()
        if self._signal_installed:
            previous = self._previous_sigint
            if previous is None:
                previous = signal.SIG_DFL
            signal.signal(signal.SIGINT, previous)
            self._signal_installed = False
            debug("menu", "SIGINT handler restored")

    def __enter__(self) -> "BetterConsole":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _enable_input(self) -> None:
        self._keyboard.enable()
        self.input_active = True

    def _listen(self) -> None:
        if self._listening:
            return
        self._listening = True
        try:
            while self.input_active:
                self.handle_key(self._keyboard.read_key())
        finally:
            self._listening = False

    # --- input ---

    def handle_key(self, raw: Union[str, bytes]) -> None:
        """Translate one raw input chunk into navigation or selection."""
        if not self.options:
            raise NotConfiguredError("Options not set")
        key = decode_key(raw)

        if key == KEY_UP:
            if self.current_selection > 0:
                self.current_selection -= 1
                self.render()
        elif key == KEY_DOWN:
            if self.current_selection < len(self.options) - 1:
                self.current_selection += 1
                self.render()
        elif key in ENTER_KEYS:
            self._handle_selection()
        elif key == KEY_INTERRUPT:
            self.handle_interrupt()
        else:
            debug("key", "Ignored key", key=repr(key))

    def _handle_selection(self) -> None:
        self.stop()
        option = self.options[self.current_selection]
        debug("menu", "Selected", option=option.name, index=self.current_selection)
        option.callback()

    def handle_interrupt(self) -> None:
        """Release the keyboard, say goodbye and shut down with success."""
        self.stop()
        self.console.print(FAREWELL_MESSAGE, markup=False, highlight=False)
        self.terminated = True
        debug("menu", "Interrupted, shutting down")
        self._shutdown(EXIT_SUCCESS)

    def _on_sigint(self, signum: int, frame: object) -> None:
        self.handle_interrupt()

    def _install_signal_handler(self) -> None:
        # signal.signal only works from the main thread
        if threading.current_thread() is not threading.main_thread():
            debug("menu", "Not main thread, SIGINT handler not installed")
            return
        self._previous_sigint = signal.signal(signal.SIGINT, self._on_sigint)
        self._signal_installed = True
