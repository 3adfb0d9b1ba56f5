"""Raw keyboard input backed by readchar."""

from typing import Union

import readchar

# Control sequences the menu reacts to
KEY_UP = readchar.key.UP
KEY_DOWN = readchar.key.DOWN
KEY_ENTER = readchar.key.CR
KEY_INTERRUPT = readchar.key.CTRL_C

# readchar leaves ICRNL on, so Enter usually arrives as LF
ENTER_KEYS = frozenset({KEY_ENTER, readchar.key.LF, readchar.key.ENTER})


def decode_key(raw: Union[str, bytes]) -> str:
    """Normalize one raw input chunk to text."""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


class Keyboard:
    """Key source for the menu loop.

    readchar switches the terminal to unbuffered, unechoed mode only for
    the duration of each read, so enabling capture just marks the
    keyboard as live.
    """

    def __init__(self) -> None:
        self.enabled = False

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def read_key(self) -> str:
        """Block until one key press arrives.

        Returns:
            The key's character or escape sequence. Ctrl+C comes back as
            KEY_INTERRUPT whether or not the terminal turned it into a
            signal.
        """
        try:
            return readchar.readkey()
        except KeyboardInterrupt:
            return KEY_INTERRUPT
