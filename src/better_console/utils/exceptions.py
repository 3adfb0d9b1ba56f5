"""Custom exceptions for better-console.

This module defines a hierarchy of exceptions for menu setup errors:
- BetterConsoleError: Base exception for all better-console errors
- InvalidQuestionError: Question is not a non-empty string
- InvalidOptionsError: Options list is missing, empty or malformed
- NotConfiguredError: Menu started before options were set
"""


class BetterConsoleError(Exception):
    """Base exception for all better-console errors.

    All better-console exceptions inherit from this class, allowing
    callers to catch every menu error with a single except clause.
    """

    pass


class InvalidQuestionError(BetterConsoleError):
    """Question text is invalid.

    Raised when the question is:
    - Not a string
    - An empty string
    """

    pass


class InvalidOptionsError(BetterConsoleError):
    """Options list is invalid.

    Raised when the options are:
    - Missing
    - Not a list or tuple
    - Empty
    - Missing a name or callback on any entry
    """

    pass


class NotConfiguredError(BetterConsoleError):
    """Menu was started before any options were set."""

    pass
