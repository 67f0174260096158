"""Exceptions raised while interpreting a dewpoint invocation.

Each error knows how it is reported on stderr; ``cli.main`` is the only place
that catches them and turns them into exit status 1.
"""

from __future__ import annotations


class DewPointError(Exception):
    """Base class for every fatal dewpoint error."""

    #: Print the short usage line before the message.
    show_usage = False
    #: Follow the message with the "Try 'dewpoint --help'" hint.
    show_hint = True
    #: Prefix the message with the program name.
    prefixed = True

    def __init__(self, message: str | None = None):
        super().__init__(message)
        self.message = message


class UsageError(DewPointError):
    """Wrong number of positional arguments, or a bad option."""

    def __init__(self, message: str | None = None, show_usage: bool = False):
        super().__init__(message)
        self.show_usage = show_usage


class InvalidTemperatureError(DewPointError):
    def __init__(self, value: str):
        super().__init__(f'invalid temperature "{value}"')
        self.value = value


class InvalidHumidityError(DewPointError):
    def __init__(self, value: str):
        super().__init__(f'invalid humidity "{value}"')
        self.value = value


class InternalError(DewPointError):
    """Option parsing reached a state it should never reach."""

    show_hint = False
    prefixed = False

    def __init__(self, detail: str | None = None):
        super().__init__("Internal error; please report.")
        self.detail = detail
