"""Exceptions raised while parsing or reading command-line arguments."""

from __future__ import annotations

__all__ = ["ArgumentError", "MissingKeyError", "MissingValueError"]


class ArgumentError(RuntimeError):
    """Base class for every cmdargs failure."""


class MissingValueError(ArgumentError):
    """An option token was the last argument, so it has no value."""

    def __init__(self, token: str) -> None:
        super().__init__(f"one-arg '{token}' does not have a value")
        self.token = token


class MissingKeyError(ArgumentError, KeyError):
    """A typed accessor was asked for a key that was never given."""

    def __init__(self, key: str) -> None:
        super().__init__(f"'{key}' does not exist in args.")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])
