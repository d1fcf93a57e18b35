"""Error types raised by the TIP5 calculator."""

from __future__ import annotations

__all__ = ["Tip5CliError", "ParseError", "ValidationError", "BackendError"]


class Tip5CliError(Exception):
    """Base class for every error the CLI reports to the user."""


class ParseError(Tip5CliError):
    """A numeric literal could not be converted to a field element."""

    def __init__(self, literal: str, reason: str) -> None:
        self.literal = literal
        self.reason = reason
        super().__init__(f"invalid input '{literal}': {reason}")


class ValidationError(Tip5CliError):
    """The number of inputs does not fit the selected mode."""

    def __init__(self, mode: str, count: int, message: str) -> None:
        self.mode = mode
        self.count = count
        super().__init__(message)


class BackendError(Tip5CliError):
    """The external hash primitive could not be loaded."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"hash backend '{spec}' unavailable: {reason}")
