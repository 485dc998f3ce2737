"""A recorder for runtime errors reported by drivers."""

from __future__ import annotations


class RuntimeErrorLog:
    """Remembers the most recent runtime error that was reported."""

    def __init__(self) -> None:
        self.last_error: str | None = None
        self.last_parameter: int | None = None
        self.last_file: str | None = None
        self.last_line: int | None = None

    def report(self, message: str, parameter: int, file: str, line: int) -> None:
        """Record an error with its parameter and the place it was raised from."""
        self.last_error = message
        self.last_parameter = parameter
        self.last_file = file
        self.last_line = line

    def reset(self) -> None:
        """Forget the last recorded error."""
        self.last_error = None
        self.last_parameter = None
        self.last_file = None
        self.last_line = None