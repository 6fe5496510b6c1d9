from __future__ import annotations

from typing import Any


class TeamsException(Exception):
    """Raised for every failure surfaced by this package.

    Delivery failures carry the HTTP status code and response when one was
    received; both are None for connection problems and timeouts.
    """

    def __init__(self, message: str, *, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:
        return self.message


class TeamsConfigError(TeamsException, ValueError):
    """Invalid argument given to a card builder; raised before any network I/O."""
