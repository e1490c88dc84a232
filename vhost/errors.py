from __future__ import annotations


class InvalidUsageError(Exception):
    """Raised when the session is driven in a way its contract forbids."""


class SessionAlreadyStartedError(InvalidUsageError, RuntimeError):
    """Raised when ``start()`` is called on a session that already started."""

    def __init__(self) -> None:
        super().__init__("session can only be started once")


class MissingRequestUriError(InvalidUsageError, TypeError):
    """Raised when ``try_resolve`` receives no request URI."""

    def __init__(self) -> None:
        super().__init__("request_uri is required")


__all__ = [
    "InvalidUsageError",
    "SessionAlreadyStartedError",
    "MissingRequestUriError",
]
