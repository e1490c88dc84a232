"""Serve local application files to an embedded renderer on a virtual host."""

from .errors import InvalidUsageError, MissingRequestUriError, SessionAlreadyStartedError
from .responses import ResolvedResponse
from .session import VirtualHostSession

__all__ = [
    "InvalidUsageError",
    "MissingRequestUriError",
    "ResolvedResponse",
    "SessionAlreadyStartedError",
    "VirtualHostSession",
]
