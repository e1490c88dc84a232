"""Environment driven settings for the preview adapter."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .session import DEFAULT_CONTENT_HOST

DEFAULT_START_PAGE = "wwwroot/index.html"
DEFAULT_BIND = "127.0.0.1"
DEFAULT_PORT = 8765


def _coerce_int(value: str | None, default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(str(value).strip() or default)
    except ValueError:
        return default


def _clean(value: str | None, default: str) -> str:
    if not value:
        return default
    return value.strip() or default


@dataclass(frozen=True, slots=True)
class HostConfig:
    start_page: Path
    content_host: str
    bind: str
    port: int


def host_config() -> HostConfig:
    port = _coerce_int(os.getenv("VHOST_PORT"), DEFAULT_PORT)
    if not 0 < port < 65536:
        port = DEFAULT_PORT
    return HostConfig(
        start_page=Path(_clean(os.getenv("VHOST_START_PAGE"), DEFAULT_START_PAGE)),
        content_host=_clean(os.getenv("VHOST_CONTENT_HOST"), DEFAULT_CONTENT_HOST),
        bind=_clean(os.getenv("VHOST_BIND"), DEFAULT_BIND),
        port=port,
    )


__all__ = [
    "HostConfig",
    "DEFAULT_START_PAGE",
    "DEFAULT_CONTENT_HOST",
    "DEFAULT_BIND",
    "DEFAULT_PORT",
    "host_config",
]
