"""Executable entrypoint for the browser preview adapter."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Optional, Sequence

import uvicorn

from .api import create_app
from .config import host_config
from .session import VirtualHostSession


def _init_logging() -> None:
    level_name = (os.getenv("LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt)


def main(argv: Optional[Sequence[str]] = None) -> None:
    cfg = host_config()
    parser = argparse.ArgumentParser(
        prog="vhost", description="Preview a start page through the virtual host."
    )
    parser.add_argument("start_page", nargs="?", default=str(cfg.start_page))
    parser.add_argument("--content-host", default=cfg.content_host)
    parser.add_argument("--host", default=cfg.bind)
    parser.add_argument("--port", type=int, default=cfg.port)
    args = parser.parse_args(argv)

    _init_logging()
    session = VirtualHostSession(args.start_page, content_host=args.content_host)
    with session:
        uvicorn.run(create_app(session), host=args.host, port=args.port, workers=1)


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
