"""HTTP-shaped responses synthesized for requests on the virtual host."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Tuple

from .content_types import resolve_content_type

NO_CACHE = "no-cache, max-age=0, must-revalidate, no-store"
NOT_FOUND_CONTENT_TYPE = "text/plain"

Header = Tuple[str, str]


@dataclass(slots=True)
class ResolvedResponse:
    """Status, headers and body for one intercepted request.

    The body is owned by whoever receives the response and must be closed
    after it has been consumed. Using the response as a context manager
    does that.
    """

    status_code: int
    status_text: str
    headers: tuple[Header, ...]
    body: BinaryIO

    @property
    def header_block(self) -> str:
        return "\n".join(f"{name}: {value}" for name, value in self.headers)

    @property
    def content_type(self) -> str | None:
        for name, value in self.headers:
            if name.lower() == "content-type":
                return value
        return None

    def close(self) -> None:
        self.body.close()

    def __enter__(self) -> "ResolvedResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def not_found_message(candidate_path: str | os.PathLike[str]) -> str:
    return f"There is no file at {os.fspath(candidate_path)}"


def build_response(candidate_path: Path, exists: bool) -> ResolvedResponse:
    """Build the response for ``candidate_path``.

    A missing file is answered with a 404 carrying a plain-text diagnostic.
    ``OSError`` raised while opening an existing file is propagated.
    """

    if not exists:
        payload = not_found_message(candidate_path).encode("utf-8")
        return ResolvedResponse(
            status_code=404,
            status_text="Not found",
            headers=(("Content-Type", NOT_FOUND_CONTENT_TYPE),),
            body=io.BytesIO(payload),
        )

    headers = (
        ("Content-Type", resolve_content_type(candidate_path)),
        ("Cache-Control", NO_CACHE),
    )
    stream = open(candidate_path, "rb")
    try:
        return ResolvedResponse(
            status_code=200,
            status_text="OK",
            headers=headers,
            body=stream,
        )
    except BaseException:
        stream.close()
        raise


__all__ = [
    "Header",
    "NO_CACHE",
    "ResolvedResponse",
    "build_response",
    "not_found_message",
]
