"""Mapping of request paths onto the content root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple

_LEADING_SEPARATORS = "/" + os.sep + (os.altsep or "")


class Resolution(NamedTuple):
    candidate: Path
    contained: bool
    exists: bool


def canonical_path(path: str | os.PathLike[str]) -> Path:
    return Path(os.path.abspath(path)).resolve()


def resolve_candidate(content_root: Path, request_path: str) -> Path:
    """Join ``request_path`` under ``content_root`` and canonicalize the result.

    ``request_path`` is the already percent-decoded path component of the
    request URI. Leading separators are dropped so the path is always joined
    beneath the root; ``..`` segments may still walk out of it, which is
    what :func:`is_contained` is for.
    """

    relative = request_path.lstrip(_LEADING_SEPARATORS)
    joined = content_root / relative if relative else content_root
    try:
        return joined.resolve()
    except (OSError, RuntimeError, ValueError):
        # NUL bytes and symlink loops cannot be resolved on disk
        return Path(os.path.normpath(os.path.abspath(joined)))


def is_contained(content_root: Path, candidate: Path) -> bool:
    try:
        candidate.relative_to(content_root)
    except ValueError:
        return False
    return True


def is_regular_file(candidate: Path) -> bool:
    try:
        return candidate.is_file()
    except (OSError, ValueError):
        return False


def locate(content_root: Path, request_path: str) -> Resolution:
    candidate = resolve_candidate(content_root, request_path)
    contained = is_contained(content_root, candidate)
    exists = contained and is_regular_file(candidate)
    return Resolution(candidate=candidate, contained=contained, exists=exists)


__all__ = [
    "Resolution",
    "canonical_path",
    "resolve_candidate",
    "is_contained",
    "is_regular_file",
    "locate",
]
