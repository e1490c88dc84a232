"""Extension based content type lookup for files served from the content root."""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Mapping

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        ".htm": "text/html",
        ".html": "text/html",
        ".xhtml": "application/xhtml+xml",
        ".css": "text/css",
        ".js": "text/javascript",
        ".mjs": "text/javascript",
        ".map": "application/json",
        ".json": "application/json",
        ".webmanifest": "application/manifest+json",
        ".wasm": "application/wasm",
        ".xml": "text/xml",
        ".txt": "text/plain",
        ".md": "text/markdown",
        ".csv": "text/csv",
        ".ico": "image/x-icon",
        ".png": "image/png",
        ".apng": "image/apng",
        ".gif": "image/gif",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".jpe": "image/jpeg",
        ".bmp": "image/bmp",
        ".svg": "image/svg+xml",
        ".svgz": "image/svg+xml",
        ".tif": "image/tiff",
        ".tiff": "image/tiff",
        ".webp": "image/webp",
        ".avif": "image/avif",
        ".woff": "font/woff",
        ".woff2": "font/woff2",
        ".ttf": "font/ttf",
        ".otf": "font/otf",
        ".eot": "application/vnd.ms-fontobject",
        ".mp3": "audio/mpeg",
        ".wav": "audio/wav",
        ".ogg": "audio/ogg",
        ".oga": "audio/ogg",
        ".m4a": "audio/mp4",
        ".mp4": "video/mp4",
        ".m4v": "video/mp4",
        ".webm": "video/webm",
        ".ogv": "video/ogg",
        ".pdf": "application/pdf",
        ".zip": "application/zip",
        ".gz": "application/gzip",
        ".dll": "application/octet-stream",
        ".pdb": "application/octet-stream",
        ".dat": "application/octet-stream",
        ".bin": "application/octet-stream",
    }
)


def resolve_content_type(file_path: str | os.PathLike[str]) -> str:
    """Return the MIME type for ``file_path`` based on its extension."""

    _, ext = os.path.splitext(os.fspath(file_path))
    if not ext:
        return DEFAULT_CONTENT_TYPE
    return CONTENT_TYPES.get(ext.lower(), DEFAULT_CONTENT_TYPE)


__all__ = ["CONTENT_TYPES", "DEFAULT_CONTENT_TYPE", "resolve_content_type"]
