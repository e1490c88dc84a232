from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:  # pragma: no cover - path setup
    sys.path.insert(0, str(ROOT_DIR))

from vhost.api import create_app
from vhost.session import VirtualHostSession

INDEX_HTML = b"<!doctype html><title>app</title><script src=\"js/app.js\"></script>\n"
SITE_CSS = b"body { margin: 0; }\n"
APP_JS = b"console.log('ready');\n"
BLOB = bytes(range(256)) * 64


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """``<tmp>/wwwroot`` with a few assets, plus files just outside of it."""

    root = tmp_path / "wwwroot"
    (root / "css").mkdir(parents=True)
    (root / "js").mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "css" / "site.css").write_bytes(SITE_CSS)
    (root / "js" / "app.js").write_bytes(APP_JS)
    (root / "blob.bin").write_bytes(BLOB)
    (root / "LICENSE").write_bytes(b"MIT\n")

    (tmp_path / "secret.txt").write_bytes(b"outside\n")
    sibling = tmp_path / "wwwroot-other"
    sibling.mkdir()
    (sibling / "secret.txt").write_bytes(b"sibling\n")
    return root


@pytest.fixture
def session(content_root: Path):
    with VirtualHostSession(content_root / "index.html") as host:
        yield host


@pytest.fixture
def preview_client(session: VirtualHostSession):
    app = create_app(session)
    with TestClient(app) as client:
        yield client, session
