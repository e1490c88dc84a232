from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Optional, Union
from urllib.parse import ParseResult, SplitResult, quote, unquote, urlsplit

from .errors import MissingRequestUriError, SessionAlreadyStartedError
from .metrics import VHOST_NAVIGATIONS_TOTAL, VHOST_REQUESTS_TOTAL
from .paths import canonical_path, locate
from .responses import ResolvedResponse, build_response


logger = logging.getLogger("vhost.session")

# Never routable, so it cannot collide with a real public host
DEFAULT_CONTENT_HOST = "0.0.0.0"
START_SCHEME = "https"

RequestUri = Union[str, SplitResult, ParseResult]
NavigationHandler = Callable[[str], None]


def _split_uri(request_uri: RequestUri) -> SplitResult:
    if isinstance(request_uri, SplitResult):
        return request_uri
    if isinstance(request_uri, ParseResult):
        # urlparse moves ";params" out of the path
        return urlsplit(request_uri.geturl())
    return urlsplit(str(request_uri))


def _request_host(netloc: str) -> str:
    """Return the host part of ``netloc`` exactly as written."""

    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host if end == -1 else host[: end + 1]
    return host.partition(":")[0]


class VirtualHostSession:
    """Serves files below the start page's directory on a synthetic host.

    The platform adapter constructs one session per hosting surface,
    subscribes to navigation, calls :meth:`start` once and then passes every
    intercepted request URI to :meth:`try_resolve`.
    """

    def __init__(
        self,
        start_page_path: str | os.PathLike[str],
        *,
        content_host: str = DEFAULT_CONTENT_HOST,
    ) -> None:
        host_page = canonical_path(start_page_path)
        self._content_host = content_host
        self._content_root_path = host_page.parent
        self._host_page_relative_url = os.path.relpath(
            host_page, host_page.parent
        ).replace(os.sep, "/")
        self._has_started = False
        self._disposed = False
        self._lock = threading.Lock()
        self._observers: list[NavigationHandler] = []
        logger.debug(
            "event=session_created host=%s root=%s page=%s",
            self._content_host,
            self._content_root_path,
            self._host_page_relative_url,
        )

    @property
    def content_host(self) -> str:
        return self._content_host

    @property
    def content_root_path(self) -> Path:
        return self._content_root_path

    @property
    def host_page_relative_url(self) -> str:
        return self._host_page_relative_url

    @property
    def has_started(self) -> bool:
        return self._has_started

    @property
    def start_uri(self) -> str:
        return "%s://%s/%s" % (
            START_SCHEME,
            self._content_host,
            quote(self._host_page_relative_url, safe="/"),
        )

    def subscribe(self, handler: NavigationHandler) -> Callable[[], None]:
        """Register ``handler`` for the start navigation.

        Handlers added after :meth:`start` are not called. The returned
        callable removes the registration again.
        """

        with self._lock:
            self._observers.append(handler)

        def _unsubscribe() -> None:
            with self._lock:
                try:
                    self._observers.remove(handler)
                except ValueError:
                    pass

        return _unsubscribe

    def start(self) -> None:
        with self._lock:
            if self._has_started:
                raise SessionAlreadyStartedError()
            self._has_started = True
            observers = list(self._observers)

        uri = self.start_uri
        VHOST_NAVIGATIONS_TOTAL.inc()
        logger.info("event=navigate uri=%s observers=%d", uri, len(observers))
        for handler in observers:
            handler(uri)

    def try_resolve(
        self, request_uri: Optional[RequestUri]
    ) -> tuple[bool, Optional[ResolvedResponse]]:
        """Answer ``request_uri`` from the content root.

        Returns ``(False, None)`` when the URI is not on the virtual host so
        the caller can fall back to the network. Requests on the virtual host
        always get a response; the caller owns and must close its body.
        """

        if request_uri is None:
            raise MissingRequestUriError()

        parts = _split_uri(request_uri)
        if _request_host(parts.netloc) != self._content_host:
            VHOST_REQUESTS_TOTAL.labels(outcome="passthrough").inc()
            return False, None

        resolution = locate(self._content_root_path, unquote(parts.path))
        if resolution.exists:
            outcome = "served"
        elif resolution.contained:
            outcome = "not_found"
        else:
            outcome = "outside_root"
            logger.warning(
                "event=outside_root path=%s candidate=%s",
                parts.path,
                resolution.candidate,
            )
        VHOST_REQUESTS_TOTAL.labels(outcome=outcome).inc()
        logger.debug(
            "event=resolved outcome=%s candidate=%s", outcome, resolution.candidate
        )
        return True, build_response(resolution.candidate, resolution.exists)

    def dispose(self) -> None:
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            self._observers.clear()
        logger.debug("event=session_disposed host=%s", self._content_host)

    close = dispose

    def __enter__(self) -> "VirtualHostSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


__all__ = [
    "DEFAULT_CONTENT_HOST",
    "NavigationHandler",
    "RequestUri",
    "VirtualHostSession",
]
