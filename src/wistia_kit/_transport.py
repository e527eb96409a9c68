from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Protocol

import requests
from requests.adapters import HTTPAdapter

from .__about__ import __version__
from ._errors import raise_for_status
from ._request import Request

__all__ = [
    "Completion",
    "Transport",
    "RequestsTransport",
    "build_session",
]

logger = logging.getLogger(__name__)

Completion = Callable[[bytes | None, BaseException | None], None]


class Transport(Protocol):
    """Anything that can send a :class:`Request` and report back asynchronously.

    ``send`` must return without blocking and invoke *completion* exactly once,
    with either the raw body (``None`` when the response has none) or the
    error that prevented one.
    """

    def send(self, request: Request, completion: Completion) -> None: ...

    def close(self) -> None: ...


def build_session(*, pool_size: int = 8) -> requests.Session:
    """Return a Session whose connection pool matches the worker count."""
    session = requests.Session()
    session.headers.update({
        "Accept": "application/json",
        "User-Agent": f"wistia-kit/{__version__}",
    })
    adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
    for scheme in ("https://", "http://"):
        session.mount(scheme, adapter)
    return session


class RequestsTransport:
    """Default transport: a :mod:`requests` session driven by a thread pool.

    Args:
        session (requests.Session, optional):
            Bring your own session (proxies, custom adapters …). It is left
            open by :meth:`close`; a session created here is closed.
        timeout (float):
            Seconds before a request is abandoned with ``requests.Timeout``.
        max_workers (int):
            Requests that may be in flight at once.
    """

    def __init__(self, session: requests.Session | None = None, *, timeout: float = 60, max_workers: int = 8):
        self._owns_session = session is None
        self.session = session if session is not None else build_session(pool_size=max_workers)
        self.timeout = timeout
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="wistia")

    def send(self, request: Request, completion: Completion) -> None:
        self._pool.submit(self._perform, request, completion)

    def fetch(self, request: Request) -> bytes | None:
        """Send *request* synchronously and return its body.

        Raises:
            requests.RequestException: network failure or timeout.
            WistiaAPIError: the API answered with a status ≥ 400.
        """
        resp = self.session.request(
            request.method.value, request.url, data=request.body, timeout=self.timeout
        )
        raise_for_status(resp)
        if resp.status_code == 204:
            return None
        return resp.content

    def _perform(self, request: Request, completion: Completion) -> None:
        try:
            body = self.fetch(request)
        except Exception as exc:  # forwarded as-is; completion must always run
            logger.debug("%s %s failed: %s", request.method.value, request.path, exc)
            completion(None, exc)
            return
        completion(body, None)

    def close(self) -> None:
        self._pool.shutdown(wait=True)
        if self._owns_session:
            self.session.close()
