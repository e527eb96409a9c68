from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Callable, Mapping

from ._decode import Outcome, decode
from ._request import DEFAULT_BASE_URL, DebugMode, RequestBuilder
from ._routes import Route
from ._transport import RequestsTransport, Transport

__all__ = ["Callback", "BaseClient"]

Callback = Callable[[Any, BaseException | None], None]


class BaseClient:
    """Plumbing shared by :class:`DataClient` and :class:`StatsClient`.

    Every operation resolves a route, builds the request, hands it to the
    transport and returns a :class:`concurrent.futures.Future` that resolves
    to an :class:`Outcome`. A transport error skips decoding and is carried
    unchanged.

    Args:
        api_password (str):
            Account API password, sent with every request.
        transport (Transport, optional):
            Defaults to a fresh :class:`RequestsTransport`.
        base_url (str, optional):
            API root, ``"https://api.wistia.com/v1/"`` by default.
        debug_mode (DebugMode | str, optional):
            Log each composed request (``"summary"`` / ``"verbose"``).
    """

    def __init__(
        self,
        api_password: str,
        *,
        transport: Transport | None = None,
        base_url: str = DEFAULT_BASE_URL,
        debug_mode: DebugMode | str = DebugMode.OFF,
    ):
        self.builder = RequestBuilder(api_password, base_url, debug_mode)
        self.transport = transport if transport is not None else RequestsTransport()

    @property
    def api_password(self) -> str:
        return self.builder.api_password

    @property
    def base_url(self) -> str:
        return self.builder.base_url

    @property
    def debug_mode(self) -> DebugMode:
        return self.builder.debug_mode

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.transport.close()

    def _call(
        self,
        route: Route,
        shape: Any,
        *,
        params: Mapping[str, object] | None = None,
        callback: Callback | None = None,
    ) -> Future:
        request = self.builder.build(route, query_params=params)
        future: Future = Future()
        if callback is not None:
            future.add_done_callback(lambda f: callback(*f.result()))

        def _complete(body: bytes | None, error: BaseException | None) -> None:
            if error is not None:
                future.set_result(Outcome.failed(error))
            else:
                future.set_result(decode(body, shape))

        self.transport.send(request, _complete)
        return future

    @staticmethod
    def _then(source: Future, project: Callable[[Any], Any], callback: Callback | None) -> Future:
        """Chain a pure projection onto the value of *source*'s outcome."""
        future: Future = Future()
        if callback is not None:
            future.add_done_callback(lambda f: callback(*f.result()))

        def _relay(done: Future) -> None:
            outcome = done.result()
            future.set_result(Outcome.of(project(outcome.value)) if outcome.ok else outcome)

        source.add_done_callback(_relay)
        return future
