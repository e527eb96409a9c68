from __future__ import annotations

from ._config import Settings
from ._data import DataClient
from ._stats import StatsClient
from ._transport import RequestsTransport

__all__ = ["WistiaClient"]


class WistiaClient(DataClient, StatsClient):
    """Both APIs on one client: every :class:`DataClient` and
    :class:`StatsClient` operation, sharing one transport and API password.

    Examples:
         with WistiaClient.from_env() as wistia:
             visitors, error = wistia.list_visitors(search="acme", per_page=25).result()
    """

    @classmethod
    def from_settings(cls, settings: Settings) -> WistiaClient:
        transport = RequestsTransport(timeout=settings.timeout, max_workers=settings.max_workers)
        try:
            return cls(
                settings.api_password.get_secret_value(),
                transport=transport,
                base_url=settings.base_url,
                debug_mode=settings.debug_mode,
            )
        except Exception:
            transport.close()
            raise

    @classmethod
    def from_env(cls, **overrides) -> WistiaClient:
        """Build a client from ``WISTIA_*`` environment variables.

        Keyword *overrides* take precedence over the environment.

        Raises:
            pydantic.ValidationError: ``WISTIA_API_PASSWORD`` is not set.
        """
        return cls.from_settings(Settings(**overrides))
