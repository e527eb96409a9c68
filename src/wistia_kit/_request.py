from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Mapping
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit

from ._errors import InvalidRequestURL
from ._routes import Route, identifiers_for, is_absolute, path_for
from ._util import _stringify_params, _validate_enum

__all__ = [
    "DEFAULT_BASE_URL",
    "CREDENTIAL_KEY",
    "HTTPMethod",
    "DebugMode",
    "Request",
    "RequestBuilder",
]

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL: Final[str] = "https://api.wistia.com/v1/"
CREDENTIAL_KEY: Final[str] = "api_password"

# RFC 3986 unreserved characters; anything else could restructure the URL.
_IDENTIFIER_RE: Final = re.compile(r"[A-Za-z0-9._~-]+")
# pchar + "/" for the base URL path
_PATH_RE: Final = re.compile(r"[A-Za-z0-9._~!$&'()*+,;=:@%/-]*")
# DNS name or IPv4 literal; IPv6 literals are matched separately
_HOST_RE: Final = re.compile(r"[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.?")
_IPV6_RE: Final = re.compile(r"[0-9A-Fa-f:.]+")
# dot-segments are dropped by URL normalisation before sending
_DOT_SEGMENTS: Final = frozenset({".", ".."})


class HTTPMethod(str, Enum):
    GET = "GET"        # retrieve
    PUT = "PUT"        # create / replace
    DELETE = "DELETE"  # remove


class DebugMode(str, Enum):
    """How much of each composed request the builder logs."""

    OFF = "off"
    SUMMARY = "summary"
    VERBOSE = "verbose"

    @classmethod
    def coerce(cls, value: DebugMode | str) -> DebugMode:
        if isinstance(value, cls):
            return value
        (mode,) = _validate_enum("debug_mode", value.lower(), {m.value for m in cls}, allow_multi=False)
        return cls(mode)


@dataclass(frozen=True)
class Request:
    """A transport-ready outgoing call."""

    url: str
    method: HTTPMethod = HTTPMethod.GET
    body: bytes | None = None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> dict[str, str]:
        return dict(parse_qsl(urlsplit(self.url).query, keep_blank_values=True))


def _valid_host(parts: SplitResult) -> bool:
    host = parts.hostname
    if not host:
        return False
    if "[" in parts.netloc:
        return bool(_IPV6_RE.fullmatch(host))
    return bool(_HOST_RE.fullmatch(host))


def _valid_port(parts: SplitResult) -> bool:
    try:
        parts.port
    except ValueError:
        return False
    return True


def _check_base_url(base_url: str) -> str:
    if not base_url.endswith("/"):
        base_url += "/"
    try:
        parts = urlsplit(base_url)
    except ValueError:  # unbalanced IPv6 brackets
        raise InvalidRequestURL(f"base_url={base_url!r} is not a well-formed http(s) URL") from None
    if (
        parts.scheme not in ("http", "https")
        or not _valid_host(parts)
        or not _valid_port(parts)
        or parts.query
        or parts.fragment
        or not _PATH_RE.fullmatch(parts.path)
        or any(c.isspace() for c in base_url)
    ):
        raise InvalidRequestURL(f"base_url={base_url!r} is not a well-formed http(s) URL")
    return base_url


def _check_identifiers(route: Route) -> None:
    for ident in identifiers_for(route):
        if (
            not isinstance(ident, str)
            or not _IDENTIFIER_RE.fullmatch(ident)
            or ident in _DOT_SEGMENTS
        ):
            raise InvalidRequestURL(
                f"{type(route).__name__} identifier {ident!r} is not URL-safe; "
                "identifiers may only contain letters, digits and '-._~'"
            )


class RequestBuilder:
    """Compose :class:`Request` objects for the Wistia API.

    Args:
        api_password (str):
            The account API password. Appended as ``api_password`` to the
            query string of **every** request, overriding any caller value.
        base_url (str, optional):
            Versioned API root; a trailing ``/`` is added when missing.
        debug_mode (DebugMode | str, optional):
            ``"off"`` (default), ``"summary"`` or ``"verbose"``.

    Raises:
        ValueError: *api_password* is empty.
        InvalidRequestURL: *base_url* is not a well-formed http(s) URL.
    """

    def __init__(
        self,
        api_password: str,
        base_url: str = DEFAULT_BASE_URL,
        debug_mode: DebugMode | str = DebugMode.OFF,
    ):
        if not api_password:
            raise ValueError("An invalid API key has been provided.")
        self.api_password = api_password
        self.base_url = _check_base_url(base_url)
        self.debug_mode = DebugMode.coerce(debug_mode)

    def build(
        self,
        route: Route,
        method: HTTPMethod = HTTPMethod.GET,
        query_params: Mapping[str, object] | None = None,
        body: bytes | None = None,
    ) -> Request:
        _check_identifiers(route)

        # caller params < the route's own query < the credential
        params = _stringify_params(query_params or {})
        path = path_for(route)
        if is_absolute(route):
            parts = urlsplit(path)
            root = f"{parts.scheme}://{parts.netloc}{parts.path}"
            params.update(parse_qsl(parts.query, keep_blank_values=True))
        else:
            root = self.base_url + path
        params[CREDENTIAL_KEY] = self.api_password

        request = Request(url=f"{root}?{urlencode(params)}", method=HTTPMethod(method), body=body)
        self._log(request, params)
        return request

    def _log(self, request: Request, params: Mapping[str, str]) -> None:
        if self.debug_mode is DebugMode.OFF:
            return

        shown = {k: ("***" if k == CREDENTIAL_KEY else v) for k, v in params.items()}
        url = f"{request.url.split('?', 1)[0]}?{urlencode(shown)}"
        if self.debug_mode is DebugMode.SUMMARY:
            logger.info("%s %s", request.method.value, url)
        else:
            logger.info(
                "%s %s params=%s body=%s",
                request.method.value,
                url,
                shown,
                "none" if request.body is None else f"{len(request.body)} bytes",
            )
