from __future__ import annotations

"""wistia_kit — **shared exception hierarchy** & HTTP‑error helper.

Every sub‑module (*_request.py*, *_decode.py*, *_transport.py*) raises or
carries these classes so that callers can handle failures uniformly:

```python
from wistia_kit import NotAuthorized, DecodeError

value, error = client.show_media("abcd123").result()
if isinstance(error, NotAuthorized):
    rotate_api_password()
elif isinstance(error, DecodeError):
    logger.warning("unexpected payload: %s", error.issues)
```"""

from dataclasses import dataclass
from typing import Final, Sequence

__all__ = [
    "WistiaError",
    "InvalidRequestURL",
    "DecodeError",
    "FieldIssue",
    "NoData",
    "WistiaAPIError",
    "RateLimited",
    "NotAuthorized",
    "Forbidden",
    "InvalidRequest",
    "raise_for_status",
]

# ---------------------------------------------------------------------------
# Base & specialised exceptions
# ---------------------------------------------------------------------------


class WistiaError(Exception):
    """Base for *all* wistia_kit exceptions."""


# ── Construction ------------------------------------------------------------
class InvalidRequestURL(WistiaError, ValueError):
    """The base URL or an identifier cannot form a well‑formed request URL.

    This is a configuration defect, never a runtime condition: it is raised
    immediately while the request is being built, before anything is sent.
    """


# ── Decoding ----------------------------------------------------------------
@dataclass(frozen=True)
class FieldIssue:
    """One offending field in a payload that failed to decode.

    ``expected`` names the type the field needed (``int``, ``AssetKind``);
    ``code`` is the validator's machine-readable reason (``missing``,
    ``int_parsing``, ``enum``).
    """

    path: str
    expected: str
    actual: str
    message: str
    code: str

    def __str__(self) -> str:
        where = self.path or "<root>"
        return f"{where}: {self.message} (expected {self.expected}, got {self.actual})"


class DecodeError(WistiaError):
    """The response body does not match the requested shape."""

    def __init__(self, shape: str, issues: Sequence[FieldIssue]):
        self.shape = shape
        self.issues = tuple(issues)
        lines = "\n  • ".join(str(i) for i in self.issues)
        super().__init__(f"could not decode {shape}:\n  • {lines}")


class NoData(WistiaError):
    """No data was provided from the Wistia API."""

    def __init__(self, message: str = "No data was provided from the Wistia API."):
        super().__init__(message)


# ── HTTP status -------------------------------------------------------------
class WistiaAPIError(WistiaError):
    """Base for errors reported by the API through an HTTP status ≥ 400."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimited(WistiaAPIError):
    """429 – request rate exceeded.

    The exception exposes ``retry_after`` seconds when the API sends one; the
    client itself never retries.
    """

    def __init__(self, message: str, status_code: int | None = 429, retry_after: int | None = None):
        super().__init__(message, status_code)
        self.retry_after = retry_after


class NotAuthorized(WistiaAPIError):
    """401 – an invalid API password has been provided."""


class Forbidden(WistiaAPIError):
    """403 – the API password lacks permission for the resource."""


class InvalidRequest(WistiaAPIError):
    """400 / 404 – malformed query parameters or unknown resource ID."""


# ---------------------------------------------------------------------------
# Helper – map HTTP response → exception class
# ---------------------------------------------------------------------------


_CLIENT_ERRORS: Final[set[int]] = {400, 404}


def _retry_after(resp) -> int | None:  # noqa: ANN001
    raw = resp.headers.get("Retry-After")
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


def raise_for_status(resp) -> None:  # noqa: ANN001
    """Raise the appropriate *wistia_kit* exception for *resp*.

    Does **nothing** when the response code is < 400.
    """
    status = resp.status_code
    if status < 400:
        return

    message = f"Wistia API error {status}: {resp.text}"

    if status == 401:
        raise NotAuthorized(message, status)

    if status == 403:
        raise Forbidden(message, status)

    if status == 429:
        raise RateLimited(message, status, _retry_after(resp))

    if status in _CLIENT_ERRORS:
        raise InvalidRequest(message, status)

    # Fallback – unknown 4xx/5xx
    raise WistiaAPIError(message, status)
