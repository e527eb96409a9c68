"""
wistia_kit – typed client for the Wistia Data and Stats APIs.

Import the public surface like so:

    from wistia_kit import WistiaClient, AssetKind

Everything else (modules whose names start with “_”) is internal and
subject to change without notice.
"""

from importlib import metadata as _metadata

# ─────────────────────────────────────────────────────────────────────────────
# Re-export PUBLIC objects from the internal implementation modules
# ─────────────────────────────────────────────────────────────────────────────
from ._wistia import WistiaClient
from ._data import DataClient
from ._stats import StatsClient
from ._config import Settings
from ._decode import Outcome, decode
from ._request import DEFAULT_BASE_URL, DebugMode, HTTPMethod, Request, RequestBuilder
from ._transport import RequestsTransport, Transport
from ._util import to_dataframe
from ._routes import (MediasRoute, ProjectsRoute, MediaRoute, MediaCaptionsRoute, ProjectRoute,
                      AccountStatsRoute, ProjectStatsRoute, MediaStatsRoute, MediaEngagementRoute,
                      VisitorsRoute, VisitorRoute, EventsRoute, EventRoute, HeatmapRoute,
                      DataRoute, StatsRoute, Route, path_for, is_absolute)
from ._models import (AssetKind, Thumbnail, Asset, Caption, Media, Project, UserAgentDetails,
                      VisitorIdentity, Visitor, Event, AccountStats, ProjectStats, MediaStats,
                      MediaEngagement)
from ._errors import (WistiaError, InvalidRequestURL, DecodeError, FieldIssue, NoData,
                      WistiaAPIError, RateLimited, NotAuthorized, Forbidden, InvalidRequest,
                      raise_for_status)

__all__: list[str] = [
    "WistiaClient",
    "DataClient",
    "StatsClient",
    "Settings",
    "Outcome",
    "decode",
    "DEFAULT_BASE_URL",
    "DebugMode",
    "HTTPMethod",
    "Request",
    "RequestBuilder",
    "RequestsTransport",
    "Transport",
    "to_dataframe",
    # routes
    "MediasRoute",
    "ProjectsRoute",
    "MediaRoute",
    "MediaCaptionsRoute",
    "ProjectRoute",
    "AccountStatsRoute",
    "ProjectStatsRoute",
    "MediaStatsRoute",
    "MediaEngagementRoute",
    "VisitorsRoute",
    "VisitorRoute",
    "EventsRoute",
    "EventRoute",
    "HeatmapRoute",
    "DataRoute",
    "StatsRoute",
    "Route",
    "path_for",
    "is_absolute",
    # resources
    "AssetKind",
    "Thumbnail",
    "Asset",
    "Caption",
    "Media",
    "Project",
    "UserAgentDetails",
    "VisitorIdentity",
    "Visitor",
    "Event",
    "AccountStats",
    "ProjectStats",
    "MediaStats",
    "MediaEngagement",
    # errors
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

# ─────────────────────────────────────────────────────────────────────────────
# Version handling
# ─────────────────────────────────────────────────────────────────────────────
try:
    # Normal installed case – read version from package metadata
    __version__: str = _metadata.version("wistia-kit")
except _metadata.PackageNotFoundError:
    # Running from a source checkout – fall back to __about__.py
    from .__about__ import __version__  # type: ignore[attr-defined]

# Clean up internal symbol so it doesn’t leak into dir(wistia_kit)
del _metadata
