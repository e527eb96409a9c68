"""Logical Wistia endpoints and their paths.

Each endpoint is its own frozen dataclass carrying only the identifiers it
needs; :func:`path_for` renders any of them to a path relative to the
versioned API root (``https://api.wistia.com/v1/``).

Identifiers are interpolated verbatim. Keeping them URL-safe is the caller's
job; :class:`wistia_kit.RequestBuilder` refuses to build a request from an
identifier outside the RFC 3986 *unreserved* set.

The heatmap is the odd one out: it is a public page authorised by the event's
``public_token`` rather than the account API password, so its path is a
complete absolute URL (see :func:`is_absolute`).
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Final, Union

__all__ = [
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
    "HEATMAP_ROOT",
    "path_for",
    "is_absolute",
    "identifiers_for",
]

HEATMAP_ROOT: Final[str] = "https://api.wistia.com/v1/stats/events/"

# ----------------------------------------------------------------------------
# Data API
# ----------------------------------------------------------------------------

@dataclass(frozen=True)
class MediasRoute:
    """GET /medias.json, every media in the account."""


@dataclass(frozen=True)
class ProjectsRoute:
    """GET /projects.json, every project in the account."""


@dataclass(frozen=True)
class MediaRoute:
    """GET /medias/[media-id].json"""
    media_id: str


@dataclass(frozen=True)
class MediaCaptionsRoute:
    """GET /medias/[media-id]/captions.json"""
    media_id: str


@dataclass(frozen=True)
class ProjectRoute:
    """GET /projects/[project-id].json"""
    project_id: str

# ----------------------------------------------------------------------------
# Stats API
# ----------------------------------------------------------------------------

@dataclass(frozen=True)
class AccountStatsRoute:
    """GET /stats/account.json"""


@dataclass(frozen=True)
class ProjectStatsRoute:
    """GET /stats/projects/[project-id].json"""
    project_id: str


@dataclass(frozen=True)
class MediaStatsRoute:
    """GET /stats/medias/[media-id].json"""
    media_id: str


@dataclass(frozen=True)
class MediaEngagementRoute:
    """GET /stats/medias/[media-id]/engagement.json"""
    media_id: str


@dataclass(frozen=True)
class VisitorsRoute:
    """GET /stats/visitors.json"""


@dataclass(frozen=True)
class VisitorRoute:
    """GET /stats/visitors/[visitor-key].json"""
    visitor_key: str


@dataclass(frozen=True)
class EventsRoute:
    """GET /stats/events.json"""


@dataclass(frozen=True)
class EventRoute:
    """GET /stats/events/[event-key].json"""
    event_key: str


@dataclass(frozen=True)
class HeatmapRoute:
    """GET /stats/events/[event-key]/iframe.html?public_token=[public-token]"""
    event_key: str
    public_token: str


DataRoute = Union[MediasRoute, ProjectsRoute, MediaRoute, MediaCaptionsRoute, ProjectRoute]
StatsRoute = Union[
    AccountStatsRoute, ProjectStatsRoute, MediaStatsRoute, MediaEngagementRoute,
    VisitorsRoute, VisitorRoute, EventsRoute, EventRoute, HeatmapRoute,
]
Route = Union[DataRoute, StatsRoute]


def path_for(route: Route) -> str:
    """Render *route* to its path relative to the API root.

    Raises:
        TypeError: *route* is not one of the route variants.
    """
    match route:
        case MediasRoute():
            return "medias.json"
        case ProjectsRoute():
            return "projects.json"
        case MediaRoute(media_id=media_id):
            return f"medias/{media_id}.json"
        case MediaCaptionsRoute(media_id=media_id):
            return f"medias/{media_id}/captions.json"
        case ProjectRoute(project_id=project_id):
            return f"projects/{project_id}.json"
        case AccountStatsRoute():
            return "stats/account.json"
        case ProjectStatsRoute(project_id=project_id):
            return f"stats/projects/{project_id}.json"
        case MediaStatsRoute(media_id=media_id):
            return f"stats/medias/{media_id}.json"
        case MediaEngagementRoute(media_id=media_id):
            return f"stats/medias/{media_id}/engagement.json"
        case VisitorsRoute():
            return "stats/visitors.json"
        case VisitorRoute(visitor_key=key):
            return f"stats/visitors/{key}.json"
        case EventsRoute():
            return "stats/events.json"
        case EventRoute(event_key=key):
            return f"stats/events/{key}.json"
        case HeatmapRoute(event_key=key, public_token=token):
            return f"{HEATMAP_ROOT}{key}/iframe.html?public_token={token}"
    raise TypeError(f"not a Wistia route: {route!r}")


def is_absolute(route: Route) -> bool:
    """True when :func:`path_for` yields a complete URL instead of a relative path."""
    return isinstance(route, HeatmapRoute)


def identifiers_for(route: Route) -> tuple[str, ...]:
    """The identifiers *route* interpolates, in declaration order."""
    return dataclasses.astuple(route)
