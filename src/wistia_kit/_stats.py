from __future__ import annotations

from concurrent.futures import Future

from ._client import BaseClient, Callback
from ._models import AccountStats, Event, MediaEngagement, MediaStats, ProjectStats, Visitor
from ._request import _check_identifiers
from ._routes import (AccountStatsRoute, EventRoute, EventsRoute, HeatmapRoute, MediaEngagementRoute,
                      MediaStatsRoute, ProjectStatsRoute, VisitorRoute, VisitorsRoute, path_for)
from ._util import runtime_typecheck, _prune_none

__all__ = ["StatsClient"]


class StatsClient(BaseClient):
    """Thin façade around the **Wistia Stats API**.

    Same calling convention as :class:`DataClient`: each method returns a
    future resolving to an :class:`~wistia_kit.Outcome` and accepts an
    optional ``callback(value, error)``.
    """

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    @runtime_typecheck
    def account_stats(self, *, callback: Callback | None = None) -> Future:
        """Loads, plays and hours watched across the whole account."""
        return self._call(AccountStatsRoute(), AccountStats, callback=callback)

    @runtime_typecheck
    def project_stats(self, project_id: str, *, callback: Callback | None = None) -> Future:
        """Wrapper for **GET /stats/projects/[project-id].json**.

        Returns:
            Future[Outcome[ProjectStats]]
        """
        return self._call(ProjectStatsRoute(project_id), ProjectStats, callback=callback)

    @runtime_typecheck
    def media_stats(self, media_id: str, *, callback: Callback | None = None) -> Future:
        """Wrapper for **GET /stats/medias/[media-id].json**.

        Returns:
            Future[Outcome[MediaStats]]
        """
        return self._call(MediaStatsRoute(media_id), MediaStats, callback=callback)

    @runtime_typecheck
    def media_engagement(self, media_id: str, *, callback: Callback | None = None) -> Future:
        """Engagement and rewatch curves for one media."""
        return self._call(MediaEngagementRoute(media_id), MediaEngagement, callback=callback)

    # -------------------------------------------------------------------------
    # Visitors
    # -------------------------------------------------------------------------

    @runtime_typecheck
    def list_visitors(
            self,
            *,
            search: str | None = None,
            page: int | None = None,
            per_page: int | None = None,
            callback: Callback | None = None,
    ) -> Future:
        """Visitors, most recently active first.

        Args:
            search (str | None):
                Matches against visitor name or email.
            page (int | None):
                1-based page number.
            per_page (int | None):
                Visitors per page.
            callback (Callback | None):
                Called with ``(visitors, error)`` on completion.

        Returns:
            Future[Outcome[tuple[Visitor, ...]]]
        """
        params = _prune_none({"search": search, "page": page, "per_page": per_page})
        return self._call(VisitorsRoute(), tuple[Visitor, ...], params=params, callback=callback)

    @runtime_typecheck
    def show_visitor(self, visitor_key: str, *, callback: Callback | None = None) -> Future:
        """Wrapper for **GET /stats/visitors/[visitor-key].json**.

        Returns:
            Future[Outcome[Visitor]]
        """
        return self._call(VisitorRoute(visitor_key), Visitor, callback=callback)

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    @runtime_typecheck
    def list_events(
            self,
            *,
            visitor_key: str | None = None,
            media_id: str | None = None,
            page: int | None = None,
            per_page: int | None = None,
            callback: Callback | None = None,
    ) -> Future:
        """Viewing events, optionally for one visitor and/or one media.

        Returns:
            Future[Outcome[tuple[Event, ...]]]
        """
        params = _prune_none({
            "visitor_key": visitor_key,
            "media_id": media_id,
            "page": page,
            "per_page": per_page,
        })
        return self._call(EventsRoute(), tuple[Event, ...], params=params, callback=callback)

    @runtime_typecheck
    def show_event(self, event_key: str, *, callback: Callback | None = None) -> Future:
        """Wrapper for **GET /stats/events/[event-key].json**.

        Returns:
            Future[Outcome[Event]]
        """
        return self._call(EventRoute(event_key), Event, callback=callback)

    @staticmethod
    @runtime_typecheck
    def heatmap_url(event_key: str, public_token: str) -> str:
        """Public link to an event's heatmap page.

        The page is authorised by the event's *public_token*; no request is
        sent and the API password is never embedded, so the link can be
        shared.

        Raises:
            InvalidRequestURL: an argument is not URL-safe.
        """
        route = HeatmapRoute(event_key, public_token)
        _check_identifiers(route)
        return path_for(route)
