from __future__ import annotations

from concurrent.futures import Future

from ._client import BaseClient, Callback
from ._models import AssetKind, Caption, Media, Project
from ._routes import MediaCaptionsRoute, MediaRoute, MediasRoute, ProjectRoute, ProjectsRoute
from ._util import runtime_typecheck, _prune_none

__all__ = ["DataClient"]


class DataClient(BaseClient):
    """High-level wrapper around the **Wistia Data API** (projects & medias).

    Every method sends one GET request and returns immediately with a
    :class:`concurrent.futures.Future`. The future resolves to an
    :class:`~wistia_kit.Outcome`, which unpacks to ``(value, error)``:

    * value set, error ``None`` – decoded resource(s);
    * both ``None`` – the API answered without a body;
    * error set – a transport error (passed through untouched) or a
      :class:`~wistia_kit.DecodeError`.

    Pass ``callback=`` to be called with the same ``(value, error)`` pair on
    completion instead of waiting on the future.

    Args:
        api_password (str):
            Account API password.
        transport (Transport, optional):
            Custom transport; tests substitute an in-memory one.
        base_url (str, optional):
            API root to use instead of ``"https://api.wistia.com/v1/"``.
        debug_mode (DebugMode | str, optional):
            ``"off"``, ``"summary"`` or ``"verbose"`` request logging.

    Methods
    -------
    Projects
        ``list_projects``, ``show_project``.
    Medias
        ``list_medias``, ``show_media``, ``list_media_captions``,
        ``list_media_assets``.

    Raises:
        ValueError:
            Empty *api_password*.
        wistia_kit.InvalidRequestURL:
            Malformed *base_url* (at construction) or an identifier that is
            not URL-safe (at call time).
        TypeError:
            Argument-type errors surfaced by :func:`runtime_typecheck`.

    Examples:
         with DataClient("abc1234567890") as dc:
             media, error = dc.show_media("abcd123").result()
             hd = media.assets_matching(AssetKind.HD_MP4)
    """

    # -------------------------------------------------------------------------
    # Projects
    # -------------------------------------------------------------------------

    @runtime_typecheck
    def list_projects(
            self,
            *,
            page: int | None = None,
            per_page: int | None = None,
            callback: Callback | None = None,
    ) -> Future:
        """Wrapper for **GET /projects.json**.

        Args:
            page (int | None):
                1-based page number.
            per_page (int | None):
                Projects per page (the API caps this at 100).
            callback (Callback | None):
                Called with ``(projects, error)`` on completion.

        Returns:
            Future[Outcome[tuple[Project, ...]]]
        """
        params = _prune_none({"page": page, "per_page": per_page})
        return self._call(ProjectsRoute(), tuple[Project, ...], params=params, callback=callback)

    @runtime_typecheck
    def show_project(self, project_id: str, *, callback: Callback | None = None) -> Future:
        """Wrapper for **GET /projects/[project-id].json**, medias included.

        Returns:
            Future[Outcome[Project]]
        """
        return self._call(ProjectRoute(project_id), Project, callback=callback)

    # -------------------------------------------------------------------------
    # Medias
    # -------------------------------------------------------------------------

    @runtime_typecheck
    def list_medias(
            self,
            *,
            search: str | None = None,
            page: int | None = None,
            per_page: int | None = None,
            callback: Callback | None = None,
    ) -> Future:
        """Wrapper for **GET /medias.json**.

        Args:
            search (str | None):
                Only medias whose name matches.
            page (int | None):
                1-based page number.
            per_page (int | None):
                Medias per page (the API caps this at 100).
            callback (Callback | None):
                Called with ``(medias, error)`` on completion.

        Returns:
            Future[Outcome[tuple[Media, ...]]]
        """
        params = _prune_none({"name": search, "page": page, "per_page": per_page})
        return self._call(MediasRoute(), tuple[Media, ...], params=params, callback=callback)

    @runtime_typecheck
    def show_media(self, media_id: str, *, callback: Callback | None = None) -> Future:
        """Wrapper for **GET /medias/[media-id].json**.

        Returns:
            Future[Outcome[Media]]
        """
        return self._call(MediaRoute(media_id), Media, callback=callback)

    @runtime_typecheck
    def list_media_captions(self, media_id: str, *, callback: Callback | None = None) -> Future:
        """Wrapper for **GET /medias/[media-id]/captions.json**.

        Returns:
            Future[Outcome[tuple[Caption, ...]]]
        """
        return self._call(MediaCaptionsRoute(media_id), tuple[Caption, ...], callback=callback)

    @runtime_typecheck
    def list_media_assets(
            self,
            media_id: str,
            *,
            asset_kind: AssetKind | str | None = None,
            callback: Callback | None = None,
    ) -> Future:
        """Assets of a media, optionally narrowed to one kind.

        Issues a single :meth:`show_media` request, then filters locally with
        :meth:`Media.assets_matching`. You often just want
        ``AssetKind.ORIGINAL``.

        Args:
            media_id (str):
                Hashed id of the media.
            asset_kind (AssetKind | str | None):
                Kind to keep; a raw token is compared ignoring case.
                ``None`` keeps every asset.
            callback (Callback | None):
                Called with ``(assets, error)`` on completion.

        Returns:
            Future[Outcome[tuple[Asset, ...]]]
        """
        def _project(media: Media):
            return media.assets if asset_kind is None else media.assets_matching(asset_kind)

        return self._then(self.show_media(media_id), _project, callback)
