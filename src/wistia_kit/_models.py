"""Resource shapes — Pydantic models the decoder validates payloads against.

Invariants:
    - Every model is frozen: a decoded resource is never mutated
    - Unknown JSON keys are ignored; missing required keys are decode errors
    - Sequences decode to tuples
    - AssetKind is closed: an unknown ``type`` token fails the whole decode

Field names follow the API's JSON; camelCase keys are mapped through aliases.
"""
from __future__ import annotations

from enum import Enum

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field

__all__ = [
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
]


class _Resource(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# --- Data API -----------------------------------------------------------------

class AssetKind(str, Enum):
    """Kind of file an asset holds, as the ``type`` token the API sends."""
    ORIGINAL = "OriginalFile"
    IPHONE = "IphoneVideoFile"
    HLS = "HlsVideoFile"
    SMALL_MP4 = "Mp4VideoFile"
    SD_MP4 = "MdMp4VideoFile"
    HD_MP4 = "HdMp4VideoFile"
    IMAGE = "StillImageFile"
    STORYBOARD = "StoryboardFile"


class Thumbnail(_Resource):
    url: AnyHttpUrl
    width: int
    height: int


class Asset(_Resource):
    """One rendition of a media file."""
    url: AnyHttpUrl
    content_type: str = Field(alias="contentType")
    type: AssetKind
    file_size: int = Field(alias="fileSize")
    width: int
    height: int


class Caption(_Resource):
    english_name: str
    native_name: str
    language: str
    text: str


class Media(_Resource):
    """A video, audio file or image stored in the account."""
    hashed_id: str
    name: str
    type: str
    description: str
    section: str | None = None
    duration: float | None = None
    thumbnail: Thumbnail
    assets: tuple[Asset, ...] = ()
    embed_code: str | None = Field(None, alias="embedCode")

    def assets_matching(self, kind: AssetKind | str) -> tuple[Asset, ...]:
        """Assets of the given kind.

        An :class:`AssetKind` matches exactly; a raw token such as
        ``"hdmp4videofile"`` matches the kind's token ignoring case.
        """
        if isinstance(kind, AssetKind):
            return tuple(a for a in self.assets if a.type is kind)
        wanted = kind.casefold()
        return tuple(a for a in self.assets if a.type.value.casefold() == wanted)

    def urls_of_kind(self, kind: AssetKind | str) -> tuple[str, ...]:
        return tuple(str(a.url) for a in self.assets_matching(kind))

    def admin_url(self, account: str) -> str:
        """Link to this media's page in the account's Wistia admin."""
        return f"https://{account}.wistia.com/medias/{self.hashed_id}"


class Project(_Resource):
    """A folder of medias.

    ``medias`` is only populated by ``show_project``; the project list omits it.
    """
    hashed_id: str
    name: str | None = None
    description: str | None = None
    media_count: int | None = Field(None, alias="mediaCount")
    medias: tuple[Media, ...] = ()


# --- Stats API ----------------------------------------------------------------

class UserAgentDetails(_Resource):
    browser: str
    browser_version: str
    platform: str
    mobile: bool


class VisitorIdentity(_Resource):
    name: str | None = None
    email: str | None = None
    org: dict[str, str] | None = None


class Visitor(_Resource):
    visitor_key: str
    load_count: int
    play_count: int
    created_at: str | None = None
    last_active_at: str | None = None
    visitor_identity: VisitorIdentity | None = None
    user_agent_details: UserAgentDetails | None = None


class Event(_Resource):
    """One viewing session of one media by one visitor."""
    event_key: str
    visitor_key: str | None = None
    email: str | None = None
    percent_viewed: float
    media_id: str
    media_name: str
    embed_url: str | None = None
    received_at: str | None = None
    user_agent_details: UserAgentDetails | None = None


class AccountStats(_Resource):
    load_count: int
    play_count: int
    hours_watched: float


class ProjectStats(_Resource):
    load_count: int
    play_count: int
    hours_watched: float
    number_of_videos: int


class MediaStats(_Resource):
    load_count: int
    play_count: int
    play_rate: float
    hours_watched: float
    engagement: float
    visitors: int


class MediaEngagement(_Resource):
    """Per-second engagement curve of a media."""
    engagement: float
    engagement_data: tuple[float, ...] = ()
    rewatch_data: tuple[float, ...] = ()
