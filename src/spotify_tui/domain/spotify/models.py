"""Pydantic models for Spotify Web API resources.

Only the fields the client reads are declared; anything else in the JSON
payload is ignored. Resource models are frozen, so local patches go through
``model_copy(update=...)``. Pages stay mutable because accumulated result
sets are extended in place.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from spotify_tui.domain.shared.types import NonNegativeInt, VolumePercent
from spotify_tui.domain.spotify.value_objects import RepeatState

T = TypeVar("T")


class _Resource(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


# ── Paging ──────────────────────────────────────────────────────────


class Page(BaseModel, Generic[T]):
    """Offset-based page of results."""

    model_config = ConfigDict(extra="ignore")

    items: list[T] = Field(default_factory=list)
    limit: NonNegativeInt = 0
    offset: NonNegativeInt = 0
    total: NonNegativeInt = 0
    next: str | None = None
    previous: str | None = None


class Cursors(_Resource):
    after: str | None = None
    before: str | None = None


class CursorPage(BaseModel, Generic[T]):
    """Cursor-based page, used for followed artists and recently played."""

    model_config = ConfigDict(extra="ignore")

    items: list[T] = Field(default_factory=list)
    limit: NonNegativeInt = 0
    next: str | None = None
    cursors: Cursors | None = None
    total: NonNegativeInt | None = None


# ── Users ───────────────────────────────────────────────────────────


class PublicUser(_Resource):
    id: str
    display_name: str | None = None
    uri: str | None = None


class PrivateUser(PublicUser):
    country: str | None = None
    email: str | None = None
    product: str | None = None


# ── Artists / albums / tracks ───────────────────────────────────────


class SimplifiedArtist(_Resource):
    id: str | None = None
    name: str
    uri: str | None = None


class FullArtist(SimplifiedArtist):
    genres: list[str] = Field(default_factory=list)
    popularity: int | None = None


class SimplifiedAlbum(_Resource):
    id: str | None = None
    name: str
    uri: str | None = None
    album_type: str | None = None
    artists: list[SimplifiedArtist] = Field(default_factory=list)
    release_date: str | None = None


class SimplifiedTrack(_Resource):
    id: str | None = None
    name: str
    uri: str
    duration_ms: NonNegativeInt = 0
    artists: list[SimplifiedArtist] = Field(default_factory=list)
    track_number: int | None = None
    explicit: bool = False


class FullTrack(SimplifiedTrack):
    album: SimplifiedAlbum | None = None
    popularity: int | None = None


class FullAlbum(SimplifiedAlbum):
    tracks: Page[SimplifiedTrack] = Field(default_factory=Page[SimplifiedTrack])
    genres: list[str] = Field(default_factory=list)


class SavedTrack(_Resource):
    added_at: str | None = None
    track: FullTrack


class SavedAlbum(_Resource):
    added_at: str | None = None
    album: FullAlbum


# ── Playlists ───────────────────────────────────────────────────────


class SimplifiedPlaylist(_Resource):
    id: str
    name: str
    uri: str | None = None
    owner: PublicUser
    public: bool | None = None
    collaborative: bool = False


class PlaylistTrack(_Resource):
    added_at: str | None = None
    # Null for tracks that were removed from the catalogue.
    track: FullTrack | None = None


# ── Player ──────────────────────────────────────────────────────────


class Device(_Resource):
    id: str | None = None
    name: str
    device_type: str = Field(default="Computer", alias="type")
    is_active: bool = False
    is_restricted: bool = False
    volume_percent: VolumePercent | None = None


class DevicePayload(_Resource):
    devices: list[Device] = Field(default_factory=list)


class PlaybackContext(_Resource):
    uri: str
    context_type: str | None = Field(default=None, alias="type")


class CurrentlyPlaybackContext(_Resource):
    """Snapshot returned by ``GET /me/player``."""

    device: Device
    repeat_state: RepeatState = RepeatState.OFF
    shuffle_state: bool = False
    context: PlaybackContext | None = None
    timestamp: int = 0
    progress_ms: int | None = None
    is_playing: bool = False
    item: FullTrack | None = None
    currently_playing_type: str = "track"


class PlayHistory(_Resource):
    track: SimplifiedTrack
    played_at: str
    context: PlaybackContext | None = None


# ── Recommendations / analysis ──────────────────────────────────────


class RecommendationSeed(_Resource):
    id: str
    seed_type: str = Field(alias="type")


class Recommendations(_Resource):
    seeds: list[RecommendationSeed] = Field(default_factory=list)
    tracks: list[SimplifiedTrack] = Field(default_factory=list)


class AudioAnalysis(BaseModel):
    """Audio analysis payload; the sections are passed through as raw dicts."""

    model_config = ConfigDict(frozen=True, extra="allow")

    bars: list[dict[str, Any]] = Field(default_factory=list)
    beats: list[dict[str, Any]] = Field(default_factory=list)
    sections: list[dict[str, Any]] = Field(default_factory=list)
    segments: list[dict[str, Any]] = Field(default_factory=list)
    tatums: list[dict[str, Any]] = Field(default_factory=list)


# ── Authorization ───────────────────────────────────────────────────


class TokenInfo(_Resource):
    """Response body of the accounts service token endpoint."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: NonNegativeInt
    refresh_token: str | None = None
    scope: str = ""
