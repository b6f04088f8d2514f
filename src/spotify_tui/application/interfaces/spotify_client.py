"""Port interface for the Spotify Web API.

Every method performs exactly one remote operation and raises
:class:`~spotify_tui.domain.shared.exceptions.SpotifyApiError` on any failure.
``market`` is an ISO 3166-1 alpha-2 country code or ``None`` for the
user's own market.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from spotify_tui.domain.spotify.models import (
    AudioAnalysis,
    CurrentlyPlaybackContext,
    CursorPage,
    DevicePayload,
    FullAlbum,
    FullArtist,
    FullTrack,
    Page,
    PlayHistory,
    PlaylistTrack,
    PrivateUser,
    Recommendations,
    SavedAlbum,
    SavedTrack,
    SimplifiedAlbum,
    SimplifiedPlaylist,
    SimplifiedTrack,
)
from spotify_tui.domain.spotify.value_objects import RepeatState


class SpotifyClient(ABC):
    """Typed access to the remote operations the dispatcher performs."""

    # ── User ────────────────────────────────────────────────────────

    @abstractmethod
    async def current_user(self) -> PrivateUser: ...

    @abstractmethod
    async def current_user_playlists(
        self, limit: int, offset: int | None = None
    ) -> Page[SimplifiedPlaylist]: ...

    @abstractmethod
    async def current_user_recently_played(self, limit: int) -> CursorPage[PlayHistory]: ...

    # ── Player ──────────────────────────────────────────────────────

    @abstractmethod
    async def devices(self) -> DevicePayload: ...

    @abstractmethod
    async def current_playback(
        self, market: str | None = None
    ) -> CurrentlyPlaybackContext | None:
        """Return the playback snapshot, or ``None`` when nothing is active."""
        ...

    @abstractmethod
    async def start_playback(
        self,
        device_id: str,
        context_uri: str | None = None,
        uris: list[str] | None = None,
        offset: int | None = None,
    ) -> None: ...

    @abstractmethod
    async def pause_playback(self, device_id: str) -> None: ...

    @abstractmethod
    async def seek_track(self, position_ms: int, device_id: str) -> None: ...

    @abstractmethod
    async def next_track(self, device_id: str) -> None: ...

    @abstractmethod
    async def previous_track(self, device_id: str) -> None: ...

    @abstractmethod
    async def shuffle(self, state: bool, device_id: str) -> None: ...

    @abstractmethod
    async def repeat(self, state: RepeatState, device_id: str) -> None: ...

    @abstractmethod
    async def volume(self, volume_percent: int, device_id: str) -> None: ...

    # ── Saved tracks / albums ───────────────────────────────────────

    @abstractmethod
    async def current_user_saved_tracks(
        self, limit: int, offset: int | None = None
    ) -> Page[SavedTrack]: ...

    @abstractmethod
    async def current_user_saved_tracks_contains(self, track_ids: list[str]) -> list[bool]:
        """Return one flag per id, in the order the ids were given."""
        ...

    @abstractmethod
    async def current_user_saved_tracks_add(self, track_ids: list[str]) -> None: ...

    @abstractmethod
    async def current_user_saved_tracks_delete(self, track_ids: list[str]) -> None: ...

    @abstractmethod
    async def current_user_saved_albums(
        self, limit: int, offset: int | None = None
    ) -> Page[SavedAlbum]: ...

    @abstractmethod
    async def current_user_saved_albums_add(self, album_ids: list[str]) -> None: ...

    @abstractmethod
    async def current_user_saved_albums_delete(self, album_ids: list[str]) -> None: ...

    # ── Search ──────────────────────────────────────────────────────

    @abstractmethod
    async def search_tracks(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[FullTrack]: ...

    @abstractmethod
    async def search_artists(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[FullArtist]: ...

    @abstractmethod
    async def search_albums(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[SimplifiedAlbum]: ...

    @abstractmethod
    async def search_playlists(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[SimplifiedPlaylist]: ...

    # ── Catalogue ───────────────────────────────────────────────────

    @abstractmethod
    async def playlist_tracks(
        self, playlist_id: str, limit: int, offset: int = 0
    ) -> Page[PlaylistTrack]: ...

    @abstractmethod
    async def artist(self, artist_id: str) -> FullArtist: ...

    @abstractmethod
    async def artist_albums(
        self, artist_id: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[SimplifiedAlbum]: ...

    @abstractmethod
    async def artist_top_tracks(
        self, artist_id: str, market: str | None = None
    ) -> list[FullTrack]: ...

    @abstractmethod
    async def artist_related_artists(self, artist_id: str) -> list[FullArtist]: ...

    @abstractmethod
    async def album(self, album_id: str) -> FullAlbum: ...

    @abstractmethod
    async def album_tracks(
        self, album_id: str, limit: int, offset: int = 0
    ) -> Page[SimplifiedTrack]: ...

    @abstractmethod
    async def track(self, track_id: str) -> FullTrack: ...

    @abstractmethod
    async def tracks(self, track_ids: list[str], market: str | None = None) -> list[FullTrack]:
        """Batch lookup; accepts bare ids or ``spotify:track:`` URIs."""
        ...

    @abstractmethod
    async def recommendations(
        self,
        *,
        seed_artists: list[str] | None = None,
        seed_tracks: list[str] | None = None,
        limit: int,
        market: str | None = None,
    ) -> Recommendations: ...

    @abstractmethod
    async def audio_analysis(self, track_id: str) -> AudioAnalysis: ...

    # ── Follows ─────────────────────────────────────────────────────

    @abstractmethod
    async def current_user_followed_artists(
        self, limit: int, after: str | None = None
    ) -> CursorPage[FullArtist]: ...

    @abstractmethod
    async def user_follow_artists(self, artist_ids: list[str]) -> None: ...

    @abstractmethod
    async def user_unfollow_artists(self, artist_ids: list[str]) -> None: ...

    @abstractmethod
    async def user_follow_playlist(
        self, playlist_owner_id: str, playlist_id: str, public: bool | None = None
    ) -> None: ...

    @abstractmethod
    async def user_unfollow_playlist(self, user_id: str, playlist_id: str) -> None: ...
