"""The application state aggregate read by the rendering layer.

A single ``AppState`` instance lives for the whole process. The dispatcher
writes into it only through :class:`~spotify_tui.application.services.shared_state.SharedState`,
which serializes access with one lock.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from spotify_tui.domain.shared.types import NonNegativeFloat, NonNegativeInt
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
    SavedAlbum,
    SavedTrack,
    SimplifiedAlbum,
    SimplifiedPlaylist,
    SimplifiedTrack,
)
from spotify_tui.domain.state.navigation import (
    DEFAULT_ROUTE,
    ActiveBlock,
    AlbumTableContext,
    ArtistBlock,
    Route,
    RouteId,
    TrackTableContext,
)
from spotify_tui.domain.state.pagination import ScrollableResultPages


class TrackTable(BaseModel):
    tracks: list[FullTrack] = Field(default_factory=list)
    selected_index: NonNegativeInt = 0
    context: TrackTableContext | None = None


class SearchResults(BaseModel):
    tracks: Page[FullTrack] | None = None
    artists: Page[FullArtist] | None = None
    albums: Page[SimplifiedAlbum] | None = None
    playlists: Page[SimplifiedPlaylist] | None = None


class Library(BaseModel):
    saved_tracks: ScrollableResultPages[Page[SavedTrack]] = Field(
        default_factory=ScrollableResultPages[Page[SavedTrack]]
    )
    saved_albums: ScrollableResultPages[Page[SavedAlbum]] = Field(
        default_factory=ScrollableResultPages[Page[SavedAlbum]]
    )
    saved_artists: ScrollableResultPages[CursorPage[FullArtist]] = Field(
        default_factory=ScrollableResultPages[CursorPage[FullArtist]]
    )
    made_for_you_playlists: ScrollableResultPages[Page[SimplifiedPlaylist]] = Field(
        default_factory=ScrollableResultPages[Page[SimplifiedPlaylist]]
    )


class ArtistView(BaseModel):
    artist_name: str
    albums: Page[SimplifiedAlbum]
    related_artists: list[FullArtist] = Field(default_factory=list)
    top_tracks: list[FullTrack] = Field(default_factory=list)
    selected_album_index: NonNegativeInt = 0
    selected_related_artist_index: NonNegativeInt = 0
    selected_top_track_index: NonNegativeInt = 0
    artist_hovered_block: ArtistBlock = ArtistBlock.TOP_TRACKS
    artist_selected_block: ArtistBlock = ArtistBlock.EMPTY


class SelectedAlbum(BaseModel):
    album: SimplifiedAlbum
    tracks: Page[SimplifiedTrack]
    selected_index: NonNegativeInt = 0


class SelectedFullAlbum(BaseModel):
    album: FullAlbum
    selected_index: NonNegativeInt = 0


class AppState(BaseModel):
    """Everything the rendering layer can display."""

    is_loading: bool = False
    api_error: str = ""
    navigation_stack: list[Route] = Field(default_factory=lambda: [DEFAULT_ROUTE])

    user: PrivateUser | None = None
    devices: DevicePayload | None = None
    selected_device_index: NonNegativeInt | None = None
    playlists: Page[SimplifiedPlaylist] | None = None
    selected_playlist_index: NonNegativeInt | None = None

    current_playback_context: CurrentlyPlaybackContext | None = None
    # Monotonic timestamp of the last playback refresh; 0.0 means never polled.
    last_playback_poll_at: NonNegativeFloat = 0.0
    song_progress_ms: NonNegativeInt = 0

    liked_song_ids_set: set[str] = Field(default_factory=set)
    track_table: TrackTable = Field(default_factory=TrackTable)
    playlist_tracks: Page[PlaylistTrack] | None = None
    made_for_you_tracks: Page[PlaylistTrack] | None = None
    search_results: SearchResults = Field(default_factory=SearchResults)
    library: Library = Field(default_factory=Library)

    artists: list[FullArtist] = Field(default_factory=list)
    artist: ArtistView | None = None
    selected_album_simplified: SelectedAlbum | None = None
    selected_album_full: SelectedFullAlbum | None = None
    album_table_context: AlbumTableContext = AlbumTableContext.FULL
    recommended_tracks: list[FullTrack] = Field(default_factory=list)
    audio_analysis: AudioAnalysis | None = None
    recently_played: CursorPage[PlayHistory] | None = None

    # ── Navigation ──────────────────────────────────────────────────

    def get_current_route(self) -> Route:
        return self.navigation_stack[-1] if self.navigation_stack else DEFAULT_ROUTE

    def push_navigation_stack(self, route_id: RouteId, active_block: ActiveBlock) -> bool:
        """Push a route unless it is already on top. Returns True when pushed."""
        if self.navigation_stack and self.get_current_route().id == route_id:
            return False
        self.navigation_stack.append(
            Route(id=route_id, active_block=active_block, hovered_block=active_block)
        )
        return True

    def pop_navigation_stack(self) -> Route | None:
        """Pop the top route; the root route is never removed."""
        if len(self.navigation_stack) <= 1:
            return None
        return self.navigation_stack.pop()

    # ── Errors ──────────────────────────────────────────────────────

    def handle_error(self, error: BaseException) -> None:
        self.api_error = str(error)
        self.push_navigation_stack(RouteId.ERROR, ActiveBlock.ERROR)

    # ── Liked tracks ────────────────────────────────────────────────

    def is_liked(self, track_id: str | None) -> bool:
        return track_id is not None and track_id in self.liked_song_ids_set

    def update_liked_songs(self, track_ids: Iterable[str], saved: Iterable[bool]) -> int:
        """Apply a membership check response; ids without a response entry are left alone."""
        updated = 0
        for track_id, is_saved in zip(track_ids, saved, strict=False):
            if is_saved:
                self.liked_song_ids_set.add(track_id)
            else:
                self.liked_song_ids_set.discard(track_id)
            updated += 1
        return updated
