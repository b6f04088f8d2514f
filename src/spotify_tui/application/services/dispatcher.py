"""Command Dispatcher - turns one command into remote calls and state writes.

Each command type maps to one handler. Handlers follow a fixed discipline:

- Remote calls happen first, with the state lock released. Calls that do
  not depend on each other are joined in one ``asyncio.TaskGroup``; the
  first failure cancels the rest and aborts the handler.
- Results are merged under a short ``SharedState.access()`` block that
  never awaits a remote call.
- Handlers raise ``DomainError`` subclasses on failure. ``dispatch`` funnels
  every one of them into ``AppState.handle_error`` and always clears the
  loading flag afterwards.

Three consistency policies coexist on purpose:

- Track lists re-query saved-track membership after loading.
- Follow/unfollow re-fetch the authoritative list.
- Shuffle, repeat, volume and save-toggles patch local state optimistically.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Coroutine
from typing import TYPE_CHECKING, Any

from spotify_tui.application.commands import (
    ChangeVolumeCommand,
    Command,
    CurrentUserSavedAlbumAddCommand,
    CurrentUserSavedAlbumDeleteCommand,
    GetAlbumCommand,
    GetAlbumTracksCommand,
    GetArtistCommand,
    GetAudioAnalysisCommand,
    GetCurrentPlaybackCommand,
    GetCurrentSavedTracksCommand,
    GetCurrentUserSavedAlbumsCommand,
    GetDevicesCommand,
    GetFollowedArtistsCommand,
    GetMadeForYouPlaylistTracksCommand,
    GetPlaylistsCommand,
    GetPlaylistTracksCommand,
    GetRecentlyPlayedCommand,
    GetRecommendationsForSeedCommand,
    GetRecommendationsForTrackIdCommand,
    GetSearchResultsCommand,
    GetUserCommand,
    MadeForYouSearchAndAddCommand,
    NextTrackCommand,
    PausePlaybackCommand,
    PreviousTrackCommand,
    RefreshAuthenticationCommand,
    RepeatCommand,
    SeekCommand,
    SetDeviceIdInConfigCommand,
    SetTracksToTableCommand,
    ShuffleCommand,
    StartPlaybackCommand,
    ToggleSaveTrackCommand,
    UpdateSearchLimitsCommand,
    UserFollowArtistsCommand,
    UserFollowPlaylistCommand,
    UserUnfollowArtistsCommand,
    UserUnfollowPlaylistCommand,
)
from spotify_tui.domain.shared.constants import SpotifyLimits
from spotify_tui.domain.shared.exceptions import DomainError, NoDeviceSelectedError
from spotify_tui.domain.shared.messages import ErrorMessages, LogTemplates
from spotify_tui.domain.spotify.models import FullTrack
from spotify_tui.domain.spotify.value_objects import track_id_from_uri
from spotify_tui.domain.state.app_state import ArtistView, SelectedAlbum, SelectedFullAlbum
from spotify_tui.domain.state.navigation import (
    ActiveBlock,
    AlbumTableContext,
    RouteId,
    TrackTableContext,
)
from spotify_tui.utils.logging import command_context

if TYPE_CHECKING:
    from ..interfaces.config_store import ClientConfigStore
    from ..interfaces.spotify_client import SpotifyClient
    from .credentials import CredentialManager
    from .shared_state import SharedState

logger = logging.getLogger(__name__)

Handler = Callable[[Any, "SharedState"], Awaitable[None]]


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    first = group.exceptions[0]
    if isinstance(first, BaseExceptionGroup):
        return _first_leaf(first)
    return first


async def _join(*calls: Coroutine[Any, Any, Any]) -> tuple[Any, ...]:
    """Await independent calls concurrently; the first failure is raised on its own."""
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(call) for call in calls]
    except BaseExceptionGroup as group:
        raise _first_leaf(group) from None
    return tuple(task.result() for task in tasks)


class CommandDispatcher:
    """Executes one command at a time against the Web API and the shared state."""

    def __init__(
        self,
        *,
        spotify_client: SpotifyClient,
        credentials: CredentialManager,
        config_store: ClientConfigStore,
        large_search_limit: int = SpotifyLimits.LARGE_SEARCH_LIMIT,
        small_search_limit: int = SpotifyLimits.SMALL_SEARCH_LIMIT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._spotify = spotify_client
        self._credentials = credentials
        self._config = config_store
        self._large_search_limit = large_search_limit
        self._small_search_limit = small_search_limit
        self._clock = clock

        self._handlers: dict[type, Handler] = {
            RefreshAuthenticationCommand: self._handle_refresh_authentication,
            UpdateSearchLimitsCommand: self._handle_update_search_limits,
            # Playback
            GetCurrentPlaybackCommand: self._handle_get_current_playback,
            GetDevicesCommand: self._handle_get_devices,
            SetDeviceIdInConfigCommand: self._handle_set_device_id_in_config,
            StartPlaybackCommand: self._handle_start_playback,
            SeekCommand: self._handle_seek,
            NextTrackCommand: self._handle_next_track,
            PreviousTrackCommand: self._handle_previous_track,
            PausePlaybackCommand: self._handle_pause_playback,
            ShuffleCommand: self._handle_shuffle,
            RepeatCommand: self._handle_repeat,
            ChangeVolumeCommand: self._handle_change_volume,
            # Library
            GetUserCommand: self._handle_get_user,
            GetPlaylistsCommand: self._handle_get_playlists,
            GetPlaylistTracksCommand: self._handle_get_playlist_tracks,
            GetMadeForYouPlaylistTracksCommand: self._handle_get_made_for_you_playlist_tracks,
            GetCurrentSavedTracksCommand: self._handle_get_current_saved_tracks,
            GetCurrentUserSavedAlbumsCommand: self._handle_get_current_user_saved_albums,
            CurrentUserSavedAlbumAddCommand: self._handle_saved_album_add,
            CurrentUserSavedAlbumDeleteCommand: self._handle_saved_album_delete,
            ToggleSaveTrackCommand: self._handle_toggle_save_track,
            GetFollowedArtistsCommand: self._handle_get_followed_artists,
            UserFollowArtistsCommand: self._handle_user_follow_artists,
            UserUnfollowArtistsCommand: self._handle_user_unfollow_artists,
            UserFollowPlaylistCommand: self._handle_user_follow_playlist,
            UserUnfollowPlaylistCommand: self._handle_user_unfollow_playlist,
            MadeForYouSearchAndAddCommand: self._handle_made_for_you_search_and_add,
            GetRecentlyPlayedCommand: self._handle_get_recently_played,
            # Browse
            GetSearchResultsCommand: self._handle_get_search_results,
            SetTracksToTableCommand: self._handle_set_tracks_to_table,
            GetArtistCommand: self._handle_get_artist,
            GetAlbumTracksCommand: self._handle_get_album_tracks,
            GetAlbumCommand: self._handle_get_album,
            GetRecommendationsForSeedCommand: self._handle_get_recommendations_for_seed,
            GetRecommendationsForTrackIdCommand: self._handle_get_recommendations_for_track_id,
            GetAudioAnalysisCommand: self._handle_get_audio_analysis,
        }

    @property
    def large_search_limit(self) -> int:
        return self._large_search_limit

    @property
    def small_search_limit(self) -> int:
        return self._small_search_limit

    async def dispatch(self, command: Command, state: SharedState) -> None:
        """Run the handler for ``command``.

        Domain failures are recorded in the state instead of being raised.
        The loading flag is cleared exactly once, after every remote call and
        state write of this command has finished.
        """
        token = command_context.set(command.name)
        started = self._clock()
        logger.debug(LogTemplates.DISPATCH_STARTED, command.name)
        try:
            handler = self._handlers.get(type(command))
            if handler is None:
                logger.error(LogTemplates.DISPATCH_NO_HANDLER, command.name)
                return
            await handler(command, state)
        except DomainError as e:
            logger.warning(LogTemplates.DISPATCH_FAILED, command.name, e)
            await state.report(e)
        finally:
            await state.set_loading(False)
            logger.debug(LogTemplates.DISPATCH_FINISHED, command.name, self._clock() - started)
            command_context.reset(token)

    # ── Shared steps ────────────────────────────────────────────────

    def _require_device(self) -> str:
        device_id = self._config.device_id
        if not device_id:
            raise NoDeviceSelectedError(ErrorMessages.NO_DEVICE_SELECTED)
        return device_id

    async def _saved_tracks_contains(self, state: SharedState, track_ids: list[str]) -> None:
        """Re-query saved status for ``track_ids`` and update the liked set."""
        if not track_ids:
            return
        saved = await self._spotify.current_user_saved_tracks_contains(track_ids)
        async with state.access() as app:
            updated = app.update_liked_songs(track_ids, saved)
        logger.debug(LogTemplates.LIKED_SET_UPDATED, updated)

    async def _set_tracks_to_table(self, state: SharedState, tracks: list[FullTrack]) -> None:
        await self._saved_tracks_contains(
            state, [track.id for track in tracks if track.id is not None]
        )
        async with state.access() as app:
            app.track_table.tracks = list(tracks)

    async def _refresh_playback(self, state: SharedState) -> None:
        context = await self._spotify.current_playback()
        if context is None:
            return

        if context.item is not None and context.item.id is not None:
            await self._saved_tracks_contains(state, [context.item.id])

        async with state.access() as app:
            app.current_playback_context = context
            app.last_playback_poll_at = self._clock()

    async def _start_playback(
        self,
        state: SharedState,
        context_uri: str | None,
        uris: list[str] | None,
        offset: int | None,
    ) -> None:
        device_id = self._require_device()
        await self._spotify.start_playback(
            device_id, context_uri=context_uri, uris=uris, offset=offset
        )
        logger.info(LogTemplates.PLAYBACK_STARTED, device_id)

        await self._refresh_playback(state)
        async with state.access() as app:
            app.song_progress_ms = 0

    async def _load_playlists(self, state: SharedState) -> None:
        playlists = await self._spotify.current_user_playlists(self._large_search_limit)
        async with state.access() as app:
            app.playlists = playlists
            app.selected_playlist_index = 0

    async def _load_followed_artists(self, state: SharedState, after: str | None) -> None:
        page = await self._spotify.current_user_followed_artists(self._large_search_limit, after)
        async with state.access() as app:
            app.artists = list(page.items)
            app.library.saved_artists.add_pages(page)

    async def _load_saved_albums(self, state: SharedState, offset: int | None) -> None:
        page = await self._spotify.current_user_saved_albums(self._large_search_limit, offset)
        # An empty page would replace the visible one with a blank view.
        if not page.items:
            return
        async with state.access() as app:
            app.library.saved_albums.add_pages(page)

    async def _recommend_and_play(
        self,
        state: SharedState,
        seed_artists: list[str] | None,
        seed_tracks: list[str] | None,
        first_track: FullTrack | None,
        country: str | None,
    ) -> None:
        recommendations = await self._spotify.recommendations(
            seed_artists=seed_artists,
            seed_tracks=seed_tracks,
            limit=self._large_search_limit,
            market=country,
        )
        recommended_uris = [track.uri for track in recommendations.tracks]
        recommended: list[FullTrack] = []
        if recommended_uris:
            recommended = list(await self._spotify.tracks(recommended_uris, market=country))
        logger.debug(LogTemplates.RECOMMENDATIONS_RESOLVED, len(recommended))

        if first_track is not None:
            recommended.insert(0, first_track)
        if not recommended:
            return

        await self._set_tracks_to_table(state, recommended)
        async with state.access() as app:
            app.recommended_tracks = list(recommended)
            app.track_table.context = TrackTableContext.RECOMMENDED_TRACKS
            app.push_navigation_stack(RouteId.RECOMMENDATIONS, ActiveBlock.TRACK_TABLE)

        await self._start_playback(state, None, [track.uri for track in recommended], 0)

    # ── Session ─────────────────────────────────────────────────────

    async def _handle_refresh_authentication(
        self, command: RefreshAuthenticationCommand, state: SharedState
    ) -> None:
        # No retry here: the next remote call will fail with an authorization
        # error until a later refresh succeeds.
        await self._credentials.refresh()

    async def _handle_update_search_limits(
        self, command: UpdateSearchLimitsCommand, state: SharedState
    ) -> None:
        self._large_search_limit = command.large_search_limit
        self._small_search_limit = command.small_search_limit
        logger.debug(
            LogTemplates.SEARCH_LIMITS_UPDATED,
            self._large_search_limit,
            self._small_search_limit,
        )

    # ── Playback ────────────────────────────────────────────────────

    async def _handle_get_current_playback(
        self, command: GetCurrentPlaybackCommand, state: SharedState
    ) -> None:
        await self._refresh_playback(state)

    async def _handle_get_devices(self, command: GetDevicesCommand, state: SharedState) -> None:
        payload = await self._spotify.devices()
        async with state.access() as app:
            app.push_navigation_stack(RouteId.SELECTED_DEVICE, ActiveBlock.SELECT_DEVICE)
            if payload.devices:
                app.devices = payload
                app.selected_device_index = 0

    async def _handle_set_device_id_in_config(
        self, command: SetDeviceIdInConfigCommand, state: SharedState
    ) -> None:
        await self._config.set_device_id(command.device_id)
        async with state.access() as app:
            app.pop_navigation_stack()

    async def _handle_start_playback(
        self, command: StartPlaybackCommand, state: SharedState
    ) -> None:
        context_uri, uris = command.resolve_target()
        await self._start_playback(state, context_uri, uris, command.offset)

    async def _handle_seek(self, command: SeekCommand, state: SharedState) -> None:
        device_id = self._require_device()
        await self._spotify.seek_track(command.position_ms, device_id)
        await self._refresh_playback(state)

    async def _handle_next_track(self, command: NextTrackCommand, state: SharedState) -> None:
        device_id = self._require_device()
        await self._spotify.next_track(device_id)
        await self._refresh_playback(state)

    async def _handle_previous_track(
        self, command: PreviousTrackCommand, state: SharedState
    ) -> None:
        device_id = self._require_device()
        await self._spotify.previous_track(device_id)
        await self._refresh_playback(state)

    async def _handle_pause_playback(
        self, command: PausePlaybackCommand, state: SharedState
    ) -> None:
        device_id = self._require_device()
        await self._spotify.pause_playback(device_id)
        await self._refresh_playback(state)

    async def _handle_shuffle(self, command: ShuffleCommand, state: SharedState) -> None:
        device_id = self._require_device()
        new_state = not command.shuffle_state
        await self._spotify.shuffle(new_state, device_id)

        # Patch now instead of waiting for the next playback poll.
        async with state.access() as app:
            context = app.current_playback_context
            if context is not None:
                app.current_playback_context = context.model_copy(
                    update={"shuffle_state": new_state}
                )

    async def _handle_repeat(self, command: RepeatCommand, state: SharedState) -> None:
        device_id = self._require_device()
        next_state = command.repeat_state.next()
        await self._spotify.repeat(next_state, device_id)

        async with state.access() as app:
            context = app.current_playback_context
            if context is not None:
                app.current_playback_context = context.model_copy(
                    update={"repeat_state": next_state}
                )

    async def _handle_change_volume(
        self, command: ChangeVolumeCommand, state: SharedState
    ) -> None:
        device_id = self._require_device()
        await self._spotify.volume(command.volume_percent, device_id)

        async with state.access() as app:
            context = app.current_playback_context
            if context is not None:
                device = context.device.model_copy(
                    update={"volume_percent": command.volume_percent}
                )
                app.current_playback_context = context.model_copy(update={"device": device})

    # ── Library ─────────────────────────────────────────────────────

    async def _handle_get_user(self, command: GetUserCommand, state: SharedState) -> None:
        user = await self._spotify.current_user()
        async with state.access() as app:
            app.user = user

    async def _handle_get_playlists(
        self, command: GetPlaylistsCommand, state: SharedState
    ) -> None:
        await self._load_playlists(state)

    async def _handle_get_playlist_tracks(
        self, command: GetPlaylistTracksCommand, state: SharedState
    ) -> None:
        page = await self._spotify.playlist_tracks(
            command.playlist_id, self._large_search_limit, command.offset
        )
        await self._set_tracks_to_table(
            state, [item.track for item in page.items if item.track is not None]
        )
        async with state.access() as app:
            app.playlist_tracks = page
            app.push_navigation_stack(RouteId.TRACK_TABLE, ActiveBlock.TRACK_TABLE)

    async def _handle_get_made_for_you_playlist_tracks(
        self, command: GetMadeForYouPlaylistTracksCommand, state: SharedState
    ) -> None:
        page = await self._spotify.playlist_tracks(
            command.playlist_id, self._large_search_limit, command.offset
        )
        await self._set_tracks_to_table(
            state, [item.track for item in page.items if item.track is not None]
        )
        async with state.access() as app:
            app.made_for_you_tracks = page
            app.push_navigation_stack(RouteId.TRACK_TABLE, ActiveBlock.TRACK_TABLE)

    async def _handle_get_current_saved_tracks(
        self, command: GetCurrentSavedTracksCommand, state: SharedState
    ) -> None:
        page = await self._spotify.current_user_saved_tracks(
            self._large_search_limit, command.offset
        )
        await self._set_tracks_to_table(state, [saved.track for saved in page.items])
        async with state.access() as app:
            app.library.saved_tracks.add_pages(page)
            app.track_table.context = TrackTableContext.SAVED_TRACKS
            if command.should_navigate:
                app.push_navigation_stack(RouteId.TRACK_TABLE, ActiveBlock.TRACK_TABLE)

    async def _handle_get_current_user_saved_albums(
        self, command: GetCurrentUserSavedAlbumsCommand, state: SharedState
    ) -> None:
        await self._load_saved_albums(state, command.offset)

    async def _handle_saved_album_add(
        self, command: CurrentUserSavedAlbumAddCommand, state: SharedState
    ) -> None:
        await self._spotify.current_user_saved_albums_add([command.album_id])

    async def _handle_saved_album_delete(
        self, command: CurrentUserSavedAlbumDeleteCommand, state: SharedState
    ) -> None:
        await self._spotify.current_user_saved_albums_delete([command.album_id])
        await self._load_saved_albums(state, None)

    async def _handle_toggle_save_track(
        self, command: ToggleSaveTrackCommand, state: SharedState
    ) -> None:
        track_id = command.track_id
        saved = await self._spotify.current_user_saved_tracks_contains([track_id])

        # The liked set is patched locally here rather than re-queried.
        if saved and saved[0]:
            await self._spotify.current_user_saved_tracks_delete([track_id])
            async with state.access() as app:
                app.liked_song_ids_set.discard(track_id)
        else:
            await self._spotify.current_user_saved_tracks_add([track_id])
            async with state.access() as app:
                app.liked_song_ids_set.add(track_id)

    async def _handle_get_followed_artists(
        self, command: GetFollowedArtistsCommand, state: SharedState
    ) -> None:
        await self._load_followed_artists(state, command.after)

    async def _handle_user_follow_artists(
        self, command: UserFollowArtistsCommand, state: SharedState
    ) -> None:
        await self._spotify.user_follow_artists(list(command.artist_ids))
        await self._load_followed_artists(state, None)

    async def _handle_user_unfollow_artists(
        self, command: UserUnfollowArtistsCommand, state: SharedState
    ) -> None:
        await self._spotify.user_unfollow_artists(list(command.artist_ids))
        await self._load_followed_artists(state, None)

    async def _handle_user_follow_playlist(
        self, command: UserFollowPlaylistCommand, state: SharedState
    ) -> None:
        await self._spotify.user_follow_playlist(
            command.playlist_owner_id, command.playlist_id, command.is_public
        )
        await self._load_playlists(state)

    async def _handle_user_unfollow_playlist(
        self, command: UserUnfollowPlaylistCommand, state: SharedState
    ) -> None:
        await self._spotify.user_unfollow_playlist(command.user_id, command.playlist_id)
        await self._load_playlists(state)

    async def _handle_made_for_you_search_and_add(
        self, command: MadeForYouSearchAndAddCommand, state: SharedState
    ) -> None:
        page = await self._spotify.search_playlists(
            command.search_term, self._large_search_limit, 0, command.country
        )
        matches = [
            playlist
            for playlist in page.items
            if playlist.owner.id == SpotifyLimits.SPOTIFY_OWNER_ID
            and playlist.name == command.search_term
        ]
        logger.debug(LogTemplates.MADE_FOR_YOU_FILTERED, command.search_term, len(matches))

        async with state.access() as app:
            made_for_you = app.library.made_for_you_playlists
            current = made_for_you.get_mut_results()
            if current is not None:
                current.items.extend(matches)
            else:
                made_for_you.add_pages(page.model_copy(update={"items": matches}))

    async def _handle_get_recently_played(
        self, command: GetRecentlyPlayedCommand, state: SharedState
    ) -> None:
        page = await self._spotify.current_user_recently_played(self._large_search_limit)
        await self._saved_tracks_contains(
            state, [item.track.id for item in page.items if item.track.id is not None]
        )
        async with state.access() as app:
            app.recently_played = page
            app.push_navigation_stack(RouteId.RECENTLY_PLAYED, ActiveBlock.RECENTLY_PLAYED)

    # ── Browse ──────────────────────────────────────────────────────

    async def _handle_get_search_results(
        self, command: GetSearchResultsCommand, state: SharedState
    ) -> None:
        term, limit, market = command.search_term, self._small_search_limit, command.country
        tracks, artists, albums, playlists = await _join(
            self._spotify.search_tracks(term, limit, 0, market),
            self._spotify.search_artists(term, limit, 0, market),
            self._spotify.search_albums(term, limit, 0, market),
            self._spotify.search_playlists(term, limit, 0, market),
        )

        await self._set_tracks_to_table(state, list(tracks.items))
        async with state.access() as app:
            app.search_results.tracks = tracks
            app.search_results.artists = artists
            app.search_results.albums = albums
            app.search_results.playlists = playlists

    async def _handle_set_tracks_to_table(
        self, command: SetTracksToTableCommand, state: SharedState
    ) -> None:
        await self._set_tracks_to_table(state, list(command.tracks))

    async def _handle_get_artist(self, command: GetArtistCommand, state: SharedState) -> None:
        artist_id, market = command.artist_id, command.country
        artist_name = command.artist_name
        if not artist_name:
            artist_name = (await self._spotify.artist(artist_id)).name

        albums, top_tracks, related_artists = await _join(
            self._spotify.artist_albums(artist_id, self._large_search_limit, 0, market),
            self._spotify.artist_top_tracks(artist_id, market),
            self._spotify.artist_related_artists(artist_id),
        )

        async with state.access() as app:
            app.artist = ArtistView(
                artist_name=artist_name,
                albums=albums,
                related_artists=related_artists,
                top_tracks=top_tracks,
            )
            app.push_navigation_stack(RouteId.ARTIST, ActiveBlock.ARTIST_BLOCK)

    async def _handle_get_album_tracks(
        self, command: GetAlbumTracksCommand, state: SharedState
    ) -> None:
        album = command.album
        if album.id is None:
            return

        page = await self._spotify.album_tracks(album.id, self._large_search_limit, 0)
        await self._saved_tracks_contains(
            state, [track.id for track in page.items if track.id is not None]
        )
        async with state.access() as app:
            app.selected_album_simplified = SelectedAlbum(album=album, tracks=page)
            app.album_table_context = AlbumTableContext.SIMPLIFIED
            app.push_navigation_stack(RouteId.ALBUM_TRACKS, ActiveBlock.ALBUM_TRACKS)

    async def _handle_get_album(self, command: GetAlbumCommand, state: SharedState) -> None:
        album = await self._spotify.album(command.album_id)
        async with state.access() as app:
            app.selected_album_full = SelectedFullAlbum(album=album)
            app.album_table_context = AlbumTableContext.FULL
            app.push_navigation_stack(RouteId.ALBUM_TRACKS, ActiveBlock.ALBUM_TRACKS)

    async def _handle_get_recommendations_for_seed(
        self, command: GetRecommendationsForSeedCommand, state: SharedState
    ) -> None:
        await self._recommend_and_play(
            state,
            list(command.seed_artists) if command.seed_artists is not None else None,
            list(command.seed_tracks) if command.seed_tracks is not None else None,
            command.first_track,
            command.country,
        )

    async def _handle_get_recommendations_for_track_id(
        self, command: GetRecommendationsForTrackIdCommand, state: SharedState
    ) -> None:
        track = await self._spotify.track(command.track_id)
        seed_tracks = [track.id] if track.id is not None else None
        await self._recommend_and_play(state, None, seed_tracks, track, command.country)

    async def _handle_get_audio_analysis(
        self, command: GetAudioAnalysisCommand, state: SharedState
    ) -> None:
        analysis = await self._spotify.audio_analysis(track_id_from_uri(command.uri))
        async with state.access() as app:
            app.audio_analysis = analysis
            app.push_navigation_stack(RouteId.ANALYSIS, ActiveBlock.ANALYSIS)
