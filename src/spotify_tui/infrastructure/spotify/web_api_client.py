"""Spotify Web API adapter built on httpx."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from spotify_tui.application.interfaces.spotify_client import SpotifyClient
from spotify_tui.domain.shared.constants import SpotifyEndpoints, SpotifyLimits
from spotify_tui.domain.shared.exceptions import SpotifyApiError
from spotify_tui.domain.shared.messages import ErrorMessages, LogTemplates
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
from spotify_tui.domain.spotify.value_objects import RepeatState, track_id_from_uri

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_TIMEOUT: float = 30.0

_FULL_TRACK_LIST = TypeAdapter(list[FullTrack | None])
_FULL_ARTIST_LIST = TypeAdapter(list[FullArtist])
_BOOL_LIST = TypeAdapter(list[bool])


def _chunks(ids: list[str], size: int = SpotifyLimits.MAX_IDS_PER_REQUEST) -> Iterator[list[str]]:
    for start in range(0, len(ids), size):
        yield ids[start : start + size]


def _query(**params: Any) -> dict[str, str | int]:
    """Drop unset parameters and render booleans the way the Web API expects."""
    query: dict[str, str | int] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        elif isinstance(value, list):
            query[key] = ",".join(value)
        else:
            query[key] = value
    return query


class SpotifyWebApiClient(SpotifyClient):
    """Implements :class:`SpotifyClient` against ``api.spotify.com``.

    The bearer token is read from ``token_source`` on every request, so a
    refreshed credential takes effect without rebuilding the client.
    """

    def __init__(
        self,
        token_source: Callable[[], str | None],
        *,
        base_url: str = SpotifyEndpoints.API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token_source = token_source
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            logger.debug(LogTemplates.API_CLIENT_CLOSED)
        self._client = None

    # ── Transport ───────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str | int] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one call and return the decoded JSON body, or ``None`` when empty.

        Raises:
            SpotifyApiError: On a missing token, a transport failure, a non-2xx
                status, or a body that is not JSON.
        """
        token = self._token_source()
        if not token:
            raise SpotifyApiError(ErrorMessages.NO_ACCESS_TOKEN)

        logger.debug(LogTemplates.API_REQUEST, method, path)
        try:
            response = await self._get_client().request(
                method,
                f"{self._base_url}{path}",
                params=params or None,
                json=json,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            logger.warning(LogTemplates.API_TRANSPORT_ERROR, method, path, e)
            raise SpotifyApiError(ErrorMessages.API_TRANSPORT_FAILED.format(error=e)) from e

        if response.is_error:
            logger.warning(LogTemplates.API_ERROR_RESPONSE, response.status_code, method, path)
            raise SpotifyApiError(
                self._error_message(response, method, path), status_code=response.status_code
            )

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise SpotifyApiError(
                ErrorMessages.UNEXPECTED_API_RESPONSE.format(detail=e),
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response, method: str, path: str) -> str:
        # Web API errors look like {"error": {"status": 404, "message": "..."}}.
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return body.get("error_description") or error
        return ErrorMessages.API_REQUEST_FAILED.format(method=method, path=path)

    async def _get_json(self, path: str, **params: Any) -> Any:
        payload = await self._request("GET", path, params=_query(**params))
        if payload is None:
            raise SpotifyApiError(ErrorMessages.EMPTY_API_RESPONSE)
        return payload

    async def _get_object(self, path: str, **params: Any) -> dict[str, Any]:
        """Like :meth:`_get_json`, for endpoints that wrap their results in an object."""
        payload = await self._get_json(path, **params)
        if not isinstance(payload, dict):
            raise SpotifyApiError(
                ErrorMessages.UNEXPECTED_API_RESPONSE.format(detail=type(payload).__name__)
            )
        return payload

    @staticmethod
    def _parse(model: type[M], payload: Any) -> M:
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            raise SpotifyApiError(
                ErrorMessages.UNEXPECTED_API_RESPONSE.format(detail=e.error_count())
            ) from e

    @staticmethod
    def _parse_list(adapter: TypeAdapter[Any], payload: Any) -> Any:
        try:
            return adapter.validate_python(payload)
        except PydanticValidationError as e:
            raise SpotifyApiError(
                ErrorMessages.UNEXPECTED_API_RESPONSE.format(detail=e.error_count())
            ) from e

    async def _get(self, model: type[M], path: str, **params: Any) -> M:
        return self._parse(model, await self._get_json(path, **params))

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        **params: Any,
    ) -> None:
        await self._request(method, path, params=_query(**params), json=json)

    # ── User ────────────────────────────────────────────────────────

    async def current_user(self) -> PrivateUser:
        return await self._get(PrivateUser, "/me")

    async def current_user_playlists(
        self, limit: int, offset: int | None = None
    ) -> Page[SimplifiedPlaylist]:
        return await self._get(Page[SimplifiedPlaylist], "/me/playlists", limit=limit, offset=offset)

    async def current_user_recently_played(self, limit: int) -> CursorPage[PlayHistory]:
        return await self._get(CursorPage[PlayHistory], "/me/player/recently-played", limit=limit)

    # ── Player ──────────────────────────────────────────────────────

    async def devices(self) -> DevicePayload:
        return await self._get(DevicePayload, "/me/player/devices")

    async def current_playback(
        self, market: str | None = None
    ) -> CurrentlyPlaybackContext | None:
        # 204 means no active device.
        payload = await self._request("GET", "/me/player", params=_query(market=market))
        if payload is None:
            return None
        return self._parse(CurrentlyPlaybackContext, payload)

    async def start_playback(
        self,
        device_id: str,
        context_uri: str | None = None,
        uris: list[str] | None = None,
        offset: int | None = None,
    ) -> None:
        body: dict[str, Any] = {}
        if context_uri is not None:
            body["context_uri"] = context_uri
        elif uris is not None:
            body["uris"] = uris
        if offset is not None and body:
            body["offset"] = {"position": offset}
        await self._send("PUT", "/me/player/play", json=body or None, device_id=device_id)

    async def pause_playback(self, device_id: str) -> None:
        await self._send("PUT", "/me/player/pause", device_id=device_id)

    async def seek_track(self, position_ms: int, device_id: str) -> None:
        await self._send("PUT", "/me/player/seek", position_ms=position_ms, device_id=device_id)

    async def next_track(self, device_id: str) -> None:
        await self._send("POST", "/me/player/next", device_id=device_id)

    async def previous_track(self, device_id: str) -> None:
        await self._send("POST", "/me/player/previous", device_id=device_id)

    async def shuffle(self, state: bool, device_id: str) -> None:
        await self._send("PUT", "/me/player/shuffle", state=state, device_id=device_id)

    async def repeat(self, state: RepeatState, device_id: str) -> None:
        await self._send("PUT", "/me/player/repeat", state=state.value, device_id=device_id)

    async def volume(self, volume_percent: int, device_id: str) -> None:
        await self._send(
            "PUT", "/me/player/volume", volume_percent=volume_percent, device_id=device_id
        )

    # ── Saved tracks / albums ───────────────────────────────────────

    async def current_user_saved_tracks(
        self, limit: int, offset: int | None = None
    ) -> Page[SavedTrack]:
        return await self._get(Page[SavedTrack], "/me/tracks", limit=limit, offset=offset)

    async def current_user_saved_tracks_contains(self, track_ids: list[str]) -> list[bool]:
        flags: list[bool] = []
        for chunk in _chunks([track_id_from_uri(t) for t in track_ids]):
            payload = await self._get_json("/me/tracks/contains", ids=chunk)
            flags.extend(self._parse_list(_BOOL_LIST, payload))
        return flags

    async def current_user_saved_tracks_add(self, track_ids: list[str]) -> None:
        for chunk in _chunks([track_id_from_uri(t) for t in track_ids]):
            await self._send("PUT", "/me/tracks", ids=chunk)

    async def current_user_saved_tracks_delete(self, track_ids: list[str]) -> None:
        for chunk in _chunks([track_id_from_uri(t) for t in track_ids]):
            await self._send("DELETE", "/me/tracks", ids=chunk)

    async def current_user_saved_albums(
        self, limit: int, offset: int | None = None
    ) -> Page[SavedAlbum]:
        return await self._get(Page[SavedAlbum], "/me/albums", limit=limit, offset=offset)

    async def current_user_saved_albums_add(self, album_ids: list[str]) -> None:
        for chunk in _chunks(album_ids):
            await self._send("PUT", "/me/albums", ids=chunk)

    async def current_user_saved_albums_delete(self, album_ids: list[str]) -> None:
        for chunk in _chunks(album_ids):
            await self._send("DELETE", "/me/albums", ids=chunk)

    # ── Search ──────────────────────────────────────────────────────

    async def _search(
        self,
        model: type[M],
        search_type: str,
        query: str,
        limit: int,
        offset: int,
        market: str | None,
    ) -> M:
        payload = await self._get_object(
            "/search", q=query, type=search_type, limit=limit, offset=offset, market=market
        )
        section = payload.get(f"{search_type}s") or {}
        if not isinstance(section, dict) or not isinstance(section.get("items") or [], list):
            raise SpotifyApiError(
                ErrorMessages.UNEXPECTED_API_RESPONSE.format(detail=f"{search_type}s section")
            )
        # Playlist searches can contain null entries for removed playlists.
        items = [item for item in section.get("items") or [] if item is not None]
        return self._parse(model, {**section, "items": items})

    async def search_tracks(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[FullTrack]:
        return await self._search(Page[FullTrack], "track", query, limit, offset, market)

    async def search_artists(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[FullArtist]:
        return await self._search(Page[FullArtist], "artist", query, limit, offset, market)

    async def search_albums(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[SimplifiedAlbum]:
        return await self._search(Page[SimplifiedAlbum], "album", query, limit, offset, market)

    async def search_playlists(
        self, query: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[SimplifiedPlaylist]:
        return await self._search(
            Page[SimplifiedPlaylist], "playlist", query, limit, offset, market
        )

    # ── Catalogue ───────────────────────────────────────────────────

    async def playlist_tracks(
        self, playlist_id: str, limit: int, offset: int = 0
    ) -> Page[PlaylistTrack]:
        return await self._get(
            Page[PlaylistTrack], f"/playlists/{playlist_id}/tracks", limit=limit, offset=offset
        )

    async def artist(self, artist_id: str) -> FullArtist:
        return await self._get(FullArtist, f"/artists/{artist_id}")

    async def artist_albums(
        self, artist_id: str, limit: int, offset: int = 0, market: str | None = None
    ) -> Page[SimplifiedAlbum]:
        return await self._get(
            Page[SimplifiedAlbum],
            f"/artists/{artist_id}/albums",
            limit=limit,
            offset=offset,
            market=market,
        )

    async def artist_top_tracks(
        self, artist_id: str, market: str | None = None
    ) -> list[FullTrack]:
        payload = await self._get_object(
            f"/artists/{artist_id}/top-tracks", market=market or "from_token"
        )
        tracks = self._parse_list(_FULL_TRACK_LIST, payload.get("tracks", []))
        return [track for track in tracks if track is not None]

    async def artist_related_artists(self, artist_id: str) -> list[FullArtist]:
        payload = await self._get_object(f"/artists/{artist_id}/related-artists")
        return self._parse_list(_FULL_ARTIST_LIST, payload.get("artists", []))

    async def album(self, album_id: str) -> FullAlbum:
        return await self._get(FullAlbum, f"/albums/{album_id}")

    async def album_tracks(
        self, album_id: str, limit: int, offset: int = 0
    ) -> Page[SimplifiedTrack]:
        return await self._get(
            Page[SimplifiedTrack], f"/albums/{album_id}/tracks", limit=limit, offset=offset
        )

    async def track(self, track_id: str) -> FullTrack:
        return await self._get(FullTrack, f"/tracks/{track_id_from_uri(track_id)}")

    async def tracks(self, track_ids: list[str], market: str | None = None) -> list[FullTrack]:
        resolved: list[FullTrack] = []
        for chunk in _chunks([track_id_from_uri(t) for t in track_ids]):
            payload = await self._get_object("/tracks", ids=chunk, market=market)
            # Unknown ids come back as null entries.
            tracks = self._parse_list(_FULL_TRACK_LIST, payload.get("tracks", []))
            resolved.extend(track for track in tracks if track is not None)
        return resolved

    async def recommendations(
        self,
        *,
        seed_artists: list[str] | None = None,
        seed_tracks: list[str] | None = None,
        limit: int,
        market: str | None = None,
    ) -> Recommendations:
        return await self._get(
            Recommendations,
            "/recommendations",
            seed_artists=seed_artists or None,
            seed_tracks=seed_tracks or None,
            limit=limit,
            market=market,
        )

    async def audio_analysis(self, track_id: str) -> AudioAnalysis:
        return await self._get(AudioAnalysis, f"/audio-analysis/{track_id_from_uri(track_id)}")

    # ── Follows ─────────────────────────────────────────────────────

    async def current_user_followed_artists(
        self, limit: int, after: str | None = None
    ) -> CursorPage[FullArtist]:
        payload = await self._get_object(
            "/me/following", type="artist", limit=limit, after=after
        )
        return self._parse(CursorPage[FullArtist], payload.get("artists", {}))

    async def user_follow_artists(self, artist_ids: list[str]) -> None:
        for chunk in _chunks(artist_ids):
            await self._send("PUT", "/me/following", type="artist", ids=chunk)

    async def user_unfollow_artists(self, artist_ids: list[str]) -> None:
        for chunk in _chunks(artist_ids):
            await self._send("DELETE", "/me/following", type="artist", ids=chunk)

    async def user_follow_playlist(
        self, playlist_owner_id: str, playlist_id: str, public: bool | None = None
    ) -> None:
        """Follow a playlist.

        The followers endpoint is keyed by playlist id alone; the owner id is
        accepted so callers can pass what the playlist listing gives them.
        """
        body = {"public": public} if public is not None else None
        await self._send("PUT", f"/playlists/{playlist_id}/followers", json=body)

    async def user_unfollow_playlist(self, user_id: str, playlist_id: str) -> None:
        await self._send("DELETE", f"/playlists/{playlist_id}/followers")
