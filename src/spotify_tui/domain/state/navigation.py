"""Routes and panels the rendering layer can show."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class RouteId(StrEnum):
    ALBUM_LIST = "album_list"
    ALBUM_TRACKS = "album_tracks"
    ANALYSIS = "analysis"
    ARTIST = "artist"
    ARTISTS = "artists"
    ERROR = "error"
    HOME = "home"
    MADE_FOR_YOU = "made_for_you"
    RECENTLY_PLAYED = "recently_played"
    RECOMMENDATIONS = "recommendations"
    SEARCH = "search"
    SELECTED_DEVICE = "selected_device"
    TRACK_TABLE = "track_table"


class ActiveBlock(StrEnum):
    ALBUM_LIST = "album_list"
    ALBUM_TRACKS = "album_tracks"
    ANALYSIS = "analysis"
    ARTIST_BLOCK = "artist_block"
    ARTISTS = "artists"
    EMPTY = "empty"
    ERROR = "error"
    HOME = "home"
    INPUT = "input"
    LIBRARY = "library"
    MADE_FOR_YOU = "made_for_you"
    MY_PLAYLISTS = "my_playlists"
    PLAY_BAR = "play_bar"
    RECENTLY_PLAYED = "recently_played"
    SEARCH_RESULT_BLOCK = "search_result_block"
    SELECT_DEVICE = "select_device"
    TRACK_TABLE = "track_table"


class TrackTableContext(StrEnum):
    MY_PLAYLISTS = "my_playlists"
    ALBUM_SEARCH = "album_search"
    PLAYLIST_SEARCH = "playlist_search"
    SAVED_TRACKS = "saved_tracks"
    RECOMMENDED_TRACKS = "recommended_tracks"
    MADE_FOR_YOU = "made_for_you"


class AlbumTableContext(StrEnum):
    SIMPLIFIED = "simplified"
    FULL = "full"


class ArtistBlock(StrEnum):
    TOP_TRACKS = "top_tracks"
    ALBUMS = "albums"
    RELATED_ARTISTS = "related_artists"
    EMPTY = "empty"


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: RouteId
    active_block: ActiveBlock
    hovered_block: ActiveBlock


DEFAULT_ROUTE = Route(id=RouteId.HOME, active_block=ActiveBlock.EMPTY, hovered_block=ActiveBlock.LIBRARY)
