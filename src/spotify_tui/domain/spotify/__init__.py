"""
Spotify Resources

Models and value objects describing the Web API payloads the client consumes.
"""

from spotify_tui.domain.spotify.models import (
    AudioAnalysis,
    CurrentlyPlaybackContext,
    CursorPage,
    Device,
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
    TokenInfo,
)
from spotify_tui.domain.spotify.value_objects import RepeatState, track_id_from_uri

__all__ = [
    "AudioAnalysis",
    "CurrentlyPlaybackContext",
    "CursorPage",
    "Device",
    "DevicePayload",
    "FullAlbum",
    "FullArtist",
    "FullTrack",
    "Page",
    "PlayHistory",
    "PlaylistTrack",
    "PrivateUser",
    "Recommendations",
    "RepeatState",
    "SavedAlbum",
    "SavedTrack",
    "SimplifiedAlbum",
    "SimplifiedPlaylist",
    "SimplifiedTrack",
    "TokenInfo",
    "track_id_from_uri",
]
