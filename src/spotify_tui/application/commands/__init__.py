"""
Application Commands

Command objects for every user-triggerable action. Commands are the
entire input surface of the dispatcher; ``Command`` is the closed union
of all of them.
"""

from typing import TypeAlias

from spotify_tui.application.commands.base import BaseCommand
from spotify_tui.application.commands.browse import (
    GetAlbumCommand,
    GetAlbumTracksCommand,
    GetArtistCommand,
    GetAudioAnalysisCommand,
    GetRecommendationsForSeedCommand,
    GetRecommendationsForTrackIdCommand,
    GetSearchResultsCommand,
    SetTracksToTableCommand,
)
from spotify_tui.application.commands.library import (
    CurrentUserSavedAlbumAddCommand,
    CurrentUserSavedAlbumDeleteCommand,
    GetCurrentSavedTracksCommand,
    GetCurrentUserSavedAlbumsCommand,
    GetFollowedArtistsCommand,
    GetMadeForYouPlaylistTracksCommand,
    GetPlaylistsCommand,
    GetPlaylistTracksCommand,
    GetRecentlyPlayedCommand,
    GetUserCommand,
    MadeForYouSearchAndAddCommand,
    ToggleSaveTrackCommand,
    UserFollowArtistsCommand,
    UserFollowPlaylistCommand,
    UserUnfollowArtistsCommand,
    UserUnfollowPlaylistCommand,
)
from spotify_tui.application.commands.playback import (
    ChangeVolumeCommand,
    GetCurrentPlaybackCommand,
    GetDevicesCommand,
    NextTrackCommand,
    PausePlaybackCommand,
    PreviousTrackCommand,
    RepeatCommand,
    SeekCommand,
    SetDeviceIdInConfigCommand,
    ShuffleCommand,
    StartPlaybackCommand,
)
from spotify_tui.application.commands.session import (
    RefreshAuthenticationCommand,
    UpdateSearchLimitsCommand,
)

Command: TypeAlias = (
    # Session
    RefreshAuthenticationCommand
    | UpdateSearchLimitsCommand
    # Playback
    | GetCurrentPlaybackCommand
    | GetDevicesCommand
    | SetDeviceIdInConfigCommand
    | StartPlaybackCommand
    | SeekCommand
    | NextTrackCommand
    | PreviousTrackCommand
    | PausePlaybackCommand
    | ShuffleCommand
    | RepeatCommand
    | ChangeVolumeCommand
    # Library
    | GetUserCommand
    | GetPlaylistsCommand
    | GetPlaylistTracksCommand
    | GetMadeForYouPlaylistTracksCommand
    | GetCurrentSavedTracksCommand
    | GetCurrentUserSavedAlbumsCommand
    | CurrentUserSavedAlbumAddCommand
    | CurrentUserSavedAlbumDeleteCommand
    | ToggleSaveTrackCommand
    | GetFollowedArtistsCommand
    | UserFollowArtistsCommand
    | UserUnfollowArtistsCommand
    | UserFollowPlaylistCommand
    | UserUnfollowPlaylistCommand
    | MadeForYouSearchAndAddCommand
    | GetRecentlyPlayedCommand
    # Browse
    | GetSearchResultsCommand
    | SetTracksToTableCommand
    | GetArtistCommand
    | GetAlbumTracksCommand
    | GetAlbumCommand
    | GetRecommendationsForSeedCommand
    | GetRecommendationsForTrackIdCommand
    | GetAudioAnalysisCommand
)

__all__ = [
    "BaseCommand",
    "Command",
    # Session
    "RefreshAuthenticationCommand",
    "UpdateSearchLimitsCommand",
    # Playback
    "GetCurrentPlaybackCommand",
    "GetDevicesCommand",
    "SetDeviceIdInConfigCommand",
    "StartPlaybackCommand",
    "SeekCommand",
    "NextTrackCommand",
    "PreviousTrackCommand",
    "PausePlaybackCommand",
    "ShuffleCommand",
    "RepeatCommand",
    "ChangeVolumeCommand",
    # Library
    "GetUserCommand",
    "GetPlaylistsCommand",
    "GetPlaylistTracksCommand",
    "GetMadeForYouPlaylistTracksCommand",
    "GetCurrentSavedTracksCommand",
    "GetCurrentUserSavedAlbumsCommand",
    "CurrentUserSavedAlbumAddCommand",
    "CurrentUserSavedAlbumDeleteCommand",
    "ToggleSaveTrackCommand",
    "GetFollowedArtistsCommand",
    "UserFollowArtistsCommand",
    "UserUnfollowArtistsCommand",
    "UserFollowPlaylistCommand",
    "UserUnfollowPlaylistCommand",
    "MadeForYouSearchAndAddCommand",
    "GetRecentlyPlayedCommand",
    # Browse
    "GetSearchResultsCommand",
    "SetTracksToTableCommand",
    "GetArtistCommand",
    "GetAlbumTracksCommand",
    "GetAlbumCommand",
    "GetRecommendationsForSeedCommand",
    "GetRecommendationsForTrackIdCommand",
    "GetAudioAnalysisCommand",
]
