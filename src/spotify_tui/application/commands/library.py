"""Commands over the user's library: playlists, saved items and follows."""

from __future__ import annotations

from pydantic import field_validator

from spotify_tui.application.commands.base import BaseCommand
from spotify_tui.domain.shared.types import MarketStr, NonEmptyStr, NonNegativeInt


class GetUserCommand(BaseCommand):
    pass


class GetPlaylistsCommand(BaseCommand):
    pass


class GetPlaylistTracksCommand(BaseCommand):
    playlist_id: NonEmptyStr
    offset: NonNegativeInt = 0


class GetMadeForYouPlaylistTracksCommand(BaseCommand):
    playlist_id: NonEmptyStr
    offset: NonNegativeInt = 0


class GetCurrentSavedTracksCommand(BaseCommand):
    offset: NonNegativeInt | None = None
    should_navigate: bool = False


class GetCurrentUserSavedAlbumsCommand(BaseCommand):
    offset: NonNegativeInt | None = None


class CurrentUserSavedAlbumAddCommand(BaseCommand):
    album_id: NonEmptyStr


class CurrentUserSavedAlbumDeleteCommand(BaseCommand):
    album_id: NonEmptyStr


class ToggleSaveTrackCommand(BaseCommand):
    """Like the track if it is not saved yet, otherwise remove it."""

    track_id: NonEmptyStr


class GetFollowedArtistsCommand(BaseCommand):
    after: NonEmptyStr | None = None


class UserFollowArtistsCommand(BaseCommand):
    artist_ids: list[NonEmptyStr]


class UserUnfollowArtistsCommand(BaseCommand):
    artist_ids: list[NonEmptyStr]


class UserFollowPlaylistCommand(BaseCommand):
    playlist_owner_id: NonEmptyStr
    playlist_id: NonEmptyStr
    is_public: bool | None = None


class UserUnfollowPlaylistCommand(BaseCommand):
    user_id: NonEmptyStr
    playlist_id: NonEmptyStr


class MadeForYouSearchAndAddCommand(BaseCommand):
    """Find a Spotify-curated playlist by exact name and add it to Made For You."""

    search_term: NonEmptyStr
    country: MarketStr | None = None

    @field_validator("search_term", mode="before")
    @classmethod
    def _strip_search_term(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v


class GetRecentlyPlayedCommand(BaseCommand):
    pass
