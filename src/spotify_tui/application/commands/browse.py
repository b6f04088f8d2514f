"""Commands that search and browse the catalogue."""

from __future__ import annotations

from pydantic import field_validator

from spotify_tui.application.commands.base import BaseCommand
from spotify_tui.domain.shared.types import MarketStr, NonEmptyStr
from spotify_tui.domain.spotify.models import FullTrack, SimplifiedAlbum


class GetSearchResultsCommand(BaseCommand):
    """Search tracks, artists, albums and playlists at once."""

    search_term: NonEmptyStr
    country: MarketStr | None = None

    @field_validator("search_term", mode="before")
    @classmethod
    def _strip_search_term(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v


class SetTracksToTableCommand(BaseCommand):
    tracks: list[FullTrack]


class GetArtistCommand(BaseCommand):
    """Load an artist view. An empty ``artist_name`` is looked up remotely."""

    artist_id: NonEmptyStr
    artist_name: str = ""
    country: MarketStr | None = None


class GetAlbumTracksCommand(BaseCommand):
    album: SimplifiedAlbum


class GetAlbumCommand(BaseCommand):
    album_id: NonEmptyStr


class GetRecommendationsForSeedCommand(BaseCommand):
    """Build a recommendation queue and start playing it.

    ``first_track`` is placed at the head of the queue when given.
    """

    seed_artists: list[NonEmptyStr] | None = None
    seed_tracks: list[NonEmptyStr] | None = None
    first_track: FullTrack | None = None
    country: MarketStr | None = None


class GetRecommendationsForTrackIdCommand(BaseCommand):
    track_id: NonEmptyStr
    country: MarketStr | None = None


class GetAudioAnalysisCommand(BaseCommand):
    uri: NonEmptyStr
