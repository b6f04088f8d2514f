"""
Unit Tests for Application Commands

Tests for:
- Field validation and normalization
- Immutability and naming
- Playback target resolution
"""

import pytest
from pydantic import ValidationError

from spotify_tui.application.commands import (
    ChangeVolumeCommand,
    GetAlbumTracksCommand,
    GetSearchResultsCommand,
    MadeForYouSearchAndAddCommand,
    RepeatCommand,
    SeekCommand,
    StartPlaybackCommand,
    ToggleSaveTrackCommand,
    UpdateSearchLimitsCommand,
)
from spotify_tui.domain.spotify.value_objects import RepeatState


class TestCommandBasics:
    def test_name_drops_suffix(self):
        assert ToggleSaveTrackCommand(track_id="t1").name == "ToggleSaveTrack"

    def test_commands_are_frozen(self):
        command = ToggleSaveTrackCommand(track_id="t1")

        with pytest.raises(ValidationError):
            command.track_id = "t2"

    def test_strict_types(self):
        """Should not coerce strings into integers."""
        with pytest.raises(ValidationError):
            SeekCommand(position_ms="1000")


class TestSearchCommands:
    def test_search_term_is_stripped(self):
        assert GetSearchResultsCommand(search_term="  daft punk ").search_term == "daft punk"

    @pytest.mark.parametrize("term", ["", "   "])
    def test_blank_term_rejected(self, term):
        with pytest.raises(ValidationError):
            GetSearchResultsCommand(search_term=term)

    def test_market_must_be_country_code(self):
        with pytest.raises(ValidationError):
            GetSearchResultsCommand(search_term="air", country="france")

    def test_made_for_you_term_is_stripped(self):
        command = MadeForYouSearchAndAddCommand(search_term=" Discover Weekly ")

        assert command.search_term == "Discover Weekly"

    @pytest.mark.parametrize(("large", "small"), [(0, 4), (20, 51)])
    def test_search_limits_bounded(self, large, small):
        with pytest.raises(ValidationError):
            UpdateSearchLimitsCommand(large_search_limit=large, small_search_limit=small)


class TestPlaybackCommands:
    def test_context_wins_over_uris(self):
        command = StartPlaybackCommand(context_uri="spotify:album:al1", uris=["spotify:track:t1"])

        assert command.resolve_target() == ("spotify:album:al1", None)

    def test_uris_only(self):
        command = StartPlaybackCommand(uris=["spotify:track:t1"])

        assert command.resolve_target() == (None, ["spotify:track:t1"])

    def test_resume(self):
        assert StartPlaybackCommand().resolve_target() == (None, None)

    def test_negative_offset_rejected(self):
        with pytest.raises(ValidationError):
            StartPlaybackCommand(uris=["spotify:track:t1"], offset=-1)

    @pytest.mark.parametrize("volume", [-1, 101])
    def test_volume_bounds(self, volume):
        with pytest.raises(ValidationError):
            ChangeVolumeCommand(volume_percent=volume)

    def test_repeat_accepts_wire_value(self):
        assert RepeatCommand(repeat_state="track").repeat_state is RepeatState.TRACK

    def test_repeat_rejects_unknown_value(self):
        with pytest.raises(ValidationError):
            RepeatCommand(repeat_state="shuffle")


class TestBrowseCommands:
    def test_album_tracks_requires_album(self):
        with pytest.raises(ValidationError):
            GetAlbumTracksCommand()
