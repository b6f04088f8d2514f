"""
Unit Tests for the Domain Layer

Tests for:
- ScrollableResultPages accumulation
- AppState navigation, error recording and liked-set updates
- RepeatState rotation and track URI parsing
- Spotify resource parsing
"""

import pytest
from factories import make_page, make_track

from spotify_tui.domain.shared.exceptions import (
    DomainError,
    NoDeviceSelectedError,
    SpotifyApiError,
)
from spotify_tui.domain.spotify.models import CurrentlyPlaybackContext, Device, Page
from spotify_tui.domain.spotify.value_objects import RepeatState, track_id_from_uri
from spotify_tui.domain.state.app_state import AppState
from spotify_tui.domain.state.navigation import DEFAULT_ROUTE, ActiveBlock, RouteId
from spotify_tui.domain.state.pagination import ScrollableResultPages


class TestScrollableResultPages:
    def test_empty(self):
        pages = ScrollableResultPages[Page]()

        assert pages.is_empty
        assert pages.get_results() is None
        assert pages.get_mut_results() is None
        assert pages.items == []

    def test_add_pages_preserves_order_and_counts(self):
        """Total items equal the sum of page sizes, duplicates included."""
        pages = ScrollableResultPages[Page]()
        first = make_page([make_track("t1"), make_track("t2")])
        second = make_page([make_track("t3")], offset=2)

        pages.add_pages(first)
        pages.add_pages(second)
        pages.add_pages(first)

        assert pages.pages == [first, second, first]
        assert [t.id for t in pages.items] == ["t1", "t2", "t3", "t1", "t2"]
        assert len(pages.items) == sum(len(p.items) for p in pages.pages)

    def test_index_follows_newest_page(self):
        pages = ScrollableResultPages[Page]()
        first = make_page([make_track("t1")])
        second = make_page([make_track("t2")])

        pages.add_pages(first)
        assert pages.index == 0
        pages.add_pages(second)

        assert pages.index == 1
        assert pages.get_results() is second
        assert pages.get_results(0) is first

    def test_out_of_range_index(self):
        pages = ScrollableResultPages[Page]()
        pages.add_pages(make_page([make_track()]))

        assert pages.get_results(1) is None
        assert pages.get_results(-1) is None

    def test_mutable_results_extend_in_place(self):
        pages = ScrollableResultPages[Page]()
        pages.add_pages(make_page([make_track("t1")]))

        pages.get_mut_results().items.append(make_track("t2"))

        assert [t.id for t in pages.get_results().items] == ["t1", "t2"]


class TestNavigation:
    def test_starts_at_home(self):
        app = AppState()

        assert app.navigation_stack == [DEFAULT_ROUTE]
        assert app.get_current_route().id == RouteId.HOME

    def test_push_appends_one_entry(self):
        app = AppState()

        pushed = app.push_navigation_stack(RouteId.SEARCH, ActiveBlock.SEARCH_RESULT_BLOCK)

        assert pushed is True
        assert len(app.navigation_stack) == 2
        route = app.get_current_route()
        assert route.active_block == ActiveBlock.SEARCH_RESULT_BLOCK
        assert route.hovered_block == ActiveBlock.SEARCH_RESULT_BLOCK

    def test_push_same_route_is_noop(self):
        app = AppState()
        app.push_navigation_stack(RouteId.TRACK_TABLE, ActiveBlock.TRACK_TABLE)
        before = list(app.navigation_stack)

        pushed = app.push_navigation_stack(RouteId.TRACK_TABLE, ActiveBlock.MY_PLAYLISTS)

        assert pushed is False
        assert app.navigation_stack == before

    def test_pop_never_removes_root(self):
        app = AppState()
        app.push_navigation_stack(RouteId.ERROR, ActiveBlock.ERROR)

        assert app.pop_navigation_stack().id == RouteId.ERROR
        assert app.pop_navigation_stack() is None
        assert app.navigation_stack == [DEFAULT_ROUTE]


class TestErrorRecording:
    def test_handle_error(self):
        app = AppState()

        app.handle_error(RuntimeError("connection reset"))

        assert app.api_error == "connection reset"
        assert app.get_current_route().id == RouteId.ERROR


class TestLikedSongs:
    def test_update_applies_each_flag(self):
        app = AppState(liked_song_ids_set={"t2", "t9"})

        updated = app.update_liked_songs(["t1", "t2", "t3"], [True, False, True])

        assert updated == 3
        assert app.liked_song_ids_set == {"t1", "t3", "t9"}

    def test_ids_without_response_are_left_alone(self):
        app = AppState(liked_song_ids_set={"t2"})

        updated = app.update_liked_songs(["t1", "t2"], [True])

        assert updated == 1
        assert app.liked_song_ids_set == {"t1", "t2"}

    def test_is_liked(self):
        app = AppState(liked_song_ids_set={"t1"})

        assert app.is_liked("t1")
        assert not app.is_liked("t2")
        assert not app.is_liked(None)


class TestRepeatState:
    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (RepeatState.OFF, RepeatState.CONTEXT),
            (RepeatState.CONTEXT, RepeatState.TRACK),
            (RepeatState.TRACK, RepeatState.OFF),
        ],
    )
    def test_next(self, current, expected):
        assert current.next() == expected

    def test_three_steps_return_to_start(self):
        for start in RepeatState:
            assert start.next().next().next() == start


class TestTrackIdFromUri:
    def test_strips_prefix(self):
        assert track_id_from_uri("spotify:track:4uLU6hMCjMI75M1A2tKUQC") == "4uLU6hMCjMI75M1A2tKUQC"

    def test_bare_id_unchanged(self):
        assert track_id_from_uri("4uLU6hMCjMI75M1A2tKUQC") == "4uLU6hMCjMI75M1A2tKUQC"


class TestDomainErrors:
    def test_exported_errors_share_one_root(self):
        """Every exported error is caught by the dispatcher's single DomainError handler."""
        import spotify_tui.domain.shared as shared

        exported = [getattr(shared, name) for name in shared.__all__]

        assert all(issubclass(error, DomainError) for error in exported)
        assert {error.__name__ for error in exported} == {
            "DomainError",
            "SpotifyApiError",
            "NoDeviceSelectedError",
            "CredentialRefreshError",
            "ConfigPersistenceError",
        }

    def test_error_codes(self):
        assert SpotifyApiError("gone", 404).code == "SPOTIFY_API_ERROR"
        assert NoDeviceSelectedError().message == "No device_id selected"
        assert str(SpotifyApiError("offline")) == "offline"


class TestResourceParsing:
    def test_playback_context_from_api_payload(self):
        payload = {
            "device": {
                "id": "d1",
                "name": "Kitchen",
                "type": "Speaker",
                "is_active": True,
                "volume_percent": 40,
            },
            "repeat_state": "context",
            "shuffle_state": True,
            "timestamp": 1700000000000,
            "progress_ms": 1234,
            "is_playing": True,
            "item": {
                "id": "t1",
                "name": "Aerodynamic",
                "uri": "spotify:track:t1",
                "duration_ms": 212000,
                "artists": [{"id": "a1", "name": "Daft Punk"}],
                "available_markets": ["SE"],
            },
            "context": {"uri": "spotify:album:al1", "type": "album"},
            "currently_playing_type": "track",
        }

        context = CurrentlyPlaybackContext.model_validate(payload)

        assert context.repeat_state == RepeatState.CONTEXT
        assert context.device.device_type == "Speaker"
        assert context.item.artists[0].name == "Daft Punk"
        assert context.context.context_type == "album"

    def test_resources_are_frozen(self):
        device = Device(id="d1", name="Kitchen")

        with pytest.raises(ValueError):
            device.volume_percent = 10
