"""
Unit Tests for CommandDispatcher playback handlers

Tests for:
- Playback refresh and liked-set update
- Start/seek/skip/pause followed by a playback refresh
- Optimistic shuffle, repeat and volume patches
- Device listing and selection
"""

from unittest.mock import call

import pytest
from factories import make_device, make_playback, make_track, read_app

from spotify_tui.application.commands import (
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
from spotify_tui.domain.shared.exceptions import ConfigPersistenceError, SpotifyApiError
from spotify_tui.domain.spotify.models import DevicePayload
from spotify_tui.domain.spotify.value_objects import RepeatState
from spotify_tui.domain.state.navigation import ActiveBlock, RouteId


class TestGetCurrentPlayback:
    @pytest.mark.asyncio
    async def test_stores_context_and_poll_instant(self, dispatcher, spotify, shared_state):
        playback = make_playback(make_track("t1"))
        spotify.current_playback.return_value = playback
        spotify.current_user_saved_tracks_contains.side_effect = None
        spotify.current_user_saved_tracks_contains.return_value = [True]

        await dispatcher.dispatch(GetCurrentPlaybackCommand(), shared_state)

        app = await read_app(shared_state)
        assert app.current_playback_context == playback
        assert app.last_playback_poll_at == 100.0
        assert app.liked_song_ids_set == {"t1"}
        spotify.current_user_saved_tracks_contains.assert_awaited_once_with(["t1"])

    @pytest.mark.asyncio
    async def test_nothing_playing_leaves_state_untouched(
        self, dispatcher, spotify, shared_state
    ):
        await dispatcher.dispatch(GetCurrentPlaybackCommand(), shared_state)

        app = await read_app(shared_state)
        assert app.current_playback_context is None
        assert app.last_playback_poll_at == 0.0
        spotify.current_user_saved_tracks_contains.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_item_without_id_skips_membership_check(
        self, dispatcher, spotify, shared_state
    ):
        """Local files have no id and cannot be saved."""
        local = make_track("x").model_copy(update={"id": None})
        spotify.current_playback.return_value = make_playback(local)

        await dispatcher.dispatch(GetCurrentPlaybackCommand(), shared_state)

        spotify.current_user_saved_tracks_contains.assert_not_awaited()
        app = await read_app(shared_state)
        assert app.current_playback_context.item.name == "Track x"


class TestStartPlayback:
    @pytest.mark.asyncio
    async def test_context_uri_takes_precedence(self, dispatcher, spotify, shared_state):
        """Should send the context and drop the URI list."""
        spotify.current_playback.return_value = make_playback(make_track("t1"))
        async with shared_state.access() as app:
            app.song_progress_ms = 5000

        await dispatcher.dispatch(
            StartPlaybackCommand(
                context_uri="spotify:album:al1", uris=["spotify:track:t9"], offset=2
            ),
            shared_state,
        )

        spotify.start_playback.assert_awaited_once_with(
            "device-1", context_uri="spotify:album:al1", uris=None, offset=2
        )
        spotify.current_playback.assert_awaited_once()
        app = await read_app(shared_state)
        assert app.song_progress_ms == 0
        assert app.current_playback_context.item.id == "t1"

    @pytest.mark.asyncio
    async def test_uris_without_context(self, dispatcher, spotify, shared_state):
        await dispatcher.dispatch(
            StartPlaybackCommand(uris=["spotify:track:t1", "spotify:track:t2"]), shared_state
        )

        spotify.start_playback.assert_awaited_once_with(
            "device-1",
            context_uri=None,
            uris=["spotify:track:t1", "spotify:track:t2"],
            offset=None,
        )

    @pytest.mark.asyncio
    async def test_no_target_resumes(self, dispatcher, spotify, shared_state):
        await dispatcher.dispatch(StartPlaybackCommand(), shared_state)

        spotify.start_playback.assert_awaited_once_with(
            "device-1", context_uri=None, uris=None, offset=None
        )

    @pytest.mark.asyncio
    async def test_without_device_issues_no_remote_call(
        self, dispatcher, spotify, mock_config_store, shared_state
    ):
        """Should record a precondition failure when no device is selected."""
        mock_config_store.device_id = None
        await shared_state.set_loading(True)

        await dispatcher.dispatch(
            StartPlaybackCommand(context_uri="spotify:album:al1"), shared_state
        )

        spotify.start_playback.assert_not_awaited()
        spotify.current_playback.assert_not_awaited()
        app = await read_app(shared_state)
        assert app.api_error == "No device_id selected"
        assert app.get_current_route().id == RouteId.ERROR
        assert app.is_loading is False

    @pytest.mark.asyncio
    async def test_remote_failure_skips_refresh(self, dispatcher, spotify, shared_state):
        spotify.start_playback.side_effect = SpotifyApiError("Player command failed", 404)
        async with shared_state.access() as app:
            app.song_progress_ms = 5000

        await dispatcher.dispatch(StartPlaybackCommand(), shared_state)

        spotify.current_playback.assert_not_awaited()
        app = await read_app(shared_state)
        assert app.song_progress_ms == 5000
        assert app.api_error == "Player command failed (status 404)"


class TestTransportControls:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("command", "method", "args"),
        [
            (SeekCommand(position_ms=42_000), "seek_track", (42_000, "device-1")),
            (NextTrackCommand(), "next_track", ("device-1",)),
            (PreviousTrackCommand(), "previous_track", ("device-1",)),
            (PausePlaybackCommand(), "pause_playback", ("device-1",)),
        ],
    )
    async def test_refreshes_playback_after_success(
        self, dispatcher, spotify, shared_state, command, method, args
    ):
        playback = make_playback(make_track("t2"))
        spotify.current_playback.return_value = playback

        await dispatcher.dispatch(command, shared_state)

        getattr(spotify, method).assert_awaited_once_with(*args)
        spotify.current_playback.assert_awaited_once()
        app = await read_app(shared_state)
        assert app.current_playback_context == playback

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("command", "method"),
        [
            (SeekCommand(position_ms=42_000), "seek_track"),
            (NextTrackCommand(), "next_track"),
            (PreviousTrackCommand(), "previous_track"),
            (PausePlaybackCommand(), "pause_playback"),
            (ShuffleCommand(shuffle_state=False), "shuffle"),
            (RepeatCommand(repeat_state=RepeatState.OFF), "repeat"),
            (ChangeVolumeCommand(volume_percent=50), "volume"),
        ],
    )
    async def test_without_device_reports_error(
        self, dispatcher, spotify, mock_config_store, shared_state, command, method
    ):
        """Should record a precondition failure instead of silently doing nothing."""
        mock_config_store.device_id = None
        await shared_state.set_loading(True)

        await dispatcher.dispatch(command, shared_state)

        getattr(spotify, method).assert_not_awaited()
        spotify.current_playback.assert_not_awaited()
        app = await read_app(shared_state)
        assert app.api_error == "No device_id selected"
        assert app.get_current_route().id == RouteId.ERROR
        assert app.is_loading is False

    @pytest.mark.asyncio
    async def test_failure_skips_refresh(self, dispatcher, spotify, shared_state):
        spotify.next_track.side_effect = SpotifyApiError("Restricted device", 403)

        await dispatcher.dispatch(NextTrackCommand(), shared_state)

        spotify.current_playback.assert_not_awaited()
        app = await read_app(shared_state)
        assert "Restricted device" in app.api_error


class TestOptimisticPatches:
    @pytest.mark.asyncio
    async def test_shuffle_sends_negated_state(self, dispatcher, spotify, shared_state):
        async with shared_state.access() as app:
            app.current_playback_context = make_playback(make_track(), shuffle=True)

        await dispatcher.dispatch(ShuffleCommand(shuffle_state=True), shared_state)

        spotify.shuffle.assert_awaited_once_with(False, "device-1")
        spotify.current_playback.assert_not_awaited()
        app = await read_app(shared_state)
        assert app.current_playback_context.shuffle_state is False

    @pytest.mark.asyncio
    async def test_refresh_overrides_optimistic_shuffle(self, dispatcher, spotify, shared_state):
        """A later full refresh replaces the locally patched shuffle flag."""
        async with shared_state.access() as app:
            app.current_playback_context = make_playback(make_track(), shuffle=False)

        await dispatcher.dispatch(ShuffleCommand(shuffle_state=False), shared_state)
        app = await read_app(shared_state)
        assert app.current_playback_context.shuffle_state is True

        spotify.current_playback.return_value = make_playback(make_track(), shuffle=False)
        await dispatcher.dispatch(GetCurrentPlaybackCommand(), shared_state)

        app = await read_app(shared_state)
        assert app.current_playback_context.shuffle_state is False

    @pytest.mark.asyncio
    async def test_shuffle_without_context(self, dispatcher, spotify, shared_state):
        await dispatcher.dispatch(ShuffleCommand(shuffle_state=False), shared_state)

        spotify.shuffle.assert_awaited_once_with(True, "device-1")
        app = await read_app(shared_state)
        assert app.current_playback_context is None
        assert app.api_error == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (RepeatState.OFF, RepeatState.CONTEXT),
            (RepeatState.CONTEXT, RepeatState.TRACK),
            (RepeatState.TRACK, RepeatState.OFF),
        ],
    )
    async def test_repeat_rotation(self, dispatcher, spotify, shared_state, current, expected):
        async with shared_state.access() as app:
            app.current_playback_context = make_playback(make_track(), repeat=current)

        await dispatcher.dispatch(RepeatCommand(repeat_state=current), shared_state)

        spotify.repeat.assert_awaited_once_with(expected, "device-1")
        app = await read_app(shared_state)
        assert app.current_playback_context.repeat_state == expected

    @pytest.mark.asyncio
    async def test_repeat_three_cycle_returns_to_start(self, dispatcher, spotify, shared_state):
        async with shared_state.access() as app:
            app.current_playback_context = make_playback(make_track(), repeat=RepeatState.OFF)

        for _ in range(3):
            async with shared_state.access() as app:
                displayed = app.current_playback_context.repeat_state
            await dispatcher.dispatch(RepeatCommand(repeat_state=displayed), shared_state)

        assert spotify.repeat.await_args_list == [
            call(RepeatState.CONTEXT, "device-1"),
            call(RepeatState.TRACK, "device-1"),
            call(RepeatState.OFF, "device-1"),
        ]
        app = await read_app(shared_state)
        assert app.current_playback_context.repeat_state == RepeatState.OFF

    @pytest.mark.asyncio
    async def test_volume_patches_device(self, dispatcher, spotify, shared_state):
        async with shared_state.access() as app:
            app.current_playback_context = make_playback(
                make_track(), device=make_device(volume=30)
            )

        await dispatcher.dispatch(ChangeVolumeCommand(volume_percent=70), shared_state)

        spotify.volume.assert_awaited_once_with(70, "device-1")
        app = await read_app(shared_state)
        assert app.current_playback_context.device.volume_percent == 70
        assert app.current_playback_context.device.name == "Living Room"

    @pytest.mark.asyncio
    async def test_failed_patch_leaves_state(self, dispatcher, spotify, shared_state):
        async with shared_state.access() as app:
            app.current_playback_context = make_playback(
                make_track(), device=make_device(volume=30)
            )
        spotify.volume.side_effect = SpotifyApiError("Cannot control device volume", 403)

        await dispatcher.dispatch(ChangeVolumeCommand(volume_percent=70), shared_state)

        app = await read_app(shared_state)
        assert app.current_playback_context.device.volume_percent == 30


class TestDevices:
    @pytest.mark.asyncio
    async def test_lists_devices_and_selects_first(self, dispatcher, spotify, shared_state):
        payload = DevicePayload(devices=[make_device("d1"), make_device("d2", is_active=False)])
        spotify.devices.return_value = payload

        await dispatcher.dispatch(GetDevicesCommand(), shared_state)

        app = await read_app(shared_state)
        assert app.devices == payload
        assert app.selected_device_index == 0
        route = app.get_current_route()
        assert route.id == RouteId.SELECTED_DEVICE
        assert route.active_block == ActiveBlock.SELECT_DEVICE

    @pytest.mark.asyncio
    async def test_empty_device_list_still_navigates(self, dispatcher, spotify, shared_state):
        spotify.devices.return_value = DevicePayload(devices=[])

        await dispatcher.dispatch(GetDevicesCommand(), shared_state)

        app = await read_app(shared_state)
        assert app.devices is None
        assert app.selected_device_index is None
        assert app.get_current_route().id == RouteId.SELECTED_DEVICE

    @pytest.mark.asyncio
    async def test_set_device_persists_and_pops(
        self, dispatcher, mock_config_store, shared_state
    ):
        async with shared_state.access() as app:
            app.push_navigation_stack(RouteId.SELECTED_DEVICE, ActiveBlock.SELECT_DEVICE)

        await dispatcher.dispatch(SetDeviceIdInConfigCommand(device_id="d2"), shared_state)

        mock_config_store.set_device_id.assert_awaited_once_with("d2")
        app = await read_app(shared_state)
        assert app.get_current_route().id == RouteId.HOME

    @pytest.mark.asyncio
    async def test_set_device_failure_is_reported(
        self, dispatcher, mock_config_store, shared_state
    ):
        mock_config_store.set_device_id.side_effect = ConfigPersistenceError("device_id")
        async with shared_state.access() as app:
            app.push_navigation_stack(RouteId.SELECTED_DEVICE, ActiveBlock.SELECT_DEVICE)

        await dispatcher.dispatch(SetDeviceIdInConfigCommand(device_id="d2"), shared_state)

        app = await read_app(shared_state)
        assert app.api_error == "Could not persist configuration value 'device_id'"
        assert [route.id for route in app.navigation_stack] == [
            RouteId.HOME,
            RouteId.SELECTED_DEVICE,
            RouteId.ERROR,
        ]
