"""Commands that read or drive the player on the selected output device."""

from __future__ import annotations

from pydantic import field_validator

from spotify_tui.application.commands.base import BaseCommand
from spotify_tui.domain.shared.types import (
    NonEmptyStr,
    NonNegativeInt,
    PositionMs,
    VolumePercent,
)
from spotify_tui.domain.spotify.value_objects import RepeatState


class GetCurrentPlaybackCommand(BaseCommand):
    """Refresh the playback snapshot."""


class GetDevicesCommand(BaseCommand):
    """List the user's available output devices."""


class SetDeviceIdInConfigCommand(BaseCommand):
    """Persist the output device that playback commands target."""

    device_id: NonEmptyStr


class StartPlaybackCommand(BaseCommand):
    """Start playback of a context or an explicit list of track URIs.

    When both are given the context wins. With neither, the device resumes
    whatever it was playing.
    """

    context_uri: NonEmptyStr | None = None
    uris: list[NonEmptyStr] | None = None
    offset: NonNegativeInt | None = None

    def resolve_target(self) -> tuple[str | None, list[str] | None]:
        """Return ``(context_uri, uris)`` with at most one of them set."""
        if self.context_uri is not None:
            return self.context_uri, None
        if self.uris is not None:
            return None, list(self.uris)
        return None, None


class SeekCommand(BaseCommand):
    position_ms: PositionMs


class NextTrackCommand(BaseCommand):
    pass


class PreviousTrackCommand(BaseCommand):
    pass


class PausePlaybackCommand(BaseCommand):
    pass


class ShuffleCommand(BaseCommand):
    """Toggle shuffle. ``shuffle_state`` is the state currently displayed."""

    shuffle_state: bool


class RepeatCommand(BaseCommand):
    """Advance repeat mode. ``repeat_state`` is the state currently displayed."""

    repeat_state: RepeatState

    @field_validator("repeat_state", mode="before")
    @classmethod
    def _coerce_repeat_state(cls, v: object) -> object:
        if isinstance(v, str) and not isinstance(v, RepeatState):
            return RepeatState(v)
        return v


class ChangeVolumeCommand(BaseCommand):
    volume_percent: VolumePercent
