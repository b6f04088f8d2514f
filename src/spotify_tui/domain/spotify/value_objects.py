"""Immutable value objects for Spotify resources."""

from __future__ import annotations

from enum import StrEnum

TRACK_URI_PREFIX = "spotify:track:"


class RepeatState(StrEnum):
    """Repeat mode of the active playback."""

    OFF = "off"
    CONTEXT = "context"
    TRACK = "track"

    def next(self) -> RepeatState:
        """Return the state that follows this one: off → context → track → off."""
        return _REPEAT_ROTATION[self]


_REPEAT_ROTATION: dict[RepeatState, RepeatState] = {
    RepeatState.OFF: RepeatState.CONTEXT,
    RepeatState.CONTEXT: RepeatState.TRACK,
    RepeatState.TRACK: RepeatState.OFF,
}


def track_id_from_uri(value: str) -> str:
    """Accept either a bare track id or a ``spotify:track:`` URI and return the id."""
    if value.startswith(TRACK_URI_PREFIX):
        return value[len(TRACK_URI_PREFIX) :]
    return value
