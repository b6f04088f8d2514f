"""Lock-guarded access to the application state aggregate."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from spotify_tui.domain.state.app_state import AppState


class SharedState:
    """Owns the single ``AppState`` and the lock that serializes access to it.

    Hold the lock only for a synchronous merge of results that are already
    in hand. Never await a remote call inside ``access()``: the rendering
    layer takes the same lock to read.
    """

    def __init__(self, app: AppState | None = None) -> None:
        self._app = app or AppState()
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def access(self) -> AsyncIterator[AppState]:
        async with self._lock:
            yield self._app

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    async def set_loading(self, value: bool) -> None:
        async with self.access() as app:
            app.is_loading = value

    async def report(self, error: BaseException) -> None:
        """Record a failure for display."""
        async with self.access() as app:
            app.handle_error(error)
