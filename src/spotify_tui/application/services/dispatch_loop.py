"""Background worker that feeds queued commands to the dispatcher one at a time."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from spotify_tui.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..commands import Command
    from .dispatcher import CommandDispatcher
    from .shared_state import SharedState

logger = logging.getLogger(__name__)


class DispatchLoop:
    """Single consumer of the command queue.

    Commands run in submission order and never overlap, so the effects of
    one command are fully applied before the next one starts.
    """

    def __init__(self, *, dispatcher: CommandDispatcher, state: SharedState) -> None:
        self._dispatcher = dispatcher
        self._state = state
        self._queue: asyncio.Queue[Command] = asyncio.Queue()
        self._running = False
        self._task: asyncio.Task | None = None

    async def submit(self, command: Command) -> None:
        """Mark the state as loading and enqueue ``command``."""
        await self._state.set_loading(True)
        self._queue.put_nowait(command)
        logger.debug(LogTemplates.DISPATCH_COMMAND_QUEUED, command.name, self._queue.qsize())

    def start(self) -> None:
        if self._running:
            logger.warning(LogTemplates.DISPATCH_LOOP_ALREADY_RUNNING)
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(LogTemplates.DISPATCH_LOOP_STARTED)

    async def stop(self) -> None:
        """Cancel the worker. Commands still queued are dropped."""
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(LogTemplates.DISPATCH_LOOP_STOPPED)

    async def join(self) -> None:
        """Wait until every submitted command has been dispatched."""
        await self._queue.join()

    async def _run_loop(self) -> None:
        while self._running:
            command = await self._queue.get()
            try:
                await self._dispatcher.dispatch(command, self._state)
            except Exception as e:
                logger.exception(LogTemplates.DISPATCH_UNEXPECTED_ERROR, command.name)
                await self._state.report(e)
            finally:
                self._queue.task_done()

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def pending(self) -> int:
        return self._queue.qsize()
