"""Live status polling for an active capture session."""

import asyncio
import contextlib
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from photobooth_client.adapters.booth_client import BoothClient
from photobooth_client.domain.capture import CaptureStatus
from photobooth_client.domain.state import BoothState
from photobooth_client.services.gallery import GallerySynchronizer

POLL_INTERVAL_SECONDS = 0.1

_logger = logging.getLogger(__name__)


@dataclass
class StatusPoller:
    """Owns the single polling task of a capture session.

    Every tick fetches one snapshot, projects it onto the state and refreshes
    the gallery when the backend reports a new capture. Ticks never overlap.
    A generation counter is checked after each await so a response that was
    in flight when the loop was stopped is discarded.
    """

    client: BoothClient
    state: BoothState
    gallery: GallerySynchronizer
    on_failure: Callable[[Exception], None]
    _task: asyncio.Task[None] | None = field(default=None, init=False, repr=False)
    _generation: int = field(default=0, init=False, repr=False)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def generation(self) -> int:
        return self._generation

    async def start(self) -> None:
        """Start polling, tearing down any previous loop first."""
        await self.stop()
        self._generation += 1
        self._task = asyncio.create_task(
            self._run(self._generation), name=f"booth-poller-{self._generation}"
        )

    async def stop(self) -> None:
        """Stop polling. Safe to call when nothing is running."""
        self._generation += 1
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _run(self, generation: int) -> None:
        loop = asyncio.get_running_loop()
        last_status: str | None = None
        while generation == self._generation:
            started = loop.time()
            try:
                payload = await self.client.get_capture_status()
                snapshot = CaptureStatus.model_validate(payload)
            except Exception as exc:
                if generation != self._generation:
                    return
                self._generation += 1
                self._task = None
                self.on_failure(exc)
                return
            if generation != self._generation:
                return

            self.state.apply_snapshot(snapshot)
            if snapshot.is_captured and last_status != snapshot.status:
                _logger.info("Capture reported, refreshing gallery")
                await self.gallery.sync()
            last_status = snapshot.status

            elapsed = loop.time() - started
            await asyncio.sleep(max(POLL_INTERVAL_SECONDS - elapsed, 0))
