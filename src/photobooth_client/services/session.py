"""Capture session lifecycle."""

import logging
from dataclasses import dataclass, field

from photobooth_client.adapters.booth_client import BoothClient
from photobooth_client.domain.capture import CapturedImage
from photobooth_client.domain.state import BoothState
from photobooth_client.services.errors import CallSite, report_failure
from photobooth_client.services.gallery import GallerySynchronizer
from photobooth_client.services.poller import StatusPoller

_logger = logging.getLogger(__name__)


@dataclass
class SessionController:
    """Starts and stops capture sessions and owns the status poller."""

    client: BoothClient
    state: BoothState
    gallery: GallerySynchronizer
    poller: StatusPoller = field(init=False)
    _session: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.poller = StatusPoller(
            client=self.client,
            state=self.state,
            gallery=self.gallery,
            on_failure=self._handle_poll_failure,
        )

    async def start(self) -> bool:
        """Begin a session and start polling once the backend accepts it.

        A no-op returning False while a session is already active.
        """
        if self.state.is_capturing or self.poller.running:
            _logger.warning("Capture session already active, ignoring start")
            return False
        self._session += 1
        session = self._session
        self.state.error = None
        self.state.is_capturing = True
        self.state.status = "Starting capture session..."

        try:
            await self.client.start_capture()
        except Exception as exc:
            if session == self._session:
                report_failure(self.state, CallSite.START, exc)
                self.state.status = "Failed to start capture"
                self.state.is_capturing = False
            return False

        if session != self._session or not self.state.is_capturing:
            _logger.info("Capture session ended before polling began")
            return False
        await self.poller.start()
        _logger.info("Capture session started")
        return True

    async def stop(self) -> bool:
        """End the session. The client treats the session as over either way.

        A response that arrives after a newer start() or stop() is ignored.
        """
        self._session += 1
        session = self._session
        self.state.error = None
        self.state.status = "Stopping capture session..."

        try:
            await self.client.stop_capture()
        except Exception as exc:
            if session != self._session:
                _logger.info("Ignoring stop failure from a superseded session")
                return False
            report_failure(self.state, CallSite.STOP, exc)
            self.state.status = "Failed to stop capture"
            self.state.is_capturing = False
            try:
                await self.poller.stop()
            except Exception:
                _logger.exception("Failed to tear down status polling")
            return False

        if session != self._session:
            _logger.info("Ignoring stop response from a superseded session")
            return False
        await self.poller.stop()
        self.state.is_capturing = False
        self.state.error = None
        self.state.status = "Capture session stopped"
        _logger.info("Capture session stopped")
        return True

    async def close(self) -> None:
        """Tear down polling without contacting the backend."""
        self._session += 1
        await self.poller.stop()
        self.state.is_capturing = False

    def select_image(self, image: CapturedImage) -> None:
        """Focus an image for full-size viewing."""
        self.state.selected_image = image

    def close_image(self) -> None:
        """Clear the focused image."""
        self.state.selected_image = None

    def _handle_poll_failure(self, exc: Exception) -> None:
        report_failure(self.state, CallSite.POLL, exc)
        self.state.is_capturing = False
        _logger.info("Capture session ended after polling failure")
