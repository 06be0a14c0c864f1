"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import httpx
import pytest

from photobooth_client.adapters.booth_client import BoothClient
from photobooth_client.config import Settings
from photobooth_client.domain.state import BoothState
from photobooth_client.services.gallery import GallerySynchronizer
from photobooth_client.services.session import SessionController

BASE_URL = "http://booth.test"


def http_error(path: str, status_code: int = 500) -> httpx.HTTPStatusError:
    """Build the error httpx raises for a non-2xx response."""
    request = httpx.Request("GET", f"{BASE_URL}{path}")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("Server error", request=request, response=response)


def connect_error(path: str) -> httpx.ConnectError:
    return httpx.ConnectError(
        "Connection refused", request=httpx.Request("GET", f"{BASE_URL}{path}")
    )


def status(
    phase: str, countdown: int | None = None, frame: str | None = None
) -> dict[str, object]:
    return {"active": True, "countdown": countdown, "status": phase, "frame": frame}


def image(image_id: str) -> dict[str, object]:
    return {
        "id": image_id,
        "url": f"{BASE_URL}/images/{image_id}.jpg",
        "timestamp": "2026-10-19 12:00:00",
    }


@dataclass
class FakeBoothClient(BoothClient):
    """Scripted booth backend.

    ``snapshots`` are served in order and the last one repeats forever. An
    exception in either script is raised instead of returned.
    """

    snapshots: list[object] = field(default_factory=lambda: [status("idle")])
    galleries: list[object] = field(default_factory=lambda: [[]])
    start_error: Exception | None = None
    stop_error: Exception | None = None
    calls: list[str] = field(default_factory=list)
    poll_count: int = 0
    gate: asyncio.Event | None = None

    async def list_images(self) -> list[dict[str, object]]:
        self.calls.append("list_images")
        if len(self.galleries) > 1:
            result = self.galleries.pop(0)
        else:
            result = self.galleries[0]
        if isinstance(result, Exception):
            raise result
        return result

    async def start_capture(self) -> None:
        self.calls.append("start_capture")
        if self.start_error is not None:
            raise self.start_error

    async def stop_capture(self) -> None:
        self.calls.append("stop_capture")
        if self.stop_error is not None:
            raise self.stop_error

    async def get_capture_status(self) -> dict[str, object]:
        self.calls.append("get_capture_status")
        self.poll_count += 1
        if self.gate is not None:
            await self.gate.wait()
        if len(self.snapshots) > 1:
            result = self.snapshots.pop(0)
        else:
            result = self.snapshots[0]
        if isinstance(result, Exception):
            raise result
        return result

    async def wait_for_polls(self, count: int, timeout: float = 3.0) -> None:
        async def _wait() -> None:
            while self.poll_count < count:
                await asyncio.sleep(0.01)

        await asyncio.wait_for(_wait(), timeout=timeout)

    def count(self, name: str) -> int:
        return self.calls.count(name)


@pytest.fixture
def settings() -> Settings:
    return Settings(booth_base_url=BASE_URL)


def build_controller(client: BoothClient, state: BoothState) -> SessionController:
    gallery = GallerySynchronizer(client=client, state=state)
    return SessionController(client=client, state=state, gallery=gallery)
