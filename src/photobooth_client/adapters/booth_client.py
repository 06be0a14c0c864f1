"""Photo booth backend API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class BoothClient(Protocol):
    """Interface for the capture backend's HTTP surface."""

    async def list_images(self) -> list[dict[str, object]]:
        """Return the raw image collection in backend order."""

    async def start_capture(self) -> None:
        """Ask the backend to begin a capture session."""

    async def stop_capture(self) -> None:
        """Ask the backend to end the capture session."""

    async def get_capture_status(self) -> dict[str, object]:
        """Return the raw live status snapshot."""


@dataclass
class HttpxBoothClient(BoothClient):
    """HTTPX-backed booth client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxBoothClient":
        """Create a booth client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def list_images(self) -> list[dict[str, object]]:
        """Fetch every stored image."""
        response = await self.http_client.get(f"{self.base_url}/images")
        response.raise_for_status()
        return response.json()

    async def start_capture(self) -> None:
        """Start a capture session; the response body is ignored."""
        response = await self.http_client.post(f"{self.base_url}/start-capture")
        response.raise_for_status()

    async def stop_capture(self) -> None:
        """Stop the capture session; the response body is ignored."""
        response = await self.http_client.post(f"{self.base_url}/stop-capture")
        response.raise_for_status()

    async def get_capture_status(self) -> dict[str, object]:
        """Fetch the current countdown, phase and preview frame."""
        response = await self.http_client.get(f"{self.base_url}/capture-status")
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
