"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photobooth_client.adapters.booth_client import BoothClient, HttpxBoothClient
from photobooth_client.config import Settings
from photobooth_client.domain.state import BoothState
from photobooth_client.services.gallery import GallerySynchronizer
from photobooth_client.services.session import SessionController


@dataclass
class AppContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    booth_client: BoothClient
    state: BoothState
    gallery: GallerySynchronizer
    session_controller: SessionController
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, booth_client: BoothClient | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_booth_client = None
    if booth_client is None:
        http_booth_client = HttpxBoothClient.create(resolved_settings.booth_base_url)
        booth_client = http_booth_client
    state = BoothState()
    gallery = GallerySynchronizer(client=booth_client, state=state)
    session_controller = SessionController(
        client=booth_client, state=state, gallery=gallery
    )

    async def close_resources() -> None:
        await session_controller.close()
        if http_booth_client is not None:
            await http_booth_client.close()

    return AppContainer(
        settings=resolved_settings,
        booth_client=booth_client,
        state=state,
        gallery=gallery,
        session_controller=session_controller,
        close_resources=close_resources,
    )
