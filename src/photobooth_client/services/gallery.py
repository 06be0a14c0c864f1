"""Gallery synchronization with the backend's image store."""

import logging
from dataclasses import dataclass

from photobooth_client.adapters.booth_client import BoothClient
from photobooth_client.domain.capture import CapturedImage
from photobooth_client.domain.state import BoothState
from photobooth_client.services.errors import CallSite, report_failure

_logger = logging.getLogger(__name__)


@dataclass
class GallerySynchronizer:
    """Keeps ``state.images`` equal to the backend's latest collection."""

    client: BoothClient
    state: BoothState

    async def sync(self) -> bool:
        """Fetch all images and replace the gallery wholesale.

        On failure the previous gallery is left untouched. Overlapping calls
        are safe: each one replaces the whole list, so the last to finish wins.
        Returns whether the gallery was refreshed.
        """
        self.state.error = None
        try:
            payload = await self.client.list_images()
            images = [CapturedImage.model_validate(item) for item in payload]
        except Exception as exc:
            report_failure(self.state, CallSite.LIST_IMAGES, exc)
            return False
        self.state.images = images
        _logger.info("Gallery synced: images=%s", len(images))
        return True
