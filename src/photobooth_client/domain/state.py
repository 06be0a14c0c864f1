"""In-memory state observed by the booth UI."""

from dataclasses import dataclass, field

from photobooth_client.domain.capture import (
    CapturedImage,
    CaptureStatus,
    frame_data_url,
)


@dataclass
class BoothState:
    """Session fields, gallery and modal focus for one client process.

    ``countdown``, ``status`` and ``current_frame`` are only meaningful while
    ``is_capturing`` is true; use ``live_countdown`` and ``preview_url`` to
    read them safely.
    """

    is_capturing: bool = False
    countdown: int | None = None
    status: str = ""
    current_frame: str | None = None
    error: str | None = None
    images: list[CapturedImage] = field(default_factory=list)
    selected_image: CapturedImage | None = None

    def apply_snapshot(self, snapshot: CaptureStatus) -> None:
        """Replace live fields with the snapshot's values, absent ones included."""
        self.countdown = snapshot.countdown
        self.status = snapshot.status
        self.current_frame = snapshot.frame

    @property
    def live_countdown(self) -> int | None:
        if not self.is_capturing:
            return None
        return self.countdown

    @property
    def preview_url(self) -> str | None:
        if not self.is_capturing or not self.current_frame:
            return None
        return frame_data_url(self.current_frame)
