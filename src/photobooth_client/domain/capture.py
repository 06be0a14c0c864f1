"""Wire models returned by the capture backend."""

from pydantic import BaseModel, ConfigDict

CAPTURED_STATUS = "captured"


class CapturedImage(BaseModel):
    """A photo stored by the backend."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    timestamp: str


class CaptureStatus(BaseModel):
    """One polled snapshot of the capture session."""

    active: bool = False
    countdown: int | None = None
    status: str
    frame: str | None = None

    @property
    def is_captured(self) -> bool:
        return self.status == CAPTURED_STATUS


def frame_data_url(frame: str) -> str:
    """Prefix a raw base64 preview frame for display."""
    return f"data:image/jpeg;base64,{frame}"
