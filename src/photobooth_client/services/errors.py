"""Failure classification and user-facing messages for backend calls."""

import logging
from enum import Enum

import httpx

from photobooth_client.domain.state import BoothState

_logger = logging.getLogger(__name__)


class FailureKind(Enum):
    """How a backend call failed."""

    CONNECT_FAILURE = "connect_failure"
    REQUEST_FAILURE = "request_failure"


class CallSite(Enum):
    """Backend operations that surface errors to the user."""

    LIST_IMAGES = "list_images"
    START = "start"
    STOP = "stop"
    POLL = "poll"


_MESSAGES = {
    CallSite.LIST_IMAGES: (
        "Unable to connect to the photo booth server. "
        "Please make sure the backend server is running."
    ),
    CallSite.START: (
        "Unable to start capture. Please make sure the backend server is running."
    ),
    CallSite.STOP: (
        "Unable to stop capture. Please make sure the backend server is running."
    ),
    CallSite.POLL: "Lost connection to the photo booth server.",
}


def classify_failure(exc: BaseException) -> FailureKind:
    """Map an exception raised by a backend call onto the failure taxonomy."""
    if isinstance(exc, httpx.TransportError):
        return FailureKind.CONNECT_FAILURE
    return FailureKind.REQUEST_FAILURE


def error_message(call_site: CallSite) -> str:
    """Return the advisory shown to the user for a failed call."""
    return _MESSAGES[call_site]


def report_failure(
    state: BoothState, call_site: CallSite, exc: Exception
) -> FailureKind:
    """Log a failed call and replace the visible error with its advisory."""
    kind = classify_failure(exc)
    _logger.warning(
        "Booth %s failed (%s, status=%s): %s",
        call_site.value,
        kind.value,
        _status_code_from_exception(exc),
        exc,
    )
    state.error = error_message(call_site)
    return kind


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
