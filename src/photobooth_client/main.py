"""Headless console runner for the photo booth client."""

import argparse
import asyncio
import logging

from photobooth_client.app_logging import configure_logging
from photobooth_client.containers import AppContainer, build_container

_WATCH_INTERVAL_SECONDS = 0.25

_logger = logging.getLogger(__name__)


async def run(
    container: AppContainer, duration: float | None = None, capture: bool = True
) -> int:
    """Sync the gallery, optionally run one capture session, then shut down."""
    state = container.state
    controller = container.session_controller
    try:
        await container.gallery.sync()
        if not capture:
            return 0
        if not await controller.start():
            return 1
        await _watch(container, duration)
        return 0
    finally:
        if state.is_capturing:
            await controller.stop()
        if state.error:
            _logger.warning(state.error)
        await container.close_resources()


async def _watch(container: AppContainer, duration: float | None) -> None:
    """Log status and countdown changes until the session ends or times out."""
    state = container.state
    loop = asyncio.get_running_loop()
    deadline = None if duration is None else loop.time() + duration
    seen: tuple[str, int | None, int] | None = None
    while state.is_capturing:
        if deadline is not None and loop.time() >= deadline:
            return
        current = (state.status, state.live_countdown, len(state.images))
        if current != seen:
            status, countdown, image_count = current
            _logger.info(
                "Status: %s countdown=%s images=%s", status, countdown, image_count
            )
            seen = current
        await asyncio.sleep(_WATCH_INTERVAL_SECONDS)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="photobooth-client",
        description="Drive a capture session against a photo booth backend.",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Seconds to keep the session running (default: until interrupted).",
    )
    parser.add_argument(
        "--no-capture",
        action="store_true",
        help="Only sync and list the gallery.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    args = _parse_args(argv)
    configure_logging()
    container = build_container()
    try:
        exit_code = asyncio.run(
            run(container, duration=args.duration, capture=not args.no_capture)
        )
    except KeyboardInterrupt:
        _logger.info("Interrupted")
        return 0
    for image in container.state.images:
        print(f"{image.timestamp}  {image.url}")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
