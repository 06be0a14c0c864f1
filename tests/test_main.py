"""Tests for the console runner."""

import asyncio

from photobooth_client.containers import build_container
from photobooth_client.main import _parse_args, run
from tests.conftest import FakeBoothClient, http_error, image, status


def test_run_syncs_gallery_without_capture(settings) -> None:
    client = FakeBoothClient(galleries=[[image("a"), image("b")]])
    container = build_container(settings, booth_client=client)

    exit_code = asyncio.run(run(container, capture=False))

    assert exit_code == 0
    assert client.calls == ["list_images"]
    assert [item.id for item in container.state.images] == ["a", "b"]


def test_run_stops_session_after_duration(settings) -> None:
    client = FakeBoothClient(snapshots=[status("counting", countdown=3)])
    container = build_container(settings, booth_client=client)

    exit_code = asyncio.run(run(container, duration=0.3))

    assert exit_code == 0
    assert client.calls[0] == "list_images"
    assert client.calls[1] == "start_capture"
    assert client.calls[-1] == "stop_capture"
    assert container.state.is_capturing is False
    assert container.state.status == "Capture session stopped"


def test_run_reports_start_failure(settings) -> None:
    client = FakeBoothClient(start_error=http_error("/start-capture", 502))
    container = build_container(settings, booth_client=client)

    exit_code = asyncio.run(run(container, duration=1.0))

    assert exit_code == 1
    assert "stop_capture" not in client.calls


def test_parse_args_defaults() -> None:
    args = _parse_args([])

    assert args.duration is None
    assert args.no_capture is False
