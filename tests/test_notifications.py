"""Tests for toast notifications"""
import asyncio

import pytest

from rocketshoes.services.notifications import ToastNotifier


def test_capture_collects_errors():
    notifier = ToastNotifier()

    with notifier.capture() as toasts:
        notifier.error("first")
        notifier.error("second")

    assert toasts == [
        {"type": "error", "message": "first"},
        {"type": "error", "message": "second"},
    ]


def test_error_outside_capture_is_only_logged():
    notifier = ToastNotifier()
    notifier.error("nobody listening")

    with notifier.capture() as toasts:
        pass

    assert toasts == []


@pytest.mark.asyncio
async def test_captures_are_isolated_per_task():
    notifier = ToastNotifier()

    async def request(message):
        with notifier.capture() as toasts:
            await asyncio.sleep(0)
            notifier.error(message)
            await asyncio.sleep(0)
        return toasts

    first, second = await asyncio.gather(request("a"), request("b"))

    assert [t["message"] for t in first] == ["a"]
    assert [t["message"] for t in second] == ["b"]
