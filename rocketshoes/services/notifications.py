"""
Toast Notifications

User-facing error channel for cart operations. Every message is logged;
request handlers open a capture to collect the toasts raised while serving
their own request and return them to the client.
"""
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from rocketshoes.logging import get_logger

logger = get_logger(__name__)

# Toasts raised in the current request context
_captured: ContextVar[list[dict] | None] = ContextVar("_captured_toasts", default=None)


class ToastNotifier:
    """Collects transient user notifications."""

    def error(self, message: str) -> None:
        """Raise an error toast."""
        self._emit("error", message)

    def _emit(self, level: str, message: str) -> None:
        logger.info(f"Toast [{level}]: {message}")
        toasts = _captured.get()
        if toasts is not None:
            toasts.append({"type": level, "message": message})

    @contextmanager
    def capture(self) -> Iterator[list[dict]]:
        """Collect toasts emitted inside the block.

        Usage:
            with notifier.capture() as toasts:
                await store.add_product(1)
            return {"notifications": toasts}
        """
        toasts: list[dict] = []
        token = _captured.set(toasts)
        try:
            yield toasts
        finally:
            _captured.reset(token)
