"""Viewport resize notifications.

A ``ResizeNotifier`` stands in for the host window's resize event source.
Listeners run synchronously, in subscription order, on the caller's thread.
Every subscription hands back a disposer so owners can release it on teardown.
"""

from __future__ import annotations

from collections.abc import Callable

from .logging_config import get_logger

logger = get_logger(__name__)

ResizeListener = Callable[[], None]


class Subscription:
    """Callable handle that removes one listener from its notifier."""

    def __init__(self, notifier: ResizeNotifier, listener: ResizeListener):
        self._notifier = notifier
        self._listener: ResizeListener | None = listener

    @property
    def active(self) -> bool:
        return self._listener is not None

    def __call__(self) -> None:
        self.dispose()

    def dispose(self) -> None:
        """Unregister the listener. Safe to call more than once."""
        if self._listener is None:
            return
        self._notifier._remove(self._listener)
        self._listener = None


class ResizeNotifier:
    """Synchronous publisher of viewport resize events."""

    def __init__(self) -> None:
        self._listeners: list[ResizeListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ResizeListener) -> Subscription:
        self._listeners.append(listener)
        logger.debug("Resize listener subscribed", extra={"listeners": len(self._listeners)})
        return Subscription(self, listener)

    def notify(self) -> None:
        """Invoke every current listener once.

        A listener that raises is logged and skipped so the remaining
        listeners still see the resize.
        """
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Resize listener failed")

    def _remove(self, listener: ResizeListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return
        logger.debug("Resize listener removed", extra={"listeners": len(self._listeners)})
