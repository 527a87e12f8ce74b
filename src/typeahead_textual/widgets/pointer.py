"""Document-wide pointer dispatch used for outside-click detection."""

from __future__ import annotations

from collections.abc import Callable

from textual import events
from textual.app import App
from textual.errors import NoWidget
from textual.widget import Widget

PointerCallback = Callable[[Widget | None], object]


class PointerDispatcher:
    """Tells subscribers which widget (if any) each pointer press landed on.

    Each widget subscribes its own callback; subscribing twice or removing
    an unknown callback is harmless.
    """

    def __init__(self) -> None:
        self._callbacks: list[PointerCallback] = []

    def subscribe(self, callback: PointerCallback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unsubscribe(self, callback: PointerCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def notify(self, target: Widget | None) -> None:
        """Report a pointer press on *target* (None for empty space)."""
        for callback in list(self._callbacks):
            callback(target)


class PointerCaptureApp(App):
    """An App that reports every pointer press to its ``pointer_dispatcher``.

    Presses are reported before they are forwarded to the widget under the
    pointer, so a widget that stops propagation of its own clicks cannot
    hide them from outside-click detection.
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize the app and its pointer dispatcher."""
        super().__init__(*args, **kwargs)
        self.pointer_dispatcher = PointerDispatcher()

    async def on_event(self, event: events.Event) -> None:
        """Capture pointer presses coming from the driver."""
        if isinstance(event, events.MouseDown) and not event.is_forwarded:
            self.pointer_dispatcher.notify(self._widget_at(event.x, event.y))
        await super().on_event(event)

    def _widget_at(self, x: int, y: int) -> Widget | None:
        try:
            widget, _ = self.screen.get_widget_at(x, y)
        except NoWidget:
            return None
        return widget
