"""Outside-interaction notification supplied to the typeahead by its host."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

Callback = Callable[[], object]


class OutsideInteractionNotifier(Protocol):
    """Capability for learning about pointer activity outside the widget."""

    def subscribe(self, callback: Callback) -> None: ...

    def unsubscribe(self, callback: Callback) -> None: ...


class InteractionNotifier:
    """A small instance-scoped publisher of outside interactions.

    Subscribing the same callback twice registers it once, and removing a
    callback that is not registered does nothing, so repeated activation
    never causes duplicate notifications.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callback] = []

    def subscribe(self, callback: Callback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unsubscribe(self, callback: Callback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def notify(self) -> None:
        """Call every subscriber in subscription order."""
        for callback in list(self._callbacks):
            callback()
