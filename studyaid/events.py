"""
Subscription mechanism used by the deck and the timer to publish state
snapshots to the presentation layer.
"""

import logging
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class ChangeNotifier(Generic[T]):
    """
    Keeps a list of listeners and calls each of them with a snapshot.

    A listener that raises is logged and skipped; the remaining listeners
    still receive the snapshot.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener[T]] = []

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            A callable that removes the listener again. Calling it more
            than once is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, snapshot: T) -> None:
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.warning(f"Listener {listener!r} failed: {e}")

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
