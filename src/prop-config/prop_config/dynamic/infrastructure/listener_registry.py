"""ListenerRegistry — append-only, copy-on-write list of config listeners."""

import threading

from prop_config.dynamic.domain.listener import ConfigListener


class ListenerRegistry:
    """Holds listeners in registration order.

    Every append replaces the stored tuple, so a notification cycle iterating a
    previously taken ``snapshot()`` never sees a listener added after it started.
    """

    def __init__(self) -> None:
        self._listeners: tuple[ConfigListener, ...] = ()
        self._lock = threading.Lock()

    def append(self, listener: ConfigListener) -> None:
        with self._lock:
            self._listeners = (*self._listeners, listener)

    def snapshot(self) -> tuple[ConfigListener, ...]:
        return self._listeners

    def __len__(self) -> int:
        return len(self._listeners)
