"""Observer port for the dynamic configuration domain — defines events in domain language."""

from typing import Protocol


class DynamicConfigObserver(Protocol):
    def config_source_missing(self, name: str) -> None: ...

    def config_reloaded(
        self, name: str, source: str, version: int, total_keys: int
    ) -> None: ...

    def config_reload_failed(self, name: str, reason: str) -> None: ...

    def config_listener_added(self, name: str, invoked_immediately: bool) -> None: ...

    def config_listener_failed(self, name: str, reason: str) -> None: ...


class WatcherObserver(Protocol):
    def watcher_started(self, interval_seconds: float) -> None: ...

    def watcher_stopped(self) -> None: ...

    def watch_registered(self, name: str, last_modified: float) -> None: ...

    def watch_change_detected(
        self, name: str, previous: float, current: float
    ) -> None: ...

    def watch_reload_failed(self, name: str, reason: str) -> None: ...
