"""Structlog implementation of the DynamicConfigObserver port."""

import structlog


class StructlogDynamicConfigObserver:
    """Delegates dynamic configuration events to structlog.

    Satisfies the DynamicConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_source_missing(self, name: str) -> None:
        self._log.warning("config.source_missing", name=name)

    def config_reloaded(
        self, name: str, source: str, version: int, total_keys: int
    ) -> None:
        self._log.info(
            "config.reloaded",
            name=name,
            source=source,
            version=version,
            total_keys=total_keys,
        )

    def config_reload_failed(self, name: str, reason: str) -> None:
        self._log.error("config.reload_failed", name=name, reason=reason)

    def config_listener_added(self, name: str, invoked_immediately: bool) -> None:
        self._log.debug(
            "config.listener_added",
            name=name,
            invoked_immediately=invoked_immediately,
        )

    def config_listener_failed(self, name: str, reason: str) -> None:
        self._log.error("config.listener_failed", name=name, reason=reason)


class StructlogWatcherObserver:
    """Delegates polling watcher events to structlog.

    Satisfies the WatcherObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def watcher_started(self, interval_seconds: float) -> None:
        self._log.info("watcher.started", interval_seconds=interval_seconds)

    def watcher_stopped(self) -> None:
        self._log.info("watcher.stopped")

    def watch_registered(self, name: str, last_modified: float) -> None:
        self._log.debug("watcher.registered", name=name, last_modified=last_modified)

    def watch_change_detected(self, name: str, previous: float, current: float) -> None:
        self._log.info(
            "watcher.change_detected",
            name=name,
            previous=previous,
            current=current,
        )

    def watch_reload_failed(self, name: str, reason: str) -> None:
        self._log.error("watcher.reload_failed", name=name, reason=reason)
