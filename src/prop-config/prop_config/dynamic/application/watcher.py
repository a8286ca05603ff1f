"""PollingConfigWatcher — reloads watched stores when their source's mtime changes."""

import threading
from dataclasses import dataclass
from types import TracebackType

from prop_config.core.errors import PropConfigError
from prop_config.dynamic.domain.config import ReloadableConfig
from prop_config.dynamic.domain.observer import WatcherObserver
from prop_config.settings.domain.options import WatcherOptions


@dataclass
class _Watch:
    config: ReloadableConfig
    last_seen: float


class PollingConfigWatcher:
    """Polls every watched store's ``last_modified()`` on a background daemon thread.

    A store is reloaded whenever the value differs from the one last seen,
    including when its source disappears. The new value is recorded before the
    reload runs, so a source that fails to parse is not retried until it changes
    again. A failed reload, or an OS error while checking a source, is reported
    to the observer and does not stop the other stores from being polled.
    """

    def __init__(
        self, observer: WatcherObserver, options: WatcherOptions | None = None
    ) -> None:
        self._observer = observer
        self._options = options if options is not None else WatcherOptions()
        self._watches: dict[str, _Watch] = {}
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def watch(self, config: ReloadableConfig, last_seen: float | None = None) -> None:
        """Start watching ``config``; ``last_seen`` defaults to its current mtime."""
        seen = config.last_modified() if last_seen is None else last_seen
        with self._lock:
            self._watches = {
                **self._watches,
                config.name: _Watch(config=config, last_seen=seen),
            }
        self._observer.watch_registered(name=config.name, last_modified=seen)

    def poll_once(self) -> int:
        """Check every watched store once and return how many were reloaded."""
        reloaded = 0
        for watch in list(self._watches.values()):
            try:
                if self._poll_watch(watch=watch):
                    reloaded += 1
            except (PropConfigError, OSError) as exc:
                self._observer.watch_reload_failed(
                    name=watch.config.name, reason=str(exc)
                )
        return reloaded

    def start(self) -> None:
        """
        Start the polling thread; does nothing if it is already running.

        A thread still finishing after a timed-out ``stop`` is joined first.
        """
        if self._thread is not None and self._thread.is_alive():
            if not self._stop_event.is_set():
                return
            self._thread.join()
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="prop-config-watcher", daemon=True
        )
        self._thread.start()
        self._observer.watcher_started(interval_seconds=self._options.interval_seconds)

    def stop(self, timeout: float | None = None) -> None:
        """
        Ask the polling thread to exit and wait up to ``timeout`` seconds.

        If the thread is still busy when the timeout expires it keeps its slot,
        ``running`` stays true and no stop is reported until a later ``stop``
        sees it finish.
        """
        self._stop_event.set()
        if self._thread is None:
            return
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            return
        self._thread = None
        self._observer.watcher_stopped()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _poll_watch(self, watch: _Watch) -> bool:
        current = watch.config.last_modified()
        if current == watch.last_seen:
            return False

        previous = watch.last_seen
        watch.last_seen = current
        self._observer.watch_change_detected(
            name=watch.config.name, previous=previous, current=current
        )
        watch.config.reload()
        return True

    def _run(self) -> None:
        while not self._stop_event.wait(self._options.interval_seconds):
            self.poll_once()

    def __enter__(self) -> "PollingConfigWatcher":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
