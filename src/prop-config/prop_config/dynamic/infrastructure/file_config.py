"""FileDynamicConfig — a hot-reloadable, properties-file-backed configuration store."""

import threading
from enum import Enum, auto
from pathlib import Path
from typing import TypeVar

from prop_config.coercion.infrastructure.parsers import (
    parse_boolean,
    parse_double,
    parse_int,
    parse_long,
)
from prop_config.dynamic.domain.listener import ConfigListener
from prop_config.dynamic.domain.observer import DynamicConfigObserver
from prop_config.dynamic.domain.snapshot import EMPTY_SNAPSHOT, Snapshot
from prop_config.dynamic.infrastructure.errors import (
    ListenerFailureError,
    MissingOrBlankValueError,
)
from prop_config.dynamic.infrastructure.listener_registry import ListenerRegistry
from prop_config.settings.domain.options import StoreOptions
from prop_config.source.domain.locator import SourceLocator
from prop_config.source.infrastructure.errors import (
    ParseFailureError,
    SourceNotFoundError,
)
from prop_config.source.infrastructure.locator import ResourceLocator
from prop_config.source.infrastructure.properties_parser import read_entries


class _Missing(Enum):
    MISSING = auto()


_MISSING = _Missing.MISSING


class FileDynamicConfig:
    """Caches a parsed snapshot of one properties file and reloads it on request.

    Satisfies the ReloadableConfig protocol structurally.

    The current snapshot is immutable and replaced by a single reference
    assignment, so reads never take a lock and always see one whole snapshot.
    Reloads and listener registration serialise on a re-entrant lock; a listener
    may register further listeners while being notified, and those only take
    part from the next reload on.
    """

    def __init__(
        self,
        name: str,
        observer: DynamicConfigObserver,
        options: StoreOptions | None = None,
        locator: SourceLocator | None = None,
    ) -> None:
        """
        Locate the source now; if it is missing it is looked up again later.

        Raises:
            SourceNotFoundError: if ``options.fail_on_missing`` is set and the
                source cannot be located now.
        """
        options = options if options is not None else StoreOptions()
        self._name = name
        self._observer = observer
        self._locator = (
            locator
            if locator is not None
            else ResourceLocator(search_paths=options.search_paths or None)
        )
        self._listeners = ListenerRegistry()
        self._reload_lock = threading.RLock()
        self._snapshot: Snapshot = EMPTY_SNAPSHOT
        self._loaded = False
        self._version = 0
        self._path: Path | None = self._locator.locate(name)

        if options.fail_on_missing and self._path is None:
            raise SourceNotFoundError(name=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def loaded(self) -> bool:
        return self._loaded

    def snapshot(self) -> Snapshot:
        return self._snapshot

    def last_modified(self) -> float:
        """Modification time of the source in seconds, or 0.0 if it cannot be found."""
        path = self._resolve()
        if path is None:
            return 0.0
        try:
            return path.stat().st_mtime
        except FileNotFoundError:
            return 0.0

    def reload(self) -> None:
        """
        Parse the source, install the new snapshot, then notify every listener.

        Does nothing if the source cannot be located. A listener failure stops
        the remaining listeners but leaves the new snapshot installed.

        Raises:
            ParseFailureError: if the source cannot be read or parsed; the
                previous snapshot stays in place.
            ListenerFailureError: if a listener raises.
        """
        with self._reload_lock:
            path = self._resolve()
            if path is None:
                self._observer.config_source_missing(name=self._name)
                return

            try:
                entries = read_entries(path=path)
            except ParseFailureError as exc:
                self._observer.config_reload_failed(name=self._name, reason=str(exc))
                raise

            self._version += 1
            self._snapshot = Snapshot(
                source=str(path), entries=entries, version=self._version
            )
            self._observer.config_reloaded(
                name=self._name,
                source=str(path),
                version=self._version,
                total_keys=len(entries),
            )

            for listener in self._listeners.snapshot():
                self._run_listener(listener=listener)
            self._loaded = True

    def add_listener(self, listener: ConfigListener) -> None:
        """
        Register ``listener``; if the store is already loaded run it right away.

        A listener that fails during that immediate run is not registered.

        Raises:
            ListenerFailureError: if the immediate run raises.
        """
        with self._reload_lock:
            invoked_immediately = self._loaded
            if invoked_immediately:
                self._run_listener(listener=listener)
            self._listeners.append(listener)
        self._observer.config_listener_added(
            name=self._name, invoked_immediately=invoked_immediately
        )

    def get(self, key: str) -> str | None:
        return self._snapshot.get(key)

    def get_string(self, key: str, default: str | _Missing = _MISSING) -> str:
        value = self._value(key=key)
        if value is None:
            return _fallback(key=key, default=default)
        return value

    def get_int(self, key: str, default: int | _Missing = _MISSING) -> int:
        value = self._value(key=key)
        if value is None:
            return _fallback(key=key, default=default)
        return parse_int(raw=value, key=key)

    def get_long(self, key: str, default: int | _Missing = _MISSING) -> int:
        value = self._value(key=key)
        if value is None:
            return _fallback(key=key, default=default)
        return parse_long(raw=value, key=key)

    def get_double(self, key: str, default: float | _Missing = _MISSING) -> float:
        value = self._value(key=key)
        if value is None:
            return _fallback(key=key, default=default)
        return parse_double(raw=value, key=key)

    def get_boolean(self, key: str, default: bool | _Missing = _MISSING) -> bool:
        value = self._value(key=key)
        if value is None:
            return _fallback(key=key, default=default)
        return parse_boolean(raw=value)

    def exists(self, key: str) -> bool:
        return key in self._snapshot

    def to_map(self) -> dict[str, str]:
        return self._snapshot.to_dict()

    def _value(self, key: str) -> str | None:
        """Return the value for ``key``, or None when it is absent or blank."""
        value = self._snapshot.get(key)
        if value is None or not value.strip():
            return None
        return value

    def _resolve(self) -> Path | None:
        # The source may appear (or move) after construction.
        if self._path is None or not self._path.is_file():
            self._path = self._locator.locate(self._name)
        return self._path

    def _run_listener(self, listener: ConfigListener) -> None:
        try:
            listener(self)
        except Exception as exc:
            self._observer.config_listener_failed(name=self._name, reason=str(exc))
            raise ListenerFailureError(name=self._name, reason=str(exc)) from exc

    def __repr__(self) -> str:
        return (
            f"FileDynamicConfig(name={self._name!r}, path={self._path}, "
            f"loaded={self._loaded}, version={self._snapshot.version}, "
            f"listeners={len(self._listeners)})"
        )


T = TypeVar("T")


def _fallback(key: str, default: T | _Missing) -> T:
    if default is _MISSING:
        raise MissingOrBlankValueError(key=key)
    return default
