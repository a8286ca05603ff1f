"""DynamicConfig Protocol — the read view handed to listeners and callers."""

from typing import Protocol

from prop_config.dynamic.domain.snapshot import Snapshot


class DynamicConfig(Protocol):
    """Typed read access over the most recently installed snapshot.

    The typed getters raise MissingOrBlankValueError when the key is absent or
    blank and no default was passed; numeric getters raise FormatError for a
    present value that does not parse, default or not.
    """

    @property
    def name(self) -> str: ...

    @property
    def loaded(self) -> bool: ...

    def snapshot(self) -> Snapshot: ...

    def get(self, key: str) -> str | None: ...

    def get_string(self, key: str, default: str = ...) -> str: ...

    def get_int(self, key: str, default: int = ...) -> int: ...

    def get_long(self, key: str, default: int = ...) -> int: ...

    def get_double(self, key: str, default: float = ...) -> float: ...

    def get_boolean(self, key: str, default: bool = ...) -> bool: ...

    def exists(self, key: str) -> bool: ...

    def to_map(self) -> dict[str, str]: ...

    def last_modified(self) -> float: ...


class ReloadableConfig(DynamicConfig, Protocol):
    """A DynamicConfig that can be re-read from its source and observed."""

    def reload(self) -> None: ...
