"""Snapshot value object — one immutable, fully parsed key/value mapping."""

import types
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Snapshot:
    """Immutable key/value mapping installed by one successful reload.

    ``version`` counts reloads of the owning store and does not take part in
    equality, so two reloads of an unchanged source give equal snapshots.
    """

    source: str
    entries: Mapping[str, str]
    version: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", types.MappingProxyType(dict(self.entries)))

    def get(self, key: str) -> str | None:
        return self.entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict[str, str]:
        return dict(self.entries)


EMPTY_SNAPSHOT = Snapshot(source="", entries={})
