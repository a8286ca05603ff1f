"""ResourceLocator — resolves a source name as a file path or a resource-root lookup."""

import sys
from collections.abc import Sequence
from pathlib import Path


class ResourceLocator:
    """Finds a properties file either directly on disk or under a list of resource roots.

    Satisfies the SourceLocator protocol structurally.

    A name that points at an existing file (absolute, or relative to the working
    directory) always wins. Otherwise the name, with any leading ``/`` removed, is
    looked up under each resource root in order and the first hit is returned.
    When no roots are given the directories currently on ``sys.path`` are used.
    """

    def __init__(self, search_paths: Sequence[Path] | None = None) -> None:
        self._search_paths = tuple(search_paths) if search_paths is not None else None

    def locate(self, name: str) -> Path | None:
        direct = Path(name)
        if direct.is_file():
            return direct.resolve()

        relative = name.lstrip("/")
        if not relative:
            return None

        for root in self._roots():
            candidate = root / relative
            if candidate.is_file():
                return candidate.resolve()
        return None

    def _roots(self) -> list[Path]:
        if self._search_paths is not None:
            return list(self._search_paths)
        # "" on sys.path is the working directory, already covered by the direct lookup.
        return [Path(entry) for entry in sys.path if entry and Path(entry).is_dir()]
