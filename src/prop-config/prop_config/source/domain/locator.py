"""SourceLocator Protocol — structural interface for finding a properties source."""

from pathlib import Path
from typing import Protocol


class SourceLocator(Protocol):
    """Resolves a source name to an existing file, or None if it cannot be found."""

    def locate(self, name: str) -> Path | None: ...
