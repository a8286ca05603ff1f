"""Option models for the dynamic configuration store and the polling watcher."""

from pathlib import Path

from pydantic import BaseModel, Field


class StoreOptions(BaseModel, frozen=True):
    """How a dynamic configuration store locates its backing source."""

    fail_on_missing: bool = False
    search_paths: tuple[Path, ...] = ()


class WatcherOptions(BaseModel, frozen=True):
    """How often the polling watcher checks its sources for changes."""

    interval_seconds: float = Field(default=5.0, gt=0.0)
