"""ConfigListener — a callback run against the store after each successful reload."""

from collections.abc import Callable
from typing import TypeAlias

from prop_config.dynamic.domain.config import DynamicConfig

ConfigListener: TypeAlias = Callable[[DynamicConfig], None]
