"""InstanceFactory — a zero-argument callable that builds an instance for a type name."""

from collections.abc import Callable
from typing import TypeAlias

InstanceFactory: TypeAlias = Callable[[], object]
