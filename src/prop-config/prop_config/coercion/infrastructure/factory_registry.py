"""InstanceFactoryRegistry — maps type names to zero-argument instance factories."""

import threading

from prop_config.coercion.domain.factory import InstanceFactory


class InstanceFactoryRegistry:
    """Holds the factories consulted when a value names a type to construct.

    Registration replaces any factory previously registered under the same name.
    """

    def __init__(self, factories: dict[str, InstanceFactory] | None = None) -> None:
        self._factories: dict[str, InstanceFactory] = dict(factories or {})
        self._lock = threading.Lock()

    def register(self, type_name: str, factory: InstanceFactory) -> None:
        with self._lock:
            self._factories = {**self._factories, type_name: factory}

    def register_type(self, cls: type) -> None:
        """Register a no-argument-constructible class under its qualified name."""
        self.register(type_name=f"{cls.__module__}.{cls.__qualname__}", factory=cls)

    def resolve(self, type_name: str) -> InstanceFactory | None:
        return self._factories.get(type_name)
