"""CoercionEngine — converts one string value into the type a setter expects."""

from prop_config.coercion.domain.kind import SetterKind
from prop_config.coercion.infrastructure.factory_registry import InstanceFactoryRegistry
from prop_config.coercion.infrastructure.parsers import (
    parse_boolean,
    parse_double,
    parse_int,
    parse_long,
)


class CoercionEngine:
    """Applies the fixed coercion chain: int, long, bool, str, float, then GENERIC.

    For GENERIC setters the raw value is treated as a type name. If a factory is
    registered under that name a fresh instance is built and returned; otherwise
    the raw value is passed through untouched.
    """

    def __init__(self, factories: InstanceFactoryRegistry | None = None) -> None:
        self._factories = (
            factories if factories is not None else InstanceFactoryRegistry()
        )

    def coerce(self, raw: str, kind: SetterKind, key: str | None = None) -> object:
        """
        Return ``raw`` converted for a setter of the given kind.

        Raises:
            FormatError: if an INT, LONG or FLOAT value does not parse.
        """
        match kind:
            case SetterKind.INT:
                return parse_int(raw=raw, key=key)
            case SetterKind.LONG:
                return parse_long(raw=raw, key=key)
            case SetterKind.BOOL:
                return parse_boolean(raw=raw)
            case SetterKind.STR:
                return raw
            case SetterKind.FLOAT:
                return parse_double(raw=raw, key=key)
            case SetterKind.GENERIC:
                return self._construct_or_passthrough(raw=raw)

    def _construct_or_passthrough(self, raw: str) -> object:
        factory = self._factories.resolve(type_name=raw)
        if factory is None:
            return raw
        return factory()
