"""PropertyBinder — populates a target object's members from a key/value source."""

from collections.abc import Mapping
from pathlib import Path
from typing import TypeAlias, TypeVar

from prop_config.binding.domain.descriptor import SetterTable, describe
from prop_config.binding.domain.observer import BinderObserver
from prop_config.binding.infrastructure.errors import (
    CoercionFailureError,
    UnresolvedPropertyError,
)
from prop_config.coercion.infrastructure.engine import CoercionEngine
from prop_config.source.domain.locator import SourceLocator
from prop_config.source.infrastructure.errors import SourceNotFoundError
from prop_config.source.infrastructure.locator import ResourceLocator
from prop_config.source.infrastructure.properties_parser import read_entries

PropertySource: TypeAlias = Mapping[str, str] | str | Path

T = TypeVar("T")


class PropertyBinder:
    """Binds every key of a source onto the matching setter of a target object.

    Keys are processed in sorted order and binding stops at the first failure,
    so every key sorting before the failing one has already been applied to the
    target and no key after it has.
    """

    def __init__(
        self,
        observer: BinderObserver,
        engine: CoercionEngine | None = None,
        locator: SourceLocator | None = None,
    ) -> None:
        self._observer = observer
        self._engine = engine if engine is not None else CoercionEngine()
        self._locator = locator if locator is not None else ResourceLocator()

    def bind(
        self,
        target: T,
        source: PropertySource,
        ignored_prefix: str | None = None,
    ) -> T:
        """
        Mutate and return ``target`` with every key of ``source`` applied.

        ``source`` is either a key/value mapping or the name of a properties
        file, resolved as a path or under the locator's resource roots. When
        ``ignored_prefix`` is given it is stripped from every key starting with it.

        Raises:
            SourceNotFoundError: if a named source cannot be located.
            ParseFailureError: if a named source cannot be read or parsed.
            UnresolvedPropertyError: if a key matches no setter on the target.
            CoercionFailureError: if a value cannot be converted or the setter fails.
        """
        entries = self._entries(source=source)
        table = describe(type(target))

        for key in sorted(entries):
            name = _strip_prefix(key=key, prefix=ignored_prefix)
            if not name:
                self._observer.binding_failed(
                    target_type=_type_name(table),
                    key=key,
                    reason="key is empty once the prefix is removed",
                )
                raise UnresolvedPropertyError(key=key, target_type=_type_name(table))
            self._bind_one(target=target, table=table, key=name, raw=entries[key])

        self._observer.binding_completed(
            target_type=_type_name(table), total_properties=len(entries)
        )
        return target

    def _entries(self, source: PropertySource) -> Mapping[str, str]:
        if isinstance(source, Mapping):
            return source
        path = self._locator.locate(str(source))
        if path is None:
            raise SourceNotFoundError(name=str(source))
        return read_entries(path=path)

    def _bind_one(self, target: object, table: SetterTable, key: str, raw: str) -> None:
        type_name = _type_name(table)
        descriptor = table.resolve(key=key)
        if descriptor is None:
            self._observer.binding_failed(
                target_type=type_name, key=key, reason="no matching setter"
            )
            raise UnresolvedPropertyError(key=key, target_type=type_name)

        try:
            value = self._engine.coerce(raw=raw, kind=descriptor.kind, key=key)
            descriptor.apply(target=target, value=value)
        except Exception as exc:
            self._observer.binding_failed(
                target_type=type_name, key=key, reason=str(exc)
            )
            raise CoercionFailureError(
                key=key, target_type=type_name, reason=str(exc)
            ) from exc

        self._observer.property_bound(
            target_type=type_name,
            key=key,
            member=descriptor.member,
            kind=descriptor.kind.value,
        )


def _strip_prefix(key: str, prefix: str | None) -> str:
    if prefix and key.startswith(prefix):
        return key[len(prefix) :]
    return key


def _type_name(table: SetterTable) -> str:
    return table.target_type.__qualname__
