"""Setter descriptor table — the settable members of a target type, found once and typed.

A key resolves to a member by naming convention, in this order:

1. ``set<Key>`` then ``set_<key>`` (single-argument methods)
2. ``is<Key>`` then ``is_<key>`` (the boolean alternate convention)
3. ``<key>`` itself, when the type declares it as an annotated field or a
   property with a setter

Each member is tagged with the SetterKind derived from its type annotation.
Plain ``int`` maps to LONG; annotate with ``Int32`` to get 32-bit INT parsing.
"""

import functools
import inspect
import re
import types
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, ClassVar, get_args, get_origin

from prop_config.coercion.domain.kind import SetterKind

Int32 = Annotated[int, SetterKind.INT]

_SETTER_PREFIXES = ("set", "is")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_KINDS_BY_TYPE: tuple[tuple[type, SetterKind], ...] = (
    (bool, SetterKind.BOOL),
    (int, SetterKind.LONG),
    (str, SetterKind.STR),
    (float, SetterKind.FLOAT),
)


class MemberStyle(StrEnum):
    METHOD = "method"
    ATTRIBUTE = "attribute"


@dataclass(frozen=True)
class SetterDescriptor:
    """One settable member of a target type and the kind of value it takes."""

    member: str
    kind: SetterKind
    style: MemberStyle

    def apply(self, target: object, value: object) -> None:
        if self.style is MemberStyle.METHOD:
            getattr(target, self.member)(value)
        else:
            setattr(target, self.member, value)


@dataclass(frozen=True)
class SetterTable:
    """All settable members of one target type, keyed by member name."""

    target_type: type
    setters: Mapping[str, SetterDescriptor]

    def resolve(self, key: str) -> SetterDescriptor | None:
        for member in candidate_members(key=key):
            descriptor = self.setters.get(member)
            if descriptor is not None:
                return descriptor
        return None


def candidate_members(key: str) -> list[str]:
    """Return the member names tried for ``key``, in resolution order."""
    capitalized = key[:1].upper() + key[1:]
    snake = _CAMEL_BOUNDARY.sub("_", key).lower()
    return [
        f"set{capitalized}",
        f"set_{snake}",
        f"is{capitalized}",
        f"is_{snake}",
        key,
    ]


@functools.cache
def describe(target_type: type) -> SetterTable:
    """Build (once per type) the table of settable members of ``target_type``."""
    setters: dict[str, SetterDescriptor] = {}

    for name, hint in _field_hints(target_type=target_type).items():
        setters[name] = SetterDescriptor(
            member=name, kind=kind_for(hint=hint), style=MemberStyle.ATTRIBUTE
        )

    for name in dir(target_type):
        if name.startswith("__"):
            continue
        attr = inspect.getattr_static(target_type, name)
        if isinstance(attr, property):
            if attr.fset is not None:
                setters[name] = SetterDescriptor(
                    member=name,
                    kind=_parameter_kind(func=attr.fset),
                    style=MemberStyle.ATTRIBUTE,
                )
        elif (
            inspect.isfunction(attr)
            and name.startswith(_SETTER_PREFIXES)
            and _takes_one_argument(func=attr)
        ):
            setters[name] = SetterDescriptor(
                member=name,
                kind=_parameter_kind(func=attr),
                style=MemberStyle.METHOD,
            )

    return SetterTable(target_type=target_type, setters=types.MappingProxyType(setters))


def kind_for(hint: object) -> SetterKind:
    """Map a type annotation to the SetterKind the coercion engine understands."""
    hint = _unwrap_optional(hint=hint)
    if get_origin(hint) is Annotated:
        base, *metadata = get_args(hint)
        for item in metadata:
            if isinstance(item, SetterKind):
                return item
        hint = _unwrap_optional(hint=base)

    for python_type, kind in _KINDS_BY_TYPE:
        if hint is python_type:
            return kind
    return SetterKind.GENERIC


def _unwrap_optional(hint: object) -> object:
    if get_origin(hint) in (typing.Union, types.UnionType):
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _field_hints(target_type: type) -> dict[str, object]:
    try:
        hints = typing.get_type_hints(target_type, include_extras=True)
    except (NameError, TypeError):
        hints = dict(inspect.get_annotations(target_type))
    return {
        name: hint
        for name, hint in hints.items()
        if not name.startswith("_") and get_origin(hint) is not ClassVar
    }


def _takes_one_argument(func: Callable[..., object]) -> bool:
    try:
        parameters = list(inspect.signature(func).parameters.values())[1:]
    except (TypeError, ValueError):
        return False
    return len(parameters) == 1 and parameters[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )


def _parameter_kind(func: Callable[..., object]) -> SetterKind:
    parameters = list(inspect.signature(func).parameters)
    if len(parameters) < 2:
        return SetterKind.GENERIC
    try:
        hints = typing.get_type_hints(func, include_extras=True)
    except (NameError, TypeError):
        return SetterKind.GENERIC
    return kind_for(hint=hints.get(parameters[1]))
