"""SetterKind — the fixed set of value types a string can be coerced into."""

from enum import StrEnum


class SetterKind(StrEnum):
    """Tag describing what a setter expects; GENERIC covers everything else."""

    INT = "int"
    LONG = "long"
    BOOL = "bool"
    STR = "str"
    FLOAT = "float"
    GENERIC = "generic"
