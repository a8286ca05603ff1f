"""Error types raised by the coercion engine."""

from prop_config.core.errors import PropConfigError


class FormatError(PropConfigError):
    """Raised when a present, non-blank value does not parse as the requested type."""

    def __init__(self, value: str, type_name: str, key: str | None = None) -> None:
        self.value = value
        self.type_name = type_name
        self.key = key
        where = f" for key '{key}'" if key is not None else ""
        super().__init__(f"Failed to parse '{value}' as {type_name}{where}")
