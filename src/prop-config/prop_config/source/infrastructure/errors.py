"""Error types raised while locating and parsing a properties source."""

from prop_config.core.errors import PropConfigError


class SourceNotFoundError(PropConfigError):
    """Raised when a required properties source cannot be located."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to locate properties source: {name}")


class ParseFailureError(PropConfigError):
    """Raised when a properties source cannot be read or is malformed."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to parse properties source '{name}': {reason}")
