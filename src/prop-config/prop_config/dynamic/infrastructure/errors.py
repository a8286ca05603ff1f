"""Error types raised by the dynamic configuration store."""

from prop_config.core.errors import PropConfigError


class MissingOrBlankValueError(PropConfigError):
    """Raised when a required lookup finds no value or only whitespace."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Failed to read config value: '{key}' is missing or blank")


class ListenerFailureError(PropConfigError):
    """Raised when a registered listener fails while being notified."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(
            f"Failed to trigger config listener for config '{name}': {reason}"
        )
