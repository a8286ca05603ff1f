"""Error types raised by the property binder."""

from prop_config.core.errors import PropConfigError


class UnresolvedPropertyError(PropConfigError):
    """Raised when no setter on the target matches a source key."""

    def __init__(self, key: str, target_type: str) -> None:
        self.key = key
        self.target_type = target_type
        super().__init__(
            f"Failed to bind property: '{key}' does not exist on target {target_type}"
        )


class CoercionFailureError(PropConfigError):
    """Raised when a resolved setter cannot be given the converted value."""

    def __init__(self, key: str, target_type: str, reason: str) -> None:
        self.key = key
        self.target_type = target_type
        self.reason = reason
        super().__init__(
            f"Failed to bind property '{key}' on target {target_type}: {reason}"
        )
