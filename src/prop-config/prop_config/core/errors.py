"""Base exception class for all prop-config-specific errors."""


class PropConfigError(Exception):
    """Base class for all prop-config errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
