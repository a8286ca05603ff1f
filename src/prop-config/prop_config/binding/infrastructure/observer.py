"""Structlog implementation of the BinderObserver port."""

import structlog


class StructlogBinderObserver:
    """Delegates binding domain events to structlog.

    Satisfies the BinderObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def property_bound(
        self, target_type: str, key: str, member: str, kind: str
    ) -> None:
        self._log.debug(
            "binding.property_bound",
            target_type=target_type,
            key=key,
            member=member,
            kind=kind,
        )

    def binding_completed(self, target_type: str, total_properties: int) -> None:
        self._log.info(
            "binding.completed",
            target_type=target_type,
            total_properties=total_properties,
        )

    def binding_failed(self, target_type: str, key: str, reason: str) -> None:
        self._log.error(
            "binding.failed",
            target_type=target_type,
            key=key,
            reason=reason,
        )
