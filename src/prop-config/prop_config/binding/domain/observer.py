"""Observer port for the binding domain — defines events in domain language."""

from typing import Protocol


class BinderObserver(Protocol):
    def property_bound(
        self, target_type: str, key: str, member: str, kind: str
    ) -> None: ...

    def binding_completed(self, target_type: str, total_properties: int) -> None: ...

    def binding_failed(self, target_type: str, key: str, reason: str) -> None: ...
