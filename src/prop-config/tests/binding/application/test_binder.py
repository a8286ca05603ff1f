"""Tests for PropertyBinder — convention lookup, coercion, prefixes and fail-fast order."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from prop_config.binding.application.binder import PropertyBinder
from prop_config.binding.infrastructure.errors import (
    CoercionFailureError,
    UnresolvedPropertyError,
)
from prop_config.coercion.infrastructure.engine import CoercionEngine
from prop_config.coercion.infrastructure.errors import FormatError
from prop_config.coercion.infrastructure.factory_registry import (
    InstanceFactoryRegistry,
)
from prop_config.source.infrastructure.errors import SourceNotFoundError
from prop_config.source.infrastructure.locator import ResourceLocator
from tests.binding.fake_observer import FakeBinderObserver


class LeastConnections:
    pass


class ServerSettings:
    def __init__(self) -> None:
        self.host: str | None = None
        self.port: int | None = None
        self.retry: bool | None = None
        self.ratio: float | None = None
        self.strategy: object = None

    def setHost(self, host: str) -> None:
        self.host = host

    def setPort(self, port: int) -> None:
        self.port = port

    def isRetry(self, retry: bool) -> None:
        self.retry = retry

    def setRatio(self, ratio: float) -> None:
        self.ratio = ratio

    def setStrategy(self, strategy: object) -> None:
        self.strategy = strategy


class GuardedSettings:
    def setLevel(self, level: str) -> None:
        raise ValueError(f"unsupported level {level}")


class CatchAllSettings:
    def __init__(self) -> None:
        self.received: str | None = None

    def set(self, value: str) -> None:
        self.received = value


@dataclass
class PoolSettings:
    size: int = 1
    name: str = ""


@dataclass(frozen=True)
class FrozenSettings:
    size: int = 1


def _binder(
    observer: FakeBinderObserver | None = None,
    factories: InstanceFactoryRegistry | None = None,
    search_paths: list[Path] | None = None,
) -> PropertyBinder:
    return PropertyBinder(
        observer=observer if observer is not None else FakeBinderObserver(),
        engine=CoercionEngine(factories=factories),
        locator=ResourceLocator(search_paths=search_paths or []),
    )


class TestBindFromMapping:
    def test_binds_int_and_is_convention_boolean(self) -> None:
        target = _binder().bind(ServerSettings(), {"port": "8080", "retry": "true"})

        assert target.port == 8080
        assert target.retry is True

    def test_binds_string_and_float(self) -> None:
        target = _binder().bind(ServerSettings(), {"host": "db1", "ratio": "0.25"})

        assert target.host == "db1"
        assert target.ratio == 0.25

    def test_returns_the_same_target(self) -> None:
        target = ServerSettings()

        assert _binder().bind(target, {"port": "1"}) is target

    def test_binds_dataclass_fields(self) -> None:
        target = _binder().bind(PoolSettings(), {"size": "16", "name": "main"})

        assert target == PoolSettings(size=16, name="main")

    def test_empty_source_leaves_target_untouched(self) -> None:
        target = _binder().bind(PoolSettings(), {})

        assert target == PoolSettings()


class TestIgnoredPrefix:
    def test_prefix_is_stripped_before_lookup(self) -> None:
        prefixed = _binder().bind(
            ServerSettings(), {"app.port": "9090"}, ignored_prefix="app."
        )
        plain = _binder().bind(ServerSettings(), {"port": "9090"})

        assert prefixed.port == plain.port == 9090

    def test_keys_without_prefix_are_used_as_is(self) -> None:
        target = _binder().bind(
            ServerSettings(),
            {"app.port": "9090", "host": "h"},
            ignored_prefix="app.",
        )

        assert target.port == 9090
        assert target.host == "h"

    def test_key_equal_to_prefix_is_unresolved(self) -> None:
        target = CatchAllSettings()

        with pytest.raises(UnresolvedPropertyError, match="app."):
            _binder().bind(target, {"app.": "x"}, ignored_prefix="app.")

        assert target.received is None


class TestFailures:
    def test_malformed_number_raises_coercion_failure(self) -> None:
        with pytest.raises(CoercionFailureError) as exc_info:
            _binder().bind(ServerSettings(), {"port": "not-a-number"})

        assert exc_info.value.key == "port"
        assert isinstance(exc_info.value.__cause__, FormatError)

    def test_failure_stops_before_later_keys(self) -> None:
        # Keys are bound in sorted order: "port" before "retry".
        target = ServerSettings()

        with pytest.raises(CoercionFailureError):
            _binder().bind(target, {"retry": "true", "port": "not-a-number"})

        assert target.retry is None

    def test_failure_keeps_earlier_keys(self) -> None:
        target = ServerSettings()

        with pytest.raises(CoercionFailureError):
            _binder().bind(target, {"port": "bad", "host": "db1"})

        assert target.host == "db1"

    def test_unknown_key_raises_unresolved_property(self) -> None:
        with pytest.raises(UnresolvedPropertyError) as exc_info:
            _binder().bind(ServerSettings(), {"timeout": "5"})

        assert "timeout" in str(exc_info.value)
        assert "ServerSettings" in str(exc_info.value)

    def test_setter_failure_is_wrapped(self) -> None:
        with pytest.raises(CoercionFailureError) as exc_info:
            _binder().bind(GuardedSettings(), {"level": "loud"})

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "unsupported level loud" in str(exc_info.value)

    def test_frozen_target_raises_coercion_failure(self) -> None:
        with pytest.raises(CoercionFailureError):
            _binder().bind(FrozenSettings(), {"size": "2"})

    def test_failures_are_reported_to_observer(self) -> None:
        observer = FakeBinderObserver()

        with pytest.raises(UnresolvedPropertyError):
            _binder(observer=observer).bind(ServerSettings(), {"timeout": "5"})

        assert len(observer.failed) == 1
        assert observer.failed[0].key == "timeout"
        assert observer.completed == []


class TestGenericMembers:
    def test_registered_type_name_is_constructed(self) -> None:
        registry = InstanceFactoryRegistry()
        registry.register(type_name="lb.LeastConnections", factory=LeastConnections)

        target = _binder(factories=registry).bind(
            ServerSettings(), {"strategy": "lb.LeastConnections"}
        )

        assert isinstance(target.strategy, LeastConnections)

    def test_registered_class_binds_by_qualified_name(self) -> None:
        registry = InstanceFactoryRegistry()
        registry.register_type(LeastConnections)
        qualified = f"{LeastConnections.__module__}.{LeastConnections.__qualname__}"

        target = _binder(factories=registry).bind(
            ServerSettings(), {"strategy": qualified}
        )

        assert isinstance(target.strategy, LeastConnections)

    def test_unregistered_value_is_passed_raw(self) -> None:
        target = _binder().bind(ServerSettings(), {"strategy": "lb.Unknown"})

        assert target.strategy == "lb.Unknown"


class TestBindFromFile:
    def test_binds_from_properties_path(self, tmp_path: Path) -> None:
        path = tmp_path / "server.properties"
        path.write_text("# server\nport = 8081 \nretry=TRUE\n", encoding="utf-8")

        target = _binder().bind(ServerSettings(), path)

        assert target.port == 8081
        assert target.retry is True

    def test_binds_from_resource_name_with_prefix(self, tmp_path: Path) -> None:
        (tmp_path / "app.properties").write_text(
            "server.host=api\nserver.port=7000\n", encoding="utf-8"
        )

        target = _binder(search_paths=[tmp_path]).bind(
            ServerSettings(), "app.properties", ignored_prefix="server."
        )

        assert target.host == "api"
        assert target.port == 7000

    def test_missing_file_raises_source_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError):
            _binder(search_paths=[tmp_path]).bind(ServerSettings(), "absent.properties")


class TestObserverEvents:
    def test_each_bound_key_and_completion_are_reported(self) -> None:
        observer = FakeBinderObserver()

        _binder(observer=observer).bind(
            ServerSettings(), {"port": "1", "retry": "false"}
        )

        assert [event.key for event in observer.bound] == ["port", "retry"]
        assert observer.bound[1].member == "isRetry"
        assert observer.bound[1].kind == "bool"
        assert observer.completed[0].target_type == "ServerSettings"
        assert observer.completed[0].total_properties == 2
