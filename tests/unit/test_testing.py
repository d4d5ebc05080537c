"""Tests for testing.py."""

from typing import Protocol

import pytest

from wiregen.container import AppContainer
from wiregen.domain.exceptions import InjectableNotFoundError
from wiregen.inject import Inject
from wiregen.testing import TestInjector, injection_descriptors, injection_slots


class Service(Protocol):
    def value(self) -> str: ...


class RealService:
    def value(self) -> str:
        return "original value"


class MockService:
    def value(self) -> str:
        return "mock value"


class Clock:
    pass


class FakeClock(Clock):
    pass


class SingleDependency:
    service: Service = Inject()


class TwoDependencies:
    main: Service = Inject()
    backup: Service = Inject()


class WithClock:
    clock: Clock = Inject()
    name = "plain attribute"


class Redefined(WithClock):
    clock = None  # type: ignore[assignment]


class NoDependencies:
    value = "regular property"


@pytest.fixture(autouse=True)
def _registrations() -> None:
    AppContainer.shared().register(Service, RealService)
    AppContainer.shared().register(Clock, Clock)


class TestInjectionSlots:
    """Tests for injection_slots() and injection_descriptors()."""

    def test_lists_inject_attributes_only(self) -> None:
        assert set(injection_slots(WithClock())) == {"clock"}

    def test_inherited_slots(self) -> None:
        class Child(TwoDependencies):
            extra: Clock = Inject()

        assert set(injection_descriptors(Child)) == {"main", "backup", "extra"}

    def test_redefined_attribute_excluded(self) -> None:
        assert injection_descriptors(Redefined) == {}

    def test_no_resolution_happens(self) -> None:
        slots = injection_slots(SingleDependency())

        assert not slots["service"].is_resolved


class TestTestInjector:
    """Tests for TestInjector.inject()."""

    def test_container_value_before_override(self) -> None:
        assert SingleDependency().service.value() == "original value"

    def test_inject_by_type(self) -> None:
        sut = SingleDependency()

        TestInjector(sut).inject(MockService(), as_type=Service)

        assert sut.service.value() == "mock value"

    def test_inject_all_slots_of_type(self) -> None:
        sut = TwoDependencies()

        TestInjector(sut).inject(MockService(), as_type=Service)

        assert [sut.main.value(), sut.backup.value()] == ["mock value", "mock value"]

    def test_inject_by_key(self) -> None:
        sut = TwoDependencies()

        TestInjector(sut).inject(MockService(), as_type=Service, key="main")

        assert [sut.main.value(), sut.backup.value()] == ["mock value", "original value"]

    def test_chaining(self) -> None:
        sut = TwoDependencies()
        first, second = MockService(), MockService()

        TestInjector(sut).inject(first, key="main").inject(second, key="backup")

        assert sut.main is first
        assert sut.backup is second

    def test_inject_by_instance(self) -> None:
        sut = WithClock()
        fake = FakeClock()

        TestInjector(sut).inject(fake)

        assert sut.clock is fake

    def test_override_after_resolution(self) -> None:
        sut = WithClock()
        _ = sut.clock
        fake = FakeClock()

        TestInjector(sut).inject(fake, as_type=Clock)

        assert sut.clock is fake

    def test_other_instances_unaffected(self) -> None:
        sut = WithClock()
        TestInjector(sut).inject(FakeClock())

        assert not isinstance(WithClock().clock, FakeClock)

    def test_no_injectables_raises(self) -> None:
        with pytest.raises(InjectableNotFoundError, match="Injectable not found for Service"):
            TestInjector(NoDependencies()).inject(MockService(), as_type=Service)

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(InjectableNotFoundError, match="Injectable not found for str"):
            TestInjector(WithClock()).inject("string value")

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(InjectableNotFoundError, match="named 'missing'"):
            TestInjector(TwoDependencies()).inject(MockService(), key="missing")

    def test_key_with_mismatching_type_raises(self) -> None:
        with pytest.raises(InjectableNotFoundError):
            TestInjector(WithClock()).inject(FakeClock(), as_type=Service, key="clock")

    def test_non_runtime_protocol_needs_as_type(self) -> None:
        with pytest.raises(InjectableNotFoundError):
            TestInjector(SingleDependency()).inject(MockService())
