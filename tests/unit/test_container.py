"""Tests for container.py."""

import threading
import time

import pytest

from wiregen.container import AppContainer
from wiregen.domain.exceptions import UnregisteredTypeError


class Clock:
    pass


class SystemClock(Clock):
    pass


class Service:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock


class TestRegisterResolve:
    """Tests for register() and resolve()."""

    def test_transient_creates_each_time(self) -> None:
        container = AppContainer()
        container.register(Clock, SystemClock)

        first = container.resolve(Clock)
        second = container.resolve(Clock)

        assert isinstance(first, SystemClock)
        assert first is not second

    def test_singleton_returns_same_instance(self) -> None:
        container = AppContainer()
        container.register_singleton(Clock, SystemClock)

        assert container.resolve(Clock) is container.resolve(Clock)

    def test_factory_may_resolve_other_types(self) -> None:
        container = AppContainer()
        container.register_singleton(Clock, SystemClock)
        container.register(Service, lambda: Service(container.resolve(Clock)))

        service = container.resolve(Service)

        assert service.clock is container.resolve(Clock)

    def test_unregistered_raises(self) -> None:
        with pytest.raises(UnregisteredTypeError) as exc_info:
            AppContainer().resolve(Clock)

        assert exc_info.value.type_key is Clock
        assert isinstance(exc_info.value, LookupError)

    def test_non_callable_factory_raises(self) -> None:
        with pytest.raises(TypeError, match="factory must be callable"):
            AppContainer().register(Clock, SystemClock())  # type: ignore[arg-type]

    def test_factory_errors_propagate(self) -> None:
        container = AppContainer()

        def broken() -> Clock:
            raise RuntimeError("boom")

        container.register_singleton(Clock, broken)

        with pytest.raises(RuntimeError, match="boom"):
            container.resolve(Clock)

    def test_failed_singleton_creation_is_retried(self) -> None:
        container = AppContainer()
        attempts: list[int] = []

        def flaky() -> Clock:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first call fails")
            return SystemClock()

        container.register_singleton(Clock, flaky)
        with pytest.raises(RuntimeError):
            container.resolve(Clock)

        assert isinstance(container.resolve(Clock), SystemClock)

    def test_non_class_keys(self) -> None:
        container = AppContainer()
        container.register("config", lambda: {"debug": True})

        assert container.resolve("config") == {"debug": True}


class TestReRegistration:
    """Tests for replacing a registration."""

    def test_last_registration_wins(self) -> None:
        container = AppContainer()
        container.register(Clock, Clock)
        container.register(Clock, SystemClock)

        assert isinstance(container.resolve(Clock), SystemClock)

    def test_cached_singleton_dropped(self) -> None:
        container = AppContainer()
        container.register_singleton(Clock, SystemClock)
        before = container.resolve(Clock)

        container.register_singleton(Clock, SystemClock)

        assert container.resolve(Clock) is not before

    def test_lifetime_can_change(self) -> None:
        container = AppContainer()
        container.register_singleton(Clock, SystemClock)
        container.register(Clock, SystemClock)

        assert container.resolve(Clock) is not container.resolve(Clock)


class TestIntrospection:
    """Tests for is_registered(), registered_types(), reset()."""

    def test_is_registered(self) -> None:
        container = AppContainer()
        container.register(Clock, SystemClock)

        assert container.is_registered(Clock)
        assert Clock in container
        assert Service not in container
        assert [] not in container

    def test_registered_types_in_order(self) -> None:
        container = AppContainer()
        container.register(Service, lambda: Service(SystemClock()))
        container.register(Clock, SystemClock)

        assert container.registered_types() == (Service, Clock)
        assert len(container) == 2

    def test_reset(self) -> None:
        container = AppContainer()
        container.register_singleton(Clock, SystemClock)
        container.resolve(Clock)

        container.reset()

        assert len(container) == 0
        with pytest.raises(UnregisteredTypeError):
            container.resolve(Clock)


class TestShared:
    """Tests for the process-wide container."""

    def test_shared_is_stable(self) -> None:
        assert AppContainer.shared() is AppContainer.shared()

    def test_reset_shared_gives_fresh_container(self) -> None:
        old = AppContainer.shared()
        old.register(Clock, SystemClock)

        AppContainer.reset_shared()

        assert AppContainer.shared() is not old
        assert not AppContainer.shared().is_registered(Clock)


class TestConcurrency:
    """Tests for thread safety."""

    def test_singleton_factory_called_once_under_contention(self) -> None:
        container = AppContainer()
        calls: list[int] = []

        def slow_factory() -> Clock:
            calls.append(1)
            time.sleep(0.05)
            return SystemClock()

        container.register_singleton(Clock, slow_factory)
        barrier = threading.Barrier(8)
        results: list[Clock] = []
        lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            instance = container.resolve(Clock)
            with lock:
                results.append(instance)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len({id(r) for r in results}) == 1

    def test_factory_does_not_block_other_keys(self) -> None:
        container = AppContainer()
        started = threading.Event()
        release = threading.Event()

        def blocking() -> Clock:
            started.set()
            release.wait(timeout=5)
            return SystemClock()

        container.register_singleton(Clock, blocking)
        container.register(Service, lambda: Service(SystemClock()))

        thread = threading.Thread(target=container.resolve, args=(Clock,))
        thread.start()
        assert started.wait(timeout=5)

        # Registry lock is free while blocking() runs
        assert isinstance(container.resolve(Service), Service)

        release.set()
        thread.join()
