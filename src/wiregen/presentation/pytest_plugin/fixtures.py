"""pytest fixtures for code using wiregen injection.

Each test using wiregen_container gets an empty process-wide container,
optionally filled by the generated module named in the ``wiregen_module``
ini option, and dropped again after the test.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

import pytest

from wiregen.container import AppContainer
from wiregen.testing import TestInjector

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def wiregen_container(request: pytest.FixtureRequest) -> Iterator[AppContainer]:
    """Fresh AppContainer.shared() for one test.

    If ``wiregen_module`` is configured (pytest.ini or pyproject.toml),
    its register_dependencies() fills the container first.

    Yields:
        The shared container seen by Inject attributes during the test
    """
    AppContainer.reset_shared()
    container = AppContainer.shared()

    module_name = str(request.config.getini("wiregen_module") or "")
    if module_name:
        module = importlib.import_module(module_name)
        module.register_dependencies(container)

    yield container

    AppContainer.reset_shared()


@pytest.fixture
def wiregen_injector() -> Callable[[object], TestInjector]:
    """Factory of TestInjector for the object under test.

    Example:
        def test_checkout(wiregen_injector):
            sut = CheckoutService()
            wiregen_injector(sut).inject(FakeGateway(), as_type=PaymentGateway)
    """
    return TestInjector
