"""Shared pytest configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from wiregen.container import AppContainer

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolated_shared_container() -> Iterator[None]:
    """No test sees registrations left by another."""
    AppContainer.reset_shared()
    yield
    AppContainer.reset_shared()


@pytest.fixture(autouse=True)
def _isolated_cache_dir(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Default scan cache location inside the test tree, never the user's."""
    monkeypatch.setenv("WIREGEN_CACHE_DIR", str(tmp_path_factory.mktemp("wiregen-cache")))
