"""Shared fixtures for specfilter unit tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from specfilter.registry import default_registry


@pytest.fixture(autouse=True)
def _restore_default_registry() -> Iterator[None]:
    yield
    default_registry().reset()
