"""Shared test fixtures for the tabdeck test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tabdeck.core import BoundTarget, SessionRegistry


@pytest.fixture
def registry() -> SessionRegistry:
    """A fresh registry holding only the home tab."""
    return SessionRegistry()


@pytest.fixture
def make_resource():
    """Factory for resource handles whose ``release`` is a MagicMock."""

    def _make(side_effect=None):
        handle = MagicMock()
        handle.release = MagicMock(side_effect=side_effect)
        return handle

    return _make


@pytest.fixture
def host_a() -> BoundTarget:
    return BoundTarget(id=7, username="root", host="10.0.0.5", port=22, name="Server A")


@pytest.fixture
def host_b() -> BoundTarget:
    return BoundTarget(id=8, username="deploy", host="db.internal", port=2222)
