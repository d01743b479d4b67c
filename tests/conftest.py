"""
Test configuration and shared fixtures for fluid_gallery.

This module defines reusable pytest fixtures for building items and
groups. These fixtures support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Sequence

import pytest

from fluid_gallery.item import Item
from fluid_gallery.item_group import ItemGroup
from fluid_gallery.logging_utils import logger


@pytest.fixture
def make_items() -> Callable[..., list[Item]]:
    """Factory building items from widths with a shared aspect ratio."""

    def _build(
        widths: Sequence[float],
        *,
        aspect_ratio: float = 1.0,
    ) -> list[Item]:
        return [Item(w, w / aspect_ratio) for w in widths]

    return _build


@pytest.fixture
def make_group(
    make_items: Callable[..., list[Item]],
) -> Callable[..., ItemGroup]:
    """Factory building a group of square items from widths."""

    def _build(widths: Sequence[float], margin: float = 0) -> ItemGroup:
        return ItemGroup(make_items(widths), margin)

    return _build


@pytest.fixture
def row(make_group: Callable[..., ItemGroup]) -> ItemGroup:
    """Three 100x100 items with a margin of 10."""
    return make_group([100, 100, 100], margin=10)


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the gallery logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
