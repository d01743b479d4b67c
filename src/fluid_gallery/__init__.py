"""Public package exports for fluid gallery layout."""

from __future__ import annotations

from .config import ConfigLoader, GalleryConfig, LayoutConfig
from .errors import (
    DivisionUndefinedError,
    FluidGalleryError,
    IdentityMismatchError,
    InvalidArgumentError,
)
from .item import Item, SizedItem
from .item_group import ItemGroup
from .layout import build_group, fit_line, item_offsets, margin_percent_of_span

__all__ = [
    "ConfigLoader",
    "DivisionUndefinedError",
    "FluidGalleryError",
    "GalleryConfig",
    "IdentityMismatchError",
    "InvalidArgumentError",
    "Item",
    "ItemGroup",
    "LayoutConfig",
    "SizedItem",
    "build_group",
    "fit_line",
    "item_offsets",
    "margin_percent_of_span",
]
