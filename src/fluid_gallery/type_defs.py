"""
Defines shared type aliases for the fluid gallery layout engine.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:  # pragma: no cover
    from fluid_gallery.item import SizedItem
    from fluid_gallery.item_group import ItemGroup

Axis = Literal["horizontal", "vertical"]
Size = tuple[float, float]
ItemPredicate = Callable[["SizedItem"], bool]
GroupSelector = Callable[["ItemGroup"], "ItemGroup"]
