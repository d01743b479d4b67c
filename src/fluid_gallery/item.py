"""
Sized items laid out by an ItemGroup.

The layout engine only needs the :class:`SizedItem` capability: readable
and writable ``width`` and ``height`` where assigning one dimension
rescales the other to keep the item's intrinsic aspect ratio. :class:`Item`
is the stock implementation used by the layout helpers and tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from fluid_gallery.errors import InvalidArgumentError

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

    from fluid_gallery.type_defs import Size


@runtime_checkable
class SizedItem(Protocol):
    """Capability required from every item placed in an ItemGroup."""

    @property
    def width(self) -> float: ...

    @width.setter
    def width(self, value: float) -> None: ...

    @property
    def height(self) -> float: ...

    @height.setter
    def height(self, value: float) -> None: ...


def _positive(value: float, name: str) -> float:
    """Return value as a float, rejecting non-numbers and values <= 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise InvalidArgumentError(msg)
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise InvalidArgumentError(msg)
    return float(value)


class Item:
    """
    A rectangle with a fixed aspect ratio.

    Items compare by identity: two items with equal dimensions are still
    different items, which is what ItemGroup.extract relies on.
    """

    __slots__ = ("_aspect_ratio", "_width", "content")

    def __init__(
        self,
        width: float,
        height: float,
        content: Any = None,
    ) -> None:
        self._width = _positive(width, "width")
        self._aspect_ratio = self._width / _positive(height, "height")
        self.content = content

    @classmethod
    def from_image(cls, image: Image.Image) -> Item:
        """Build an item sized like a Pillow image, keeping it as content."""
        width, height = image.size
        return cls(width, height, content=image)

    @property
    def aspect_ratio(self) -> float:
        """Intrinsic width / height ratio."""
        return self._aspect_ratio

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = _positive(value, "width")

    @property
    def height(self) -> float:
        return self._width / self._aspect_ratio

    @height.setter
    def height(self, value: float) -> None:
        self._width = _positive(value, "height") * self._aspect_ratio

    @property
    def size(self) -> Size:
        """Return (width, height)."""
        return self.width, self.height

    def __repr__(self) -> str:
        return f"Item(width={self.width:g}, height={self.height:g})"
