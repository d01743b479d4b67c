"""
Margin-aware ordered groups of sized items.

An :class:`ItemGroup` lays its items out along one axis with a fixed
margin between neighbours. Operations come in two kinds:

- in-place mutators that return the same group for chaining
  (``add``, ``set_width``, ``set_height``, ``set_scale``, ``set_margin``);
- derived views that return a new group (``filter``, ``slice``,
  ``scale_to_width``, ``scale_to_height``, ``horizontal_slice``,
  ``vertical_slice``).

Derived groups hold the same item objects as their source. In particular
``scale_to_width`` and ``scale_to_height`` copy only the container, so the
scaling they apply is visible through the source group as well.
``extract`` is the one operation that both derives a group and removes
the derived items from the source.
"""

from __future__ import annotations

import inspect
from collections import Counter
from typing import TYPE_CHECKING, overload

from fluid_gallery.constants import PERCENT
from fluid_gallery.errors import (
    DivisionUndefinedError,
    IdentityMismatchError,
    InvalidArgumentError,
)
from fluid_gallery.item import SizedItem
from fluid_gallery.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Iterator

    from fluid_gallery.type_defs import GroupSelector, ItemPredicate

_DIMENSIONS = ("width", "height")


def _is_resizable(item: object) -> bool:
    """Return True if item has width and height that can be assigned."""
    if not isinstance(item, SizedItem):
        return False
    for name in _DIMENSIONS:
        attr = inspect.getattr_static(type(item), name, None)
        if isinstance(attr, property) and attr.fset is None:
            return False
    return True


class ItemGroup:
    """Ordered items plus the margin placed between adjacent items."""

    __slots__ = ("_items", "_margin")

    def __init__(
        self,
        items: Iterable[SizedItem] = (),
        margin: float = 0,
    ) -> None:
        self._items: list[SizedItem] = []
        for item in items:
            self.add(item)
        self._margin = margin

    @classmethod
    def _wrap(cls, items: list[SizedItem], margin: float) -> ItemGroup:
        # items already passed add() in a source group
        group = cls((), margin)
        group._items = items
        return group

    # --------------------------
    # Container protocol
    # --------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SizedItem]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> SizedItem: ...

    @overload
    def __getitem__(self, index: slice) -> ItemGroup: ...

    def __getitem__(self, index: int | slice) -> SizedItem | ItemGroup:
        """Return one item, or a new group with the same margin for a slice."""
        if isinstance(index, slice):
            return ItemGroup._wrap(self._items[index], self._margin)
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return any(own is item for own in self._items)

    def __repr__(self) -> str:
        return (
            f"ItemGroup(count={len(self)}, margin={self._margin:g}, "
            f"width={self.width:g})"
        )

    @property
    def items(self) -> tuple[SizedItem, ...]:
        """Snapshot of the items in layout order."""
        return tuple(self._items)

    def copy(self) -> ItemGroup:
        """Return a new group holding the same item objects."""
        return ItemGroup._wrap(list(self._items), self._margin)

    # --------------------------
    # Margin
    # --------------------------

    @property
    def margin(self) -> float:
        """Spacing between adjacent items."""
        return self._margin

    @margin.setter
    def margin(self, value: float) -> None:
        self._margin = value

    def set_margin(self, margin: float) -> ItemGroup:
        """Change the margin and return this group."""
        self._margin = margin
        return self

    def margin_percent(self, total: float) -> float:
        """
        Return the margin as a percentage of ``total``.

        Raises:
            DivisionUndefinedError: If ``total`` is zero.

        """
        if total == 0:
            msg = "Cannot express margin as a percentage of a zero total"
            raise DivisionUndefinedError(msg)
        return (self._margin / total) * PERCENT

    # --------------------------
    # In-place mutation
    # --------------------------

    def add(self, item: SizedItem) -> ItemGroup:
        """Append an item, duplicates included, and return this group."""
        if not _is_resizable(item):
            msg = (
                "ItemGroup accepts items with settable width and height, "
                f"got {type(item).__name__}"
            )
            raise InvalidArgumentError(msg)
        self._items.append(item)
        return self

    def set_width(self, width: float) -> ItemGroup:
        """Give every item the same width, keeping aspect ratios."""
        for item in self._items:
            item.width = width
        return self

    def set_height(self, height: float) -> ItemGroup:
        """Give every item the same height, keeping aspect ratios."""
        for item in self._items:
            item.height = height
        return self

    def set_scale(self, scale: float) -> ItemGroup:
        """Multiply the width (and so the height) of every item by scale."""
        for item in self._items:
            item.width = item.width * scale
        return self

    # --------------------------
    # Derived groups
    # --------------------------

    def filter(self, predicate: ItemPredicate) -> ItemGroup:
        """Return a new group with the items accepted by predicate."""
        return ItemGroup._wrap(
            [item for item in self._items if predicate(item)],
            self._margin,
        )

    def slice(self, offset: int, limit: int | None = None) -> ItemGroup:
        """
        Return a new group with ``limit`` items starting at ``offset``.

        A ``limit`` of None takes every item up to the end. Offsets past
        the end give an empty group.

        Raises:
            InvalidArgumentError: If offset or limit is negative.

        """
        if offset < 0:
            msg = f"offset must not be negative, got {offset}"
            raise InvalidArgumentError(msg)
        if limit is None:
            return ItemGroup._wrap(self._items[offset:], self._margin)
        if limit < 0:
            msg = f"limit must not be negative, got {limit}"
            raise InvalidArgumentError(msg)
        return ItemGroup._wrap(
            self._items[offset:offset + limit], self._margin,
        )

    def extract(self, selector: GroupSelector) -> ItemGroup:
        """
        Move the items chosen by ``selector`` out of this group.

        The selector receives a temporary copy of this group and returns
        a group built from it. Every item of that result is removed from
        this group by identity, one occurrence per occurrence in the
        result, and the result is returned.

        Raises:
            InvalidArgumentError: If the selector does not return an
                ItemGroup.
            IdentityMismatchError: If the result holds items this group
                does not. The group is left unchanged.

        """
        extracted = selector(self.copy())
        if not isinstance(extracted, ItemGroup):
            msg = (
                "extract selector must return an ItemGroup, "
                f"got {type(extracted).__name__}"
            )
            raise InvalidArgumentError(msg)

        pending = Counter(id(item) for item in extracted)
        available = Counter(id(item) for item in self._items)
        missing = pending - available
        if missing:
            msg = (
                f"Extracted group holds {sum(missing.values())} item(s) "
                "not present in the source group"
            )
            raise IdentityMismatchError(msg)

        remaining: list[SizedItem] = []
        for item in self._items:
            if pending[id(item)] > 0:
                pending[id(item)] -= 1
            else:
                remaining.append(item)
        self._items = remaining

        logger.debug(
            "Extracted %d item(s), %d left in source group",
            len(extracted), len(remaining),
        )
        return extracted

    def scale_to_width(self, width: float) -> ItemGroup:
        """
        Return a group whose items grow to fill ``width``, margins included.

        Items are shared with this group, so they are scaled here too.
        Rows that already fill or exceed ``width`` are not shrunk.
        """
        group = self.copy()
        width_without_margins = width - group.gaps * self._margin
        sum_widths = group.sum_widths()

        if 0 < sum_widths < width_without_margins:
            scale = width_without_margins / sum_widths
            logger.debug("Scaling %d item(s) by %.4f to width %s",
                         len(group), scale, width)
            group.set_scale(scale)

        return group

    def scale_to_height(self, height: float) -> ItemGroup:
        """
        Return a group whose items grow to fill ``height``, margins included.

        Items are shared with this group, so they are scaled here too.
        Columns that already fill or exceed ``height`` are not shrunk.
        """
        group = self.copy()
        height_without_margins = height - group.gaps * self._margin
        sum_heights = group.sum_heights()

        if 0 < sum_heights < height_without_margins:
            scale = height_without_margins / sum_heights
            logger.debug("Scaling %d item(s) by %.4f to height %s",
                         len(group), scale, height)
            group.set_scale(scale)

        return group

    def horizontal_slice(self, width: float) -> ItemGroup:
        """Return the leading items that fit in ``width`` side by side."""
        return self._leading_fit(
            [item.width for item in self._items], width,
        )

    def vertical_slice(self, height: float) -> ItemGroup:
        """Return the leading items that fit in ``height`` stacked."""
        return self._leading_fit(
            [item.height for item in self._items], height,
        )

    def _leading_fit(self, extents: list[float], span: float) -> ItemGroup:
        # Each item brings its own trailing margin; the last one is
        # forgiven by widening the limit by one margin.
        limit = span + self._margin
        current = 0.0
        count = 0
        for extent in extents:
            current += extent + self._margin
            if current > limit:
                break
            count += 1
        return ItemGroup._wrap(self._items[:count], self._margin)

    # --------------------------
    # Aggregate queries
    # --------------------------

    @property
    def gaps(self) -> int:
        """Number of margins between items."""
        return max(len(self._items) - 1, 0)

    def sum_widths(self) -> float:
        """Sum of item widths, without margins."""
        return sum(item.width for item in self._items)

    def sum_heights(self) -> float:
        """Sum of item heights, without margins."""
        return sum(item.height for item in self._items)

    @property
    def width(self) -> float:
        """Total width when laid out in a row."""
        return self.sum_widths() + self.gaps * self._margin

    @property
    def height(self) -> float:
        """Total height when laid out in a column."""
        return self.sum_heights() + self.gaps * self._margin
