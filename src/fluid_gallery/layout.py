"""Single-line layout helpers driven by a LayoutConfig."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluid_gallery.constants import AXIS_HORIZONTAL, AXIS_VERTICAL
from fluid_gallery.errors import InvalidArgumentError
from fluid_gallery.item_group import ItemGroup
from fluid_gallery.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from fluid_gallery.config import LayoutConfig
    from fluid_gallery.item import SizedItem
    from fluid_gallery.type_defs import Axis


def _check_axis(axis: str) -> None:
    if axis not in (AXIS_HORIZONTAL, AXIS_VERTICAL):
        msg = f"axis must be 'horizontal' or 'vertical', got {axis!r}"
        raise InvalidArgumentError(msg)


def build_group(
    items: Iterable[SizedItem],
    config: LayoutConfig,
) -> ItemGroup:
    """Return a group of items spaced by the configured margin."""
    return ItemGroup(items, config.margin)


def fit_line(group: ItemGroup, config: LayoutConfig) -> ItemGroup:
    """
    Lay out the leading items of group along one line of config.span.

    Takes the longest prefix that fits the span, then grows it so it
    fills the span exactly. A prefix that already fills the span is
    left as is. Returned items are the caller's own objects and are
    resized in place.
    """
    _check_axis(config.axis)
    if config.axis == AXIS_HORIZONTAL:
        line = group.horizontal_slice(config.span).scale_to_width(config.span)
        extent = line.width
    else:
        line = group.vertical_slice(config.span).scale_to_height(config.span)
        extent = line.height

    logger.debug(
        "Fitted %d of %d item(s) on a %s line: %.2f of %.2f",
        len(line), len(group), config.axis, extent, config.span,
    )
    return line


def item_offsets(group: ItemGroup, axis: Axis = "horizontal") -> list[float]:
    """Return where each item starts along axis, margins included."""
    _check_axis(axis)
    offsets: list[float] = []
    current = 0.0
    for item in group:
        offsets.append(current)
        extent = item.width if axis == AXIS_HORIZONTAL else item.height
        current += extent + group.margin
    return offsets


def margin_percent_of_span(group: ItemGroup, config: LayoutConfig) -> float:
    """Return the group margin as a percentage of the configured span."""
    return group.margin_percent(config.span)
