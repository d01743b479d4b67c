"""Tests for the Item collaborator and the SizedItem capability."""

import pytest
from PIL import Image

from fluid_gallery.errors import InvalidArgumentError
from fluid_gallery.item import Item, SizedItem


class TestItem:
    def test_setting_width_keeps_aspect_ratio(self) -> None:
        """Height follows width through the intrinsic ratio."""
        item = Item(200, 100)
        item.width = 50
        assert item.width == 50  # noqa: PLR2004
        assert item.height == pytest.approx(25)
        assert item.aspect_ratio == pytest.approx(2.0)

    def test_setting_height_keeps_aspect_ratio(self) -> None:
        """Width follows height through the intrinsic ratio."""
        item = Item(300, 200)
        item.height = 100
        assert item.width == pytest.approx(150)
        assert item.size == pytest.approx((150, 100))

    def test_equal_dimensions_are_distinct_items(self) -> None:
        """Items compare by identity, never by dimensions."""
        first = Item(10, 10)
        second = Item(10, 10)
        assert first != second
        assert first == first  # noqa: PLR0124

    @pytest.mark.parametrize(
        ("width", "height"),
        [(0, 10), (10, 0), (-5, 10), ("10", 10), (True, 10)],
    )
    def test_rejects_invalid_dimensions(
        self,
        width: object,
        height: object,
    ) -> None:
        """Non-numeric or non-positive dimensions are refused."""
        with pytest.raises(InvalidArgumentError):
            Item(width, height)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, -10, "5"])
    def test_setters_reject_invalid_dimensions(self, value: object) -> None:
        """Assigned dimensions are checked like constructor arguments."""
        item = Item(10, 10)
        with pytest.raises(InvalidArgumentError):
            item.width = value  # type: ignore[assignment]
        with pytest.raises(InvalidArgumentError):
            item.height = value  # type: ignore[assignment]
        assert item.size == (10, 10)

    def test_from_image_uses_image_size(self) -> None:
        """Pillow images provide size and become the item content."""
        image = Image.new("RGB", (64, 32))
        item = Item.from_image(image)
        assert item.size == (64, 32)
        assert item.content is image

    def test_satisfies_capability_protocol(self) -> None:
        """Item is recognised as a SizedItem at runtime."""
        assert isinstance(Item(1, 1), SizedItem)
        assert not isinstance(object(), SizedItem)

    def test_repr(self) -> None:
        """repr shows current dimensions."""
        assert repr(Item(40, 20)) == "Item(width=40, height=20)"
