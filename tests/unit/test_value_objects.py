"""Unit tests for domain value objects."""

import pytest

from cabinetmaker.domain import (
    CutPiece,
    Dimensions,
    DoorPosition,
    DoorType,
    PaletteRole,
    PanelType,
    Rect,
)
from cabinetmaker.domain.value_objects import MaterialThickness


class TestDimensions:
    """Tests for Dimensions."""

    def test_scaled(self) -> None:
        assert Dimensions(24, 30, 12).scaled(4) == Dimensions(96, 120, 48)

    def test_zero_is_allowed(self) -> None:
        assert Dimensions(0, 0, 0).scaled(4) == Dimensions(0, 0, 0)


class TestRect:
    """Tests for Rect."""

    def test_edges_and_center(self) -> None:
        rect = Rect(2, 3, 10, 20)

        assert (rect.right, rect.bottom) == (12, 23)
        assert rect.center == (7, 13)
        assert rect.area == 200

    def test_overlap_area(self) -> None:
        assert Rect(0, 0, 10, 10).overlap_area(Rect(5, 5, 10, 10)) == 25

    def test_touching_rects_do_not_overlap(self) -> None:
        assert Rect(0, 0, 10, 10).overlap_area(Rect(10, 0, 10, 10)) == 0


class TestMaterialThickness:
    """Tests for MaterialThickness presets."""

    def test_presets_thickest_first(self) -> None:
        assert list(MaterialThickness.presets().values()) == [0.75, 0.5, 0.25]


class TestCutPiece:
    """Tests for CutPiece."""

    def test_area_counts_quantity(self) -> None:
        piece = CutPiece("Shelf", 3, 10.5, 23.125, "", PanelType.SHELF)

        assert piece.area == pytest.approx(3 * 10.5 * 23.125)


class TestDoorEnums:
    """Tests for door position and type enums."""

    def test_thirteen_positions(self) -> None:
        assert len(DoorPosition) == 13

    @pytest.mark.parametrize(
        "position,name,axis",
        [
            (DoorPosition.FULL, "full", "full"),
            (DoorPosition.LEFT_THIRD, "left 1 of 3", "horizontal"),
            (DoorPosition.RIGHT_TWO_THIRDS, "right 2 of 3", "horizontal"),
            (DoorPosition.MIDDLE_VERT_THIRD, "middle vertical 1 of 3", "vertical"),
            (DoorPosition.LOWER_HALF, "lower half", "vertical"),
        ],
    )
    def test_display_name_and_axis(
        self, position: DoorPosition, name: str, axis: str
    ) -> None:
        assert position.display_name == name
        assert position.axis == axis

    def test_type_labels(self) -> None:
        assert [t.label for t in DoorType] == ["Solid", "Mirror", "Glass"]

    def test_palette_role_for_door(self) -> None:
        assert PaletteRole.for_door(DoorType.GLASS) is PaletteRole.GLASS_DOOR
        assert PaletteRole.for_door("mirror") is PaletteRole.MIRROR_DOOR
