"""Unit tests for door position resolution."""

import pytest

from cabinetmaker.domain import DoorPosition, resolve_position


class TestPartitionCompleteness:
    """Every token resolves to a rectangle inside the face."""

    @pytest.mark.parametrize("position", list(DoorPosition))
    @pytest.mark.parametrize("width,height", [(24.0, 30.0), (1.0, 1.0), (37.5, 81.25)])
    def test_rect_lies_within_face(
        self, position: DoorPosition, width: float, height: float
    ) -> None:
        rect = resolve_position(position, width, height)

        assert 0 <= rect.x
        assert rect.right <= width + 1e-9
        assert 0 <= rect.y
        assert rect.bottom <= height + 1e-9
        assert rect.width > 0
        assert rect.height > 0

    @pytest.mark.parametrize("position", list(DoorPosition))
    def test_each_token_splits_at_most_one_axis(self, position: DoorPosition) -> None:
        rect = resolve_position(position, 24.0, 30.0)

        if position.axis == "horizontal":
            assert rect.height == 30.0
            assert rect.y == 0.0
        elif position.axis == "vertical":
            assert rect.width == 24.0
            assert rect.x == 0.0
        else:
            assert (rect.width, rect.height) == (24.0, 30.0)

    def test_accepts_plain_string_token(self) -> None:
        assert resolve_position("left-half", 24, 30) == resolve_position(
            DoorPosition.LEFT_HALF, 24, 30
        )


class TestFractionalExactness:
    """Thirds and two-thirds are exact for divisible faces."""

    def test_left_third(self) -> None:
        rect = resolve_position("left-1/3", 30, 10)

        assert rect.width == 10
        assert rect.x == 0

    def test_right_two_thirds(self) -> None:
        rect = resolve_position("right-2/3", 30, 10)

        assert rect.width == 20
        assert rect.x == 10

    def test_middle_vertical_third(self) -> None:
        rect = resolve_position("middle-vert-1/3", 12, 30)

        assert rect.height == 10
        assert rect.y == 10

    def test_lower_third(self) -> None:
        rect = resolve_position(DoorPosition.LOWER_THIRD, 12, 30)

        assert rect.y == 20
        assert rect.height == 10

    def test_right_half(self) -> None:
        rect = resolve_position(DoorPosition.RIGHT_HALF, 24, 30)

        assert (rect.x, rect.width) == (12, 12)

    def test_lower_half(self) -> None:
        rect = resolve_position(DoorPosition.LOWER_HALF, 24, 30)

        assert (rect.y, rect.height) == (15, 15)

    def test_thirds_tile_the_width(self) -> None:
        thirds = [
            resolve_position(p, 30, 10)
            for p in ("left-1/3", "middle-1/3", "right-1/3")
        ]

        assert [r.x for r in thirds] == [0, 10, 20]
        assert sum(r.width for r in thirds) == 30


class TestUnknownTokens:
    """Tokens outside the closed set are rejected."""

    @pytest.mark.parametrize("token", ["top-half", "LEFT-HALF", "half", ""])
    def test_unknown_token_raises(self, token: str) -> None:
        with pytest.raises(ValueError):
            resolve_position(token, 24, 30)


class TestDegenerateFace:
    """Zero-sized faces produce zero-area rectangles without error."""

    def test_zero_width_face(self) -> None:
        rect = resolve_position("left-1/3", 0, 30)

        assert rect.width == 0
        assert rect.area == 0
