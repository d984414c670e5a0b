"""Unit tests for joinery rules."""

import pytest

from cabinetmaker.domain import (
    Allowances,
    BackPanelMount,
    JoineryConfig,
    ShelfMount,
    SideJoint,
    SideJointType,
    joint_adjustment,
)


class TestSideJoint:
    """Side joint adjustments."""

    def test_screwed_adds_nothing(self) -> None:
        adjustment = joint_adjustment(JoineryConfig(), 0.75)

        assert adjustment.side_extension == 0
        assert adjustment.side_length_delta == 0
        assert adjustment.side_note == "cut to fit, pre-drill for screws and glue"

    def test_screwless_extends_each_end(self) -> None:
        joinery = JoineryConfig(side_joint=SideJoint(SideJointType.SCREWLESS, 0.5))

        adjustment = joint_adjustment(joinery, 0.75)

        assert adjustment.side_extension == 0.375
        assert adjustment.side_length_delta == 0.75
        assert adjustment.side_note == 'extend 0.375" each end for screwless joint'

    def test_screwless_zero_depth(self) -> None:
        joinery = JoineryConfig(side_joint=SideJoint("screwless", 0.0))

        adjustment = joint_adjustment(joinery, 0.75)

        assert adjustment.side_length_delta == 0

    def test_screwed_ignores_depth(self) -> None:
        shallow = joint_adjustment(JoineryConfig(side_joint=SideJoint("screwed", 0.1)), 0.75)
        deep = joint_adjustment(JoineryConfig(side_joint=SideJoint("screwed", 0.9)), 0.75)

        assert shallow == deep


class TestBackPanel:
    """Back panel adjustments."""

    def test_rabbeted_subtracts_two_thicknesses(self) -> None:
        adjustment = joint_adjustment(
            JoineryConfig(back_panel=BackPanelMount.RABBETED), 0.75
        )

        assert adjustment.back_delta == 1.5
        assert adjustment.back_note == "fits in rabbet"

    def test_inset_is_full_size(self) -> None:
        adjustment = joint_adjustment(JoineryConfig(back_panel="inset"), 0.75)

        assert adjustment.back_delta == 0
        assert adjustment.back_note == "fits in dado"


class TestShelves:
    """Shelf adjustments."""

    def test_fixed_shelves(self) -> None:
        adjustment = joint_adjustment(JoineryConfig(shelves=ShelfMount.FIXED), 0.75)

        assert adjustment.shelf_width_delta == 0
        assert adjustment.shelf_note == "for dado joint"

    def test_adjustable_shelves_use_pin_clearance(self) -> None:
        adjustment = joint_adjustment(JoineryConfig(shelves="adjustable"), 0.75)

        assert adjustment.shelf_width_delta == 0.125
        assert adjustment.shelf_note == "for shelf pins"

    def test_custom_pin_clearance(self) -> None:
        adjustment = joint_adjustment(
            JoineryConfig(shelves="adjustable"),
            0.75,
            Allowances(shelf_pin_clearance=0.25),
        )

        assert adjustment.shelf_width_delta == 0.25


class TestJoineryConfig:
    """Tests for joinery value objects."""

    def test_unknown_joint_type_raises(self) -> None:
        with pytest.raises(ValueError):
            SideJoint("glued")

    def test_defaults(self) -> None:
        joinery = JoineryConfig()

        assert joinery.side_joint.type is SideJointType.SCREWED
        assert joinery.shelves is ShelfMount.FIXED
        assert joinery.back_panel is BackPanelMount.RABBETED
