"""Cabinet configuration entity.

CabinetSpec is an immutable snapshot of everything the derivation services
read. Editing operations return a new spec and never mutate in place, so a
form or CLI can rebuild the cut list and schematic from any snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .value_objects import (
    DEFAULT_ALLOWANCES,
    Allowances,
    Dimensions,
    Door,
    DoorPosition,
    DoorType,
    JoineryConfig,
)


@dataclass(frozen=True)
class CabinetSpec:
    """A rectangular cabinet configuration.

    Preconditions (enforced by the configuration schema, not here):
    dimensions >= 0, material_thickness > 0, shelf_count >= 0.

    Attributes:
        dimensions: Overall width, height and depth in inches.
        material_thickness: Sheet thickness shared by all case panels.
        shelf_count: Number of evenly spaced shelves.
        joinery: Side, shelf and back panel joinery selection.
        doors: Doors in input order.
        allowances: Fabrication allowances.
    """

    dimensions: Dimensions
    material_thickness: float = 0.75
    shelf_count: int = 0
    joinery: JoineryConfig = field(default_factory=JoineryConfig)
    doors: tuple[Door, ...] = ()
    allowances: Allowances = DEFAULT_ALLOWANCES

    def __post_init__(self) -> None:
        object.__setattr__(self, "doors", tuple(self.doors))

    def with_dimensions(
        self,
        width: float | None = None,
        height: float | None = None,
        depth: float | None = None,
    ) -> CabinetSpec:
        """Return a copy with any of the given dimensions replaced."""
        dimensions = Dimensions(
            width=self.dimensions.width if width is None else width,
            height=self.dimensions.height if height is None else height,
            depth=self.dimensions.depth if depth is None else depth,
        )
        return replace(self, dimensions=dimensions)

    def with_material_thickness(self, thickness: float) -> CabinetSpec:
        return replace(self, material_thickness=thickness)

    def with_shelf_count(self, shelf_count: int) -> CabinetSpec:
        return replace(self, shelf_count=shelf_count)

    def add_shelf(self) -> CabinetSpec:
        return replace(self, shelf_count=self.shelf_count + 1)

    def remove_shelf(self) -> CabinetSpec:
        """Return a copy with one fewer shelf, never going below zero."""
        return replace(self, shelf_count=max(0, self.shelf_count - 1))

    def with_joinery(self, joinery: JoineryConfig) -> CabinetSpec:
        return replace(self, joinery=joinery)

    def with_allowances(self, allowances: Allowances) -> CabinetSpec:
        return replace(self, allowances=allowances)

    def add_door(self, door: Door | None = None) -> CabinetSpec:
        """Return a copy with a door appended (a full solid door by default)."""
        new_door = door if door is not None else Door()
        return replace(self, doors=self.doors + (new_door,))

    def remove_door(self, index: int) -> CabinetSpec:
        """Return a copy without the door at ``index``.

        Raises:
            IndexError: If there is no door at ``index``.
        """
        if not -len(self.doors) <= index < len(self.doors):
            raise IndexError(f"No door at index {index}")
        doors = list(self.doors)
        del doors[index]
        return replace(self, doors=tuple(doors))

    def update_door(
        self,
        index: int,
        position: DoorPosition | str | None = None,
        type: DoorType | str | None = None,
    ) -> CabinetSpec:
        """Return a copy with the door at ``index`` changed.

        Raises:
            IndexError: If there is no door at ``index``.
            ValueError: If position or type is not a recognized token.
        """
        if not -len(self.doors) <= index < len(self.doors):
            raise IndexError(f"No door at index {index}")
        doors = list(self.doors)
        current = doors[index]
        doors[index] = Door(
            position=current.position if position is None else position,
            type=current.type if type is None else type,
        )
        return replace(self, doors=tuple(doors))
