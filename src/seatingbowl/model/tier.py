"""
Seating Tier (Data Model)
=========================
A Tier is a contiguous block of seating rows sharing one rake/riser policy.

The configuration part of a Tier is supplied by the caller. The output part
(profile points, riser heights, spectators, aisle points) is filled in by the
Section that owns the tier and is read-only afterwards.

Classes:
    PointBuffer: Append-only point sequence with a fixed, known length.
    TierGeometry: The computed output of one tier.
    Tier: Configuration + output container.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List, Optional

from seatingbowl import config
from seatingbowl.model.errors import InvalidConfigurationError, SizingDefectError
from seatingbowl.model.geometry_primitives import Point2D, Plane
from seatingbowl.model.parameters import (
    EyeOffsets, EyePosture, Fascia, RowState, SpectatorParameters, SuperRiser, require_finite
)
from seatingbowl.model.spectator import Spectator


class PointBuffer:
    """
    Append-only point sequence sized up front.

    Writing past the capacity, or finishing with unused capacity, is a sizing
    defect and fails immediately.
    """
    def __init__(self, capacity: int):
        self.capacity = capacity
        self._points: List[Point2D] = []

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point2D:
        return self._points[index]

    def append(self, point: Point2D) -> None:
        if len(self._points) >= self.capacity:
            raise SizingDefectError(
                f"Point buffer of capacity {self.capacity} is full, cannot append {point}."
            )
        self._points.append(point)

    def to_list(self) -> List[Point2D]:
        if len(self._points) != self.capacity:
            raise SizingDefectError(
                f"Point buffer holds {len(self._points)} points, expected exactly {self.capacity}."
            )
        return list(self._points)


@dataclass
class TierGeometry:
    """Computed output of one tier, committed to the Tier once the whole section succeeded."""
    start_pt: Point2D
    points_2d: List[Point2D]
    riser_heights: List[float]
    spectators: List[Spectator]
    aisle_points_2d: List[Point2D]


@dataclass
class Tier:
    """
    Configuration and computed geometry of one seating tier.

    `row_widths` holds one depth per row. `start_pt` is the anchor of the
    first row; it is replaced by the previous tier's last profile point when
    `build_from_previous_tier` is set. `start_x`/`start_y` offset the first
    base point from the anchor in both cases.
    """
    row_widths: List[float]
    row_count: Optional[int] = None
    spectator_parameters: SpectatorParameters = field(default_factory=SpectatorParameters)
    start_pt: Point2D = field(default_factory=Point2D.origin)
    start_x: float = 0.0
    start_y: float = 0.0
    max_rake_angle: float = config.DEFAULT_MAX_RAKE_ANGLE
    round_to: float = config.DEFAULT_ROUND_TO
    aisle_step_height: float = config.DEFAULT_AISLE_STEP_HEIGHT
    aisle_step_width: float = config.DEFAULT_AISLE_STEP_WIDTH
    build_from_previous_tier: bool = False
    super_riser: Optional[SuperRiser] = None
    fascia: Optional[Fascia] = None
    spectator_separation: EyePosture = EyePosture.SEATED

    # Assigned by the owning Section
    section_index: int = field(default=0, init=False)
    plane: Plane = field(default_factory=Plane.xy, init=False)
    in_section: bool = field(default=False, init=False)

    # Outputs
    points_2d: List[Point2D] = field(default_factory=list, init=False)
    riser_heights: List[float] = field(default_factory=list, init=False)
    spectators: List[Spectator] = field(default_factory=list, init=False)
    aisle_points_2d: List[Point2D] = field(default_factory=list, init=False)

    def __post_init__(self):
        self.row_widths = [float(w) for w in self.row_widths]
        if self.row_count is None:
            self.row_count = len(self.row_widths)

    @property
    def has_super_riser(self) -> bool:
        return self.super_riser is not None

    @property
    def has_fascia(self) -> bool:
        return self.fascia is not None and len(self.fascia.points_2d) > 0

    def row_state(self, row: int) -> RowState:
        """State of `row`, governing the riser between `row` and `row + 1`."""
        if self.super_riser is None:
            return RowState.NORMAL
        if row + 1 == self.super_riser.row:
            return RowState.PRE_SUPER_RISER
        if row == self.super_riser.row:
            return RowState.SUPER_RISER
        if row == self.super_riser.row + 1:
            return RowState.POST_SUPER_RISER
        return RowState.NORMAL

    def eye_offsets(self, row: int) -> EyeOffsets:
        """Eye offsets of the spectator seated in `row`."""
        if self.super_riser is not None and row == self.super_riser.row:
            return self.super_riser.eye_offsets
        return self.spectator_parameters.eye_offsets

    def expected_point_count(self) -> int:
        """Exact number of profile points the tier builder emits."""
        count = 1  # first base point
        if self.has_fascia:
            count += self.fascia.emitted_count
        for row in range(self.row_count - 1):
            count += 2  # riser bottom and top
            state = self.row_state(row)
            if state == RowState.PRE_SUPER_RISER and self.super_riser.has_curb:
                count += 2 if self.super_riser.curb_height > 0.0 else 1
            elif state == RowState.SUPER_RISER:
                count += 2  # guardrail platform
        return count + 1  # final row end

    def validate(self) -> None:
        """
        Check the configuration before any geometry is produced.

        Raises:
            InvalidConfigurationError: on the first problem found.
        """
        if self.row_count < 1:
            raise InvalidConfigurationError(f"A tier needs at least one row, got {self.row_count}.")
        if len(self.row_widths) != self.row_count:
            raise InvalidConfigurationError(
                f"Expected {self.row_count} row widths, got {len(self.row_widths)}."
            )
        for i, width in enumerate(self.row_widths):
            require_finite("Tier", **{f"row width {i}": width})
        require_finite(
            "Tier",
            first_base_x=self.start_pt.x + self.start_x,
            first_base_y=self.start_pt.y + self.start_y,
            round_to=self.round_to, aisle_step_height=self.aisle_step_height,
            aisle_step_width=self.aisle_step_width, max_rake_angle=self.max_rake_angle,
        )
        if any(w < 0.0 for w in self.row_widths):
            raise InvalidConfigurationError(f"Row widths must not be negative: {self.row_widths}")
        if self.round_to < 0.0:
            raise InvalidConfigurationError(f"RoundTo must not be negative, got {self.round_to}.")
        if self.aisle_step_height <= 0.0:
            raise InvalidConfigurationError(
                f"Aisle step height must be positive, got {self.aisle_step_height}."
            )
        if self.aisle_step_width < 0.0:
            raise InvalidConfigurationError(
                f"Aisle step width must not be negative, got {self.aisle_step_width}."
            )
        if not 0.0 < self.max_rake_angle < config.MAX_RAKE_ANGLE_LIMIT:
            raise InvalidConfigurationError(
                f"Maximum rake angle must be within (0, pi/2) radians, got {self.max_rake_angle}."
            )
        self.spectator_parameters.validate()
        if self.super_riser is not None:
            self.super_riser.validate(self.row_count)
        if self.fascia is not None:
            self.fascia.validate()

    def commit(self, geometry: TierGeometry) -> None:
        """Store computed geometry on the tier."""
        self.start_pt = geometry.start_pt
        self.points_2d = geometry.points_2d
        self.riser_heights = geometry.riser_heights
        self.spectators = geometry.spectators
        self.aisle_points_2d = geometry.aisle_points_2d
        self.in_section = True

    @property
    def last_point(self) -> Point2D:
        if not self.points_2d:
            raise IndexError(f"Tier {self.section_index} has no computed points.")
        return self.points_2d[-1]

    def clone(self) -> Tier:
        """Deep copy, including computed outputs."""
        return copy.deepcopy(self)
