"""Spectator record: one row's eye positions, sightlines and clearances."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from seatingbowl.model.geometry_primitives import Point2D, Vector2D, Plane
from seatingbowl.model.geometry_utils import clearance_at
from seatingbowl.model.parameters import EyeOffsets, EyePosture


@dataclass(frozen=True)
class Spectator:
    """
    Spectator of one row.

    C-values are expressed in thousandths of the tier unit, the same scale as
    `SpectatorParameters.target_c_value`.
    """
    section_index: int
    row: int
    loc_2d: Point2D
    loc_2d_standing: Point2D
    sight_line: Vector2D
    sight_line_standing: Vector2D
    forward_2d: Point2D
    forward_2d_standing: Point2D
    c_value: float
    c_value_standing: float
    separation: EyePosture = EyePosture.SEATED
    plane: Optional[Plane] = None

    @classmethod
    def place(
        cls,
        section_index: int,
        row: int,
        riser_point: Point2D,
        offsets: EyeOffsets,
        forward: Point2D,
        forward_standing: Point2D,
        pof: Point2D,
        unit: float,
        separation: EyePosture = EyePosture.SEATED,
        plane: Optional[Plane] = None,
    ) -> Spectator:
        """
        Create the spectator of `row` from its rear riser bottom point.

        Args:
            riser_point: Rear riser bottom point of the row.
            offsets: Eye offsets in effect for this row.
            forward: Seated point in front that the seated sightline must clear.
            forward_standing: Standing counterpart of `forward`.
            pof: Point of focus the sightlines aim at.
            unit: Tier unit, used to scale the clearances.
        """
        loc = riser_point + offsets.offset(EyePosture.SEATED)
        loc_standing = riser_point + offsets.offset(EyePosture.STANDING)
        scale = 1000 / unit
        return cls(
            section_index=section_index,
            row=row,
            loc_2d=loc,
            loc_2d_standing=loc_standing,
            sight_line=Vector2D.between(loc, pof),
            sight_line_standing=Vector2D.between(loc_standing, pof),
            forward_2d=forward,
            forward_2d_standing=forward_standing,
            c_value=clearance_at(loc, forward, pof) * scale,
            c_value_standing=clearance_at(loc_standing, forward_standing, pof) * scale,
            separation=separation,
            plane=plane,
        )

    def eye(self, posture: EyePosture) -> Point2D:
        return self.loc_2d_standing if posture == EyePosture.STANDING else self.loc_2d

    def sightline(self, posture: EyePosture) -> Vector2D:
        return self.sight_line_standing if posture == EyePosture.STANDING else self.sight_line

    def clearance(self, posture: EyePosture) -> float:
        return self.c_value_standing if posture == EyePosture.STANDING else self.c_value
