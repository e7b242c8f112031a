"""
Tier Builder
============
Generates the profile of one seating tier row by row.

For every row but the last, the tread runs from the row's base point (ptA)
to the rear riser bottom (ptB), the riser rises to ptC and ptC becomes the
base point of the next row:

                    ptC---
                     |
                     | riser height
          row width  |
      ptA-----------ptB

Around a super riser the row state adds points: a curb in front of the
super riser (PRE_SUPER_RISER) and a guardrail platform on top of it
(SUPER_RISER).
"""
from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

from seatingbowl.model.geometry_primitives import Point2D, Vector2D
from seatingbowl.model.parameters import EyePosture, RowState
from seatingbowl.model.spectator import Spectator
from seatingbowl.model.tier import PointBuffer, TierGeometry
from seatingbowl.config import SUPER_RISER_PLATFORM_DROP
from seatingbowl.solvers.aisle import decompose_riser
from seatingbowl.solvers.riser import solve_riser_height

if TYPE_CHECKING:
    from seatingbowl.model.tier import Tier

logger = logging.getLogger(__name__)


class TierBuilder:
    """
    Computes the geometry of a single tier.

    The builder does not modify the tier; `build()` returns a TierGeometry the
    caller commits once the whole section succeeded.
    """

    def __init__(self, tier: Tier, start_pt: Point2D, pof: Point2D) -> None:
        """
        Args:
            tier: Validated tier configuration.
            start_pt: Resolved anchor of the tier (own start or previous tier's last point).
            pof: Point of focus of the section.
        """
        self.tier = tier
        self.start_pt = start_pt
        self.pof = pof
        self._points = PointBuffer(tier.expected_point_count())
        self._risers: List[float] = []
        self._spectators: List[Spectator] = []
        self._aisle: List[Point2D] = []
        self._blocker: Optional[Point2D] = None

    def build(self) -> TierGeometry:
        tier = self.tier
        sr = tier.super_riser
        pt_a = self.start_pt + Vector2D(tier.start_x, tier.start_y)

        self._add_fascia(pt_a)
        self._points.append(pt_a)
        self._aisle.append(pt_a)

        for row in range(tier.row_count - 1):
            state = tier.row_state(row)

            pt_b = pt_a + Vector2D(tier.row_widths[row], 0.0)
            self._points.append(pt_b)
            self._add_spectator(pt_b, row)

            riser_base = pt_b
            if state == RowState.PRE_SUPER_RISER and sr.has_curb:
                if sr.curb_height > 0.0:
                    riser_base = riser_base + Vector2D(0.0, sr.curb_height)
                    self._points.append(riser_base)
                riser_base = riser_base + Vector2D(sr.curb_width, 0.0)
                self._points.append(riser_base)

            riser_height = solve_riser_height(tier, pt_b, row, self.pof)
            self._risers.append(riser_height)
            pt_c = riser_base + Vector2D(0.0, riser_height)
            self._points.append(pt_c)

            self._add_aisle_steps(riser_base, riser_height, pt_a)

            if state == RowState.SUPER_RISER:
                # Guardrail platform belongs to both the profile and the aisle
                pt_c = pt_c + Vector2D(sr.guardrail_width, 0.0)
                self._points.append(pt_c)
                self._aisle.append(pt_c)
                pt_c = pt_c + Vector2D(0.0, -SUPER_RISER_PLATFORM_DROP * tier.spectator_parameters.unit)
                self._points.append(pt_c)
                self._aisle.append(pt_c)

            pt_a = pt_c

        pt_end = pt_a + Vector2D(tier.row_widths[-1], 0.0)
        self._points.append(pt_end)
        self._aisle.append(pt_end)
        self._add_spectator(pt_end, tier.row_count - 1)

        logger.debug(
            f"Tier {tier.section_index}: {tier.row_count} rows, {len(self._points)} points, "
            f"risers {self._risers}"
        )
        return TierGeometry(
            start_pt=self.start_pt,
            points_2d=self._points.to_list(),
            riser_heights=list(self._risers),
            spectators=list(self._spectators),
            aisle_points_2d=list(self._aisle),
        )

    def _add_fascia(self, pt_a: Point2D) -> None:
        """Prepend the fascia profile (reversed, attachment point omitted)."""
        tier = self.tier
        if not tier.has_fascia:
            return
        fascia_points = tier.fascia.points_2d
        for fascia_pt in reversed(fascia_points[1:]):
            self._points.append(pt_a + fascia_pt.to_vector())
        self._blocker = pt_a + fascia_points[tier.fascia.blocker].to_vector()

    def _add_spectator(self, riser_point: Point2D, row: int) -> None:
        """Place the spectator of `row`; `riser_point` is the row's rear riser bottom."""
        tier = self.tier
        if row == 0:
            forward = self._blocker if self._blocker is not None else self._points[0]
            forward_standing = forward
        else:
            front = self._spectators[row - 1]
            forward = front.eye(EyePosture.SEATED)
            forward_standing = front.eye(EyePosture.STANDING)

        self._spectators.append(
            Spectator.place(
                section_index=tier.section_index,
                row=row,
                riser_point=riser_point,
                offsets=tier.eye_offsets(row),
                forward=forward,
                forward_standing=forward_standing,
                pof=self.pof,
                unit=tier.spectator_parameters.unit,
                separation=tier.spectator_separation,
                plane=tier.plane,
            )
        )

    def _add_aisle_steps(self, riser_base: Point2D, riser_height: float, tread_start: Point2D) -> None:
        tier = self.tier
        steps = decompose_riser(riser_base, riser_height, tier.aisle_step_height, tier.aisle_step_width)
        if steps[0].x < tread_start.x:
            logger.warning(
                f"Tier {tier.section_index}: aisle steps start at x={steps[0].x:.1f}, "
                f"in front of their tread start x={tread_start.x:.1f}."
            )
        self._aisle.extend(steps)


def build_tier(tier: Tier, start_pt: Point2D, pof: Point2D) -> TierGeometry:
    """Convenience wrapper around TierBuilder."""
    return TierBuilder(tier, start_pt, pof).build()
