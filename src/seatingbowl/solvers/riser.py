"""
Riser-Height Solver
===================
Finds the smallest riser between two adjacent rows that gives the rear
spectator the target clearance (C-value) over the spectator in front.

The sightline from the rear eye to the point of focus must pass the front
eye at least `target_c` higher. With the point of focus at the origin, the
front eye at (d - t, h) and the next eye at horizontal distance d, similar
triangles give the lowest admissible next eye height:

    r = (target_c + h) / (d - t) * d

t is the horizontal distance between the two eyes. The riser is whatever
lifts the next row's eye to r.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from seatingbowl.config import GEOMETRY_TOLERANCE, SUPER_RISER_PLATFORM_DROP
from seatingbowl.model.errors import GeometricDegeneracyError, InvalidConfigurationError
from seatingbowl.model.geometry_primitives import Point2D, Vector2D
from seatingbowl.model.geometry_utils import round_down_to_increment, round_up_to_increment
from seatingbowl.model.parameters import EyePosture, RowState

if TYPE_CHECKING:
    from seatingbowl.model.tier import Tier

logger = logging.getLogger(__name__)


def solve_riser_height(
    tier: Tier,
    tread_end: Point2D,
    row: int,
    pof: Point2D = Point2D(0.0, 0.0),
) -> float:
    """
    Riser height between `row` and `row + 1` satisfying the tier's target C-value.

    Args:
        tier: Tier providing eye offsets, row widths and riser policy.
        tread_end: Rear riser bottom point of `row`, before any super riser curb.
        row: Index of the front row of the riser.
        pof: Point of focus of the section.

    Returns:
        Non-negative riser height, clamped to the maximum rake (except around
        the super riser) and rounded up to a multiple of `tier.round_to`. On a
        rake-clamped row where rounding up would exceed the rake limit, the
        largest multiple of `tier.round_to` below the limit is returned instead.

    Raises:
        InvalidConfigurationError: if the offsets produce a negative `t` or `d`.
        GeometricDegeneracyError: if the front eye is at or behind the point of focus.
    """
    state = tier.row_state(row)
    params = tier.spectator_parameters
    sr = tier.super_riser

    base = tread_end - pof
    current = params.eye_offsets.offset(tier.spectator_separation)
    following = current
    next_row_width = tier.row_widths[row + 1]
    correction = 0.0

    match state:
        case RowState.PRE_SUPER_RISER:
            # Front row is cleared standing, the riser is measured from the curb top
            curb = sr.applied_curb
            correction -= curb.y
            current = params.eye_offsets.offset(EyePosture.STANDING)
            following = sr.eye_offsets.offset(EyePosture.SEATED) + Vector2D(curb.x, 0.0)
        case RowState.SUPER_RISER:
            # The next tread starts behind the guardrail and below the riser top
            next_row_width += sr.guardrail_width
            current = sr.eye_offsets.offset(tier.spectator_separation)
            correction += SUPER_RISER_PLATFORM_DROP * params.unit

    # Offsets are (-eye_x, eye_y); horizontal eye distances are measured forward
    t = next_row_width - current.x + following.x
    h = base.y + current.y
    d = base.x + current.x + t

    if t < 0.0 or d < 0.0:
        raise InvalidConfigurationError(
            f"Tier {tier.section_index}, row {row}: inverted sightline triangle (t={t}, d={d})."
        )
    if d - t <= GEOMETRY_TOLERANCE:
        raise GeometricDegeneracyError(
            f"Tier {tier.section_index}, row {row}: front eye at or behind the point of focus "
            f"(d - t = {d - t})."
        )

    r = ((params.target_clearance + h) / (d - t)) * d
    height = correction + r - following.y - base.y
    if not math.isfinite(height):
        raise GeometricDegeneracyError(
            f"Tier {tier.section_index}, row {row}: riser height is not finite ({height})."
        )
    solved = max(0.0, height)

    limit = math.tan(tier.max_rake_angle) * t if state.clamps_rake else math.inf
    clamped = min(solved, limit)

    rounded = round_up_to_increment(clamped, tier.round_to)
    if rounded > limit:
        rounded = round_down_to_increment(limit, tier.round_to)

    logger.debug(
        f"Tier {tier.section_index}, row {row} ({state}): solved {solved:.3f}, "
        f"clamped {clamped:.3f}, rounded {rounded:.3f}"
    )
    return rounded
