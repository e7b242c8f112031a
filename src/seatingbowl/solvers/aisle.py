"""
Aisle/Step Decomposer
=====================
Splits a seating riser into walkable aisle steps running parallel to it.
"""
from __future__ import annotations

import math
from typing import List

from seatingbowl.model.geometry_primitives import Point2D, Vector2D


def decompose_riser(
    riser_base: Point2D,
    riser_height: float,
    step_height: float,
    step_width: float,
) -> List[Point2D]:
    """
    Aisle points climbing one riser, ending at the riser top.

    A riser no taller than `step_height` is climbed in one step up its face.
    A taller riser gets `n = floor(riser_height / step_height)` intermediate
    treads of `step_width`, starting `n * step_width` in front of the riser,
    so the height is climbed in `n + 1` equal rises.

    Args:
        riser_base: Bottom point of the riser.
        riser_height: Height of the riser.
        step_height: Maximum height of a single aisle step (positive).
        step_width: Width of an intermediate aisle tread.

    Returns:
        Points from the foot of the first aisle step to the riser top.
    """
    riser_top = riser_base + Vector2D(0.0, riser_height)
    if riser_height <= 0.0:
        return [riser_base]
    if riser_height <= step_height:
        return [riser_base, riser_top]

    n_steps = math.floor(riser_height / step_height)
    rise = riser_height / (n_steps + 1)

    step_pt = Point2D(riser_base.x - step_width * n_steps, riser_base.y)
    points = [step_pt]
    for _ in range(n_steps):
        step_pt = step_pt + Vector2D(0.0, rise)
        points.append(step_pt)
        step_pt = step_pt + Vector2D(step_width, 0.0)
        points.append(step_pt)
    points.append(riser_top)
    return points
