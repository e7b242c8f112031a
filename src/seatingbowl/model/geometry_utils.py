from __future__ import annotations

import math
from math import pi

from seatingbowl.config import GEOMETRY_TOLERANCE
from seatingbowl.model.errors import GeometricDegeneracyError
from seatingbowl.model.geometry_primitives import Point2D


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def rad2deg(radians: float) -> float:
    return radians * 180 / pi


def round_up_to_increment(value: float, increment: float) -> float:
    """
    Round `value` up to the next multiple of `increment`.

    An increment of zero (or less) disables rounding.
    """
    if increment <= 0.0:
        return value
    return math.ceil(value / increment) * increment


def round_down_to_increment(value: float, increment: float) -> float:
    """Round `value` down to the previous multiple of `increment`."""
    if increment <= 0.0:
        return value
    return math.floor(value / increment) * increment


def clearance_at(
    eye: Point2D,
    forward: Point2D,
    pof: Point2D,
    *,
    eps: float = GEOMETRY_TOLERANCE
) -> float:
    """
    Vertical clearance of a sightline over a point in front of the eye.

    The sightline runs from `eye` to the point of focus `pof`. The clearance
    is the height of that line above `forward`, measured at the X of `forward`.

    Args:
        eye: Eye position of the spectator.
        forward: Point the sightline has to clear (eye or profile point in front).
        pof: Point of focus all sightlines aim at.
        eps: Tolerance for the zero check of the horizontal eye distance.

    Returns:
        Clearance in model units. Negative if the sightline is obstructed.

    Raises:
        GeometricDegeneracyError: if the eye is vertically above/below the POF.
    """
    eye_rel = eye - pof
    forward_rel = forward - pof
    if abs(eye_rel.x) <= eps:
        raise GeometricDegeneracyError(
            f"Eye at {eye} is vertically aligned with the point of focus {pof}."
        )
    line_y = eye_rel.y * forward_rel.x / eye_rel.x
    return line_y - forward_rel.y
