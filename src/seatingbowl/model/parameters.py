"""
Tier Configuration Records
==========================
Defines the small, immutable configuration structures a Tier is built from:
spectator eye offsets, the optional super riser and the optional fascia.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Tuple

from seatingbowl import config
from seatingbowl.model.errors import InvalidConfigurationError
from seatingbowl.model.geometry_primitives import Point2D, Vector2D


def require_finite(owner: str, **values: float) -> None:
    """Raise InvalidConfigurationError naming the first NaN or infinite value."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidConfigurationError(f"{owner} {name} must be finite, got {value}.")


class EyePosture(StrEnum):
    SEATED = "seated"
    STANDING = "standing"


class RowState(StrEnum):
    """
    Role of a row relative to the tier's super riser.

    The state of row `n` governs the riser between row `n` and row `n + 1`.
    """
    NORMAL = "normal"
    PRE_SUPER_RISER = "pre_super_riser"    # the next row is the super riser row
    SUPER_RISER = "super_riser"            # this row sits on top of the super riser
    POST_SUPER_RISER = "post_super_riser"  # first row behind the super riser row

    @property
    def clamps_rake(self) -> bool:
        """Super riser risers are exempt from the maximum rake angle."""
        return self not in (RowState.PRE_SUPER_RISER, RowState.SUPER_RISER)


@dataclass(frozen=True)
class EyeOffsets:
    """Seated and standing eye offsets from a row's rear riser bottom point."""
    eye_x: float
    eye_y: float
    standing_eye_x: float
    standing_eye_y: float

    def offset(self, posture: EyePosture) -> Vector2D:
        """Offset from the riser point to the eye, for the given posture."""
        match posture:
            case EyePosture.SEATED:
                return Vector2D(-self.eye_x, self.eye_y)
            case EyePosture.STANDING:
                return Vector2D(-self.standing_eye_x, self.standing_eye_y)
        raise ValueError(f"Unknown eye posture: {posture}")


@dataclass(frozen=True)
class SpectatorParameters:
    eye_x: float = config.DEFAULT_EYE_X
    eye_y: float = config.DEFAULT_EYE_Y
    standing_eye_x: float = config.DEFAULT_STANDING_EYE_X
    standing_eye_y: float = config.DEFAULT_STANDING_EYE_Y
    unit: float = config.DEFAULT_UNIT
    target_c_value: float = config.DEFAULT_TARGET_C_VALUE

    @property
    def target_clearance(self) -> float:
        """Target C-value converted to model units."""
        return self.target_c_value / 1000 * self.unit

    @property
    def eye_offsets(self) -> EyeOffsets:
        return EyeOffsets(self.eye_x, self.eye_y, self.standing_eye_x, self.standing_eye_y)

    def validate(self) -> None:
        require_finite(
            "Spectator", eye_x=self.eye_x, eye_y=self.eye_y, standing_eye_x=self.standing_eye_x,
            standing_eye_y=self.standing_eye_y, unit=self.unit, target_c_value=self.target_c_value,
        )
        if self.unit <= 0.0:
            raise InvalidConfigurationError(f"Unit must be positive, got {self.unit}.")
        if self.target_c_value < 0.0:
            raise InvalidConfigurationError(
                f"Target C-value must not be negative, got {self.target_c_value}."
            )
        if self.eye_y < 0.0 or self.standing_eye_y < 0.0:
            raise InvalidConfigurationError("Eye heights must not be negative.")


@dataclass(frozen=True)
class SuperRiser:
    """
    A single oversized riser within a tier (vomitory, aisle or structural break).

    `row` is the 0-based index of the row seated on top of the super riser.
    The eye offsets override the tier defaults for that row.
    """
    row: int
    curb_width: float = 0.0
    curb_height: float = 0.0
    guardrail_width: float = 0.0
    eye_x: float = config.DEFAULT_EYE_X
    eye_y: float = config.DEFAULT_EYE_Y
    standing_eye_x: float = config.DEFAULT_STANDING_EYE_X
    standing_eye_y: float = config.DEFAULT_STANDING_EYE_Y

    @property
    def eye_offsets(self) -> EyeOffsets:
        return EyeOffsets(self.eye_x, self.eye_y, self.standing_eye_x, self.standing_eye_y)

    @property
    def has_curb(self) -> bool:
        return self.curb_width > 0.0

    @property
    def applied_curb(self) -> Vector2D:
        """Offset of the curb top corner from the tread end; zero without a curb."""
        if not self.has_curb:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.curb_width, self.curb_height)

    def validate(self, row_count: int) -> None:
        if not 0 <= self.row <= row_count - 1:
            raise InvalidConfigurationError(
                f"Super riser row {self.row} is outside [0, {row_count - 1}]."
            )
        require_finite(
            "Super riser", curb_width=self.curb_width, curb_height=self.curb_height,
            guardrail_width=self.guardrail_width, eye_x=self.eye_x, eye_y=self.eye_y,
            standing_eye_x=self.standing_eye_x, standing_eye_y=self.standing_eye_y,
        )
        for name in ("curb_width", "curb_height", "guardrail_width", "eye_y", "standing_eye_y"):
            if getattr(self, name) < 0.0:
                raise InvalidConfigurationError(f"Super riser {name} must not be negative.")


@dataclass(frozen=True)
class Fascia:
    """
    Leading profile prepended to a tier's first row.

    Point 0 is the attachment point and coincides with the tier's first base
    point; the remaining points are relative to it. `blocker` is the index of
    the point the first row's sightline has to clear.
    """
    points_2d: Tuple[Point2D, ...]
    blocker: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'points_2d', tuple(self.points_2d))

    @property
    def emitted_count(self) -> int:
        """Number of profile points the fascia adds in front of the first base point."""
        return max(0, len(self.points_2d) - 1)

    def validate(self) -> None:
        if not self.points_2d:
            raise InvalidConfigurationError("Fascia needs at least one point.")
        if not 0 <= self.blocker < len(self.points_2d):
            raise InvalidConfigurationError(
                f"Fascia blocker {self.blocker} is outside [0, {len(self.points_2d) - 1}]."
            )
        for i, pt in enumerate(self.points_2d):
            require_finite("Fascia", **{f"point {i} x": pt.x, f"point {i} y": pt.y})
