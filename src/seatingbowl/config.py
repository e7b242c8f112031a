"""
Configuration & Defaults
========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (eye heights, step limits, ...)
   scattered throughout the model and solver code.
2. Defaults: Configuration records (SpectatorParameters, Tier, ...) read
   their default values from here, so a project-wide change happens in one
   place.

All lengths are in model units. The defaults assume millimetres, i.e. one
`DEFAULT_UNIT` (1000) is one metre.

Exports:
    DEFAULT_UNIT (float): Length of one metre in model units.
    GEOMETRY_TOLERANCE (float): Absolute tolerance for degeneracy checks.
"""
import math

# Units
DEFAULT_UNIT: float = 1000.0

# Spectator eye offsets, measured from the rear riser bottom point of a row
DEFAULT_EYE_X: float = 500.0
DEFAULT_EYE_Y: float = 1200.0
DEFAULT_STANDING_EYE_X: float = 450.0
DEFAULT_STANDING_EYE_Y: float = 1650.0

# Required clearance over the spectator in front, in thousandths of a unit
DEFAULT_TARGET_C_VALUE: float = 90.0

# Tier defaults
DEFAULT_MAX_RAKE_ANGLE: float = math.radians(34.0)
DEFAULT_ROUND_TO: float = 10.0
DEFAULT_AISLE_STEP_HEIGHT: float = 200.0
DEFAULT_AISLE_STEP_WIDTH: float = 300.0

# Super riser platform drop below the riser top, as a fraction of a unit
SUPER_RISER_PLATFORM_DROP: float = 0.5

# Numerics
GEOMETRY_TOLERANCE: float = 1e-9
MAX_RAKE_ANGLE_LIMIT: float = math.pi / 2
