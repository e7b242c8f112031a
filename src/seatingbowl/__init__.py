"""Stadium seating bowl cross-section solver."""
from seatingbowl.model.errors import (
    GeometricDegeneracyError,
    InvalidConfigurationError,
    MissingPredecessorError,
    SeatingBowlError,
    SizingDefectError,
)
from seatingbowl.model.geometry_primitives import Plane, Point2D, Point3D, Vector2D, Vector3D
from seatingbowl.model.parameters import EyePosture, Fascia, RowState, SpectatorParameters, SuperRiser
from seatingbowl.model.section import Section
from seatingbowl.model.spectator import Spectator
from seatingbowl.model.tier import Tier

__all__ = [
    "GeometricDegeneracyError",
    "InvalidConfigurationError",
    "MissingPredecessorError",
    "SeatingBowlError",
    "SizingDefectError",
    "Plane",
    "Point2D",
    "Point3D",
    "Vector2D",
    "Vector3D",
    "EyePosture",
    "Fascia",
    "RowState",
    "SpectatorParameters",
    "SuperRiser",
    "Section",
    "Spectator",
    "Tier",
]
