"""
Geometric Primitives for section geometry and export.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING
import numpy as np
import math

from seatingbowl.config import GEOMETRY_TOLERANCE

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector2D:
    """
    A vector in the section plane representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2D:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    @classmethod
    def between(cls, start: Point2D, end: Point2D) -> Vector2D:
        """Vector pointing from `start` to `end`."""
        return end - start

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2D:
        mag = self.magnitude
        if mag == 0.0: return Vector2D(0.0, 0.0)
        return self / mag

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def angle(self) -> float:
        """Angle in radians measured from the positive X axis."""
        return math.atan2(self.y, self.x)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Point2D:
    """A point in the section plane."""
    x: float
    y: float

    def __add__(self, other: Vector2D) -> Point2D:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector2D):
            return Point2D(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector2D to a Point2D.")

    def __sub__(self, other: Union[Vector2D, Point2D]) -> Union[Vector2D, Point2D]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point2D):
            return Vector2D(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector2D):
            return Point2D(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector2D or Point2D from a Point2D.")

    @classmethod
    def origin(cls) -> Point2D:
        return cls(0.0, 0.0)

    def to_vector(self) -> Vector2D:
        """Position vector of this point (subtraction to origin)."""
        return Vector2D(self.x, self.y)

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: Point2D, tol: float = GEOMETRY_TOLERANCE) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Vector3D:
    """A vector in 3D space, used to orient section planes."""
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector3D:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector3D:
        mag = self.magnitude
        if mag == 0.0: return Vector3D(0.0, 0.0, 0.0)
        return self / mag

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class Point3D:
    """A point in 3D space."""
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector3D) -> Point3D:
        if isinstance(other, Vector3D):
            return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector3D to a Point3D.")

    def __sub__(self, other: Point3D) -> Vector3D:
        if isinstance(other, Point3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Point3D from a Point3D.")

    def distance_to(self, other: Point3D) -> float:
        return (self - other).magnitude

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class Plane:
    """
    Reference frame of a section: an origin and two orthonormal in-plane axes.

    The 2D tier geometry lives in this frame. Local X runs away from the
    point of focus, local Y is vertical.
    """
    origin: Point3D
    x_axis: Vector3D
    y_axis: Vector3D

    def __post_init__(self):
        x_axis = self.x_axis.normalize()
        y_axis = self.y_axis.normalize()
        if x_axis.magnitude == 0.0 or y_axis.magnitude == 0.0:
            raise ValueError("Plane axes must be non-zero vectors.")
        if abs(x_axis.dot(y_axis)) > 1e-6:
            raise ValueError("Plane axes must be perpendicular.")
        object.__setattr__(self, 'x_axis', x_axis)
        object.__setattr__(self, 'y_axis', y_axis)

    @classmethod
    def xy(cls) -> Plane:
        """The world XY plane."""
        return cls(Point3D(0.0, 0.0, 0.0), Vector3D(1.0, 0.0, 0.0), Vector3D(0.0, 1.0, 0.0))

    @property
    def z_axis(self) -> Vector3D:
        return self.x_axis.cross(self.y_axis)

    def point_at(self, point: Point2D) -> Point3D:
        """Express a local 2D point in world coordinates."""
        return self.origin + self.x_axis * point.x + self.y_axis * point.y

    def points_at(self, points: list[Point2D]) -> npt.NDArray[np.float64]:
        """Vectorised `point_at` returning an (n, 3) array."""
        if not points:
            return np.empty((0, 3), dtype=np.float64)
        local = np.array([[p.x, p.y] for p in points], dtype=np.float64)
        axes = np.vstack((self.x_axis.to_array(), self.y_axis.to_array()))
        return self.origin.to_array() + local @ axes
