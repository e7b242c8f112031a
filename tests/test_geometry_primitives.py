import dataclasses
import math

import numpy as np
import pytest

from seatingbowl.model.geometry_primitives import Plane, Point2D, Point3D, Vector2D, Vector3D


def test_point_vector_arithmetic():
    p = Point2D(1.0, 2.0)
    v = Vector2D(3.0, 4.0)

    assert p + v == Point2D(4.0, 6.0)
    assert Point2D(4.0, 6.0) - p == Vector2D(3.0, 4.0)
    assert p - v == Point2D(-2.0, -2.0)
    assert v.magnitude == 5.0
    assert Vector2D.between(p, Point2D(4.0, 6.0)) == v


def test_point_rejects_point_addition():
    with pytest.raises(TypeError):
        Point2D(0.0, 0.0) + Point2D(1.0, 1.0)


def test_primitives_are_immutable():
    p = Point2D(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0


def test_vector_helpers():
    v = Vector2D(0.0, 2.0)
    assert v.normalize() == Vector2D(0.0, 1.0)
    assert Vector2D(0.0, 0.0).normalize() == Vector2D(0.0, 0.0)
    assert v.angle() == pytest.approx(math.pi / 2)
    assert Vector2D(1.0, 2.0).dot(Vector2D(3.0, -1.0)) == 1.0
    assert -v == Vector2D(0.0, -2.0)
    with pytest.raises(ZeroDivisionError):
        v / 0.0


def test_point_is_close_and_distance():
    a = Point2D(0.0, 0.0)
    assert a.distance_to(Point2D(3.0, 4.0)) == 5.0
    assert a.is_close(Point2D(1e-12, -1e-12))
    assert not a.is_close(Point2D(1e-3, 0.0))


def test_vector3d_cross():
    assert Vector3D(1.0, 0.0, 0.0).cross(Vector3D(0.0, 1.0, 0.0)) == Vector3D(0.0, 0.0, 1.0)


def test_xy_plane_is_identity():
    plane = Plane.xy()
    assert plane.point_at(Point2D(3.0, 4.0)) == Point3D(3.0, 4.0, 0.0)
    assert plane.z_axis == Vector3D(0.0, 0.0, 1.0)


def test_plane_normalizes_axes():
    plane = Plane(Point3D(0.0, 0.0, 0.0), Vector3D(2.0, 0.0, 0.0), Vector3D(0.0, 0.0, 5.0))
    assert plane.x_axis == Vector3D(1.0, 0.0, 0.0)
    assert plane.y_axis == Vector3D(0.0, 0.0, 1.0)


@pytest.mark.parametrize(
    "x_axis, y_axis",
    [
        (Vector3D(1.0, 0.0, 0.0), Vector3D(1.0, 1.0, 0.0)),
        (Vector3D(0.0, 0.0, 0.0), Vector3D(0.0, 1.0, 0.0)),
    ],
)
def test_plane_rejects_invalid_axes(x_axis, y_axis):
    with pytest.raises(ValueError):
        Plane(Point3D(0.0, 0.0, 0.0), x_axis, y_axis)


def test_vertical_plane_maps_section_points():
    # Section running along world Y, standing upright
    plane = Plane(Point3D(10.0, 0.0, 0.0), Vector3D(0.0, 1.0, 0.0), Vector3D(0.0, 0.0, 1.0))

    assert plane.point_at(Point2D(2.0, 3.0)) == Point3D(10.0, 2.0, 3.0)

    points = [Point2D(0.0, 0.0), Point2D(2.0, 3.0)]
    np.testing.assert_allclose(plane.points_at(points), [[10.0, 0.0, 0.0], [10.0, 2.0, 3.0]])


def test_points_at_empty():
    assert Plane.xy().points_at([]).shape == (0, 3)
