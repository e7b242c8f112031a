import pytest

from seatingbowl.model.geometry_primitives import Point2D
from seatingbowl.solvers.aisle import decompose_riser

BASE = Point2D(1000.0, 0.0)


def test_zero_riser_has_no_step():
    assert decompose_riser(BASE, 0.0, 200.0, 300.0) == [BASE]


@pytest.mark.parametrize("height", [150.0, 200.0])
def test_low_riser_is_a_single_step(height):
    assert decompose_riser(BASE, height, 200.0, 300.0) == [BASE, Point2D(1000.0, height)]


def test_tall_riser_is_split_into_equal_steps():
    points = decompose_riser(BASE, 450.0, 200.0, 300.0)
    assert points == [
        Point2D(400.0, 0.0),
        Point2D(400.0, 150.0),
        Point2D(700.0, 150.0),
        Point2D(700.0, 300.0),
        Point2D(1000.0, 300.0),
        Point2D(1000.0, 450.0),
    ]


@pytest.mark.parametrize("height", [201.0, 400.0, 560.0, 1817.6])
def test_steps_climb_the_full_riser(height):
    step_height, step_width = 200.0, 300.0
    points = decompose_riser(BASE, height, step_height, step_width)

    rises = [b.y - a.y for a, b in zip(points, points[1:]) if b.y > a.y]
    runs = [b.x - a.x for a, b in zip(points, points[1:]) if b.x > a.x]
    n_steps = int(height // step_height)

    assert sum(rises) == pytest.approx(height)
    assert len(rises) == n_steps + 1
    assert all(r == pytest.approx(rises[0]) for r in rises)
    assert all(r <= step_height for r in rises)
    assert sum(runs) == pytest.approx(step_width * n_steps)
    assert points[-1] == Point2D(BASE.x, BASE.y + height)
