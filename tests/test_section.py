import logging
import math

import numpy as np
import pytest

from seatingbowl.model.errors import (
    GeometricDegeneracyError, InvalidConfigurationError, MissingPredecessorError
)
from seatingbowl.model.geometry_primitives import Plane, Point2D, Point3D, Vector3D
from seatingbowl.model.parameters import EyePosture, SpectatorParameters, SuperRiser
from seatingbowl.model.section import Section
from seatingbowl.model.tier import Tier


@pytest.fixture
def upper_tier(params) -> Tier:
    return Tier(
        row_widths=[850.0] * 5,
        spectator_parameters=params,
        start_x=0.0,
        start_y=2500.0,
        max_rake_angle=math.radians(35.0),
        round_to=10.0,
        build_from_previous_tier=True,
        super_riser=SuperRiser(row=2, curb_width=200.0, curb_height=100.0, guardrail_width=300.0),
    )


@pytest.fixture
def section(far_tier, upper_tier) -> Section:
    return Section([far_tier, upper_tier])


def test_example_section(example_tier):
    section = Section([example_tier])
    tier = section.tiers[0]

    assert tier.in_section
    assert len(tier.riser_heights) == 2
    assert len(tier.spectators) == 3
    limit = math.tan(math.radians(35.0)) * 800.0
    for h in tier.riser_heights:
        assert 0.0 < h <= limit
        assert math.isclose(h % 10.0, 0.0, abs_tol=1e-9)

    eye_heights = [p.y for p in section.spectator_points()[0]]
    assert eye_heights == sorted(eye_heights)
    assert len(set(eye_heights)) == 3


def test_tiers_are_chained(section):
    lower, upper = section.tiers
    assert upper.start_pt == lower.last_point
    assert upper.points_2d[0] == lower.last_point + Point2D(0.0, 2500.0).to_vector()


def test_section_assigns_index_and_plane(far_tier, upper_tier):
    plane = Plane(Point3D(10.0, 0.0, 0.0), Vector3D(0.0, 1.0, 0.0), Vector3D(0.0, 0.0, 1.0))
    section = Section([far_tier, upper_tier], plane=plane)

    assert [t.section_index for t in section.tiers] == [0, 1]
    assert all(t.plane == plane for t in section.tiers)
    assert section.tiers[1].spectators[0].section_index == 1
    assert section.tiers[1].spectators[0].plane == plane


def test_first_tier_never_builds_from_previous(example_tier):
    example_tier.build_from_previous_tier = True
    section = Section([example_tier])
    assert section.tiers[0].points_2d[0] == Point2D(0.0, 0.0)


def test_section_does_not_mutate_inputs(far_tier, upper_tier):
    Section([far_tier, upper_tier])
    assert not far_tier.in_section
    assert far_tier.points_2d == []
    assert upper_tier.section_index == 0


def test_clone_is_independent(section):
    copy = section.clone()
    copy.tiers[0].riser_heights[0] = -1.0
    copy.tiers[1].points_2d.append(Point2D(0.0, 0.0))

    assert section.tiers[0].riser_heights[0] > 0.0
    assert len(section.tiers[1].points_2d) == section.tiers[1].expected_point_count()


def test_query_shapes(section):
    for tier, risers, points, aisle, c_values, sightlines in zip(
        section.tiers,
        section.riser_heights(),
        section.profile_points(),
        section.aisle_points(),
        section.c_values(),
        section.sightlines(),
    ):
        assert len(risers) == tier.row_count - 1
        assert len(points) == tier.expected_point_count()
        assert aisle[0] == points[0]
        assert len(c_values) == tier.row_count
        assert len(sightlines) == tier.row_count


def test_posture_queries(section):
    seated = section.spectator_points(EyePosture.SEATED)
    standing = section.spectator_points(EyePosture.STANDING)

    for tier, seated_row, standing_row in zip(section.tiers, seated, standing):
        assert seated_row == [s.loc_2d for s in tier.spectators]
        assert standing_row == [s.loc_2d_standing for s in tier.spectators]
    assert section.c_values(EyePosture.STANDING) != section.c_values(EyePosture.SEATED)


def test_sightlines_point_at_focus(far_tier):
    pof = Point2D(-2000.0, 300.0)
    section = Section([far_tier], pof=pof)
    for eye, line in zip(section.spectator_points()[0], section.sightlines()[0]):
        assert (eye + line).is_close(pof)


def test_array_export(section):
    arrays = section.to_arrays()
    assert [a.shape for a in arrays] == [(len(t.points_2d), 2) for t in section.tiers]
    np.testing.assert_allclose(arrays[0][0], section.tiers[0].points_2d[0].to_array())


def test_profile_points_3d(far_tier):
    plane = Plane(Point3D(10.0, 0.0, 0.0), Vector3D(0.0, 1.0, 0.0), Vector3D(0.0, 0.0, 1.0))
    section = Section([far_tier], plane=plane)

    points_3d = section.profile_points_3d()[0]
    points_2d = section.to_arrays()[0]
    assert points_3d.shape == (len(points_2d), 3)
    np.testing.assert_allclose(points_3d[:, 0], 10.0)
    np.testing.assert_allclose(points_3d[:, 1:], points_2d)


def test_empty_section_is_invalid():
    with pytest.raises(InvalidConfigurationError):
        Section([])


def test_invalid_tier_fails_whole_section(far_tier):
    with pytest.raises(InvalidConfigurationError):
        Section([far_tier, Tier(row_widths=[800.0, -800.0])])


def test_degenerate_tier_fails_whole_section(far_tier):
    degenerate = Tier(
        row_widths=[500.0, 500.0],
        spectator_parameters=SpectatorParameters(eye_x=500.0),
        start_pt=Point2D(0.0, 0.0),
    )
    with pytest.raises(GeometricDegeneracyError):
        Section([far_tier, degenerate])
    assert not far_tier.in_section


def test_missing_predecessor(section):
    orphan = section.tiers[0].clone()
    orphan.build_from_previous_tier = True
    with pytest.raises(MissingPredecessorError):
        section._resolve_start(orphan, [])


def test_section_build_is_logged(example_tier, caplog):
    with caplog.at_level(logging.INFO, logger="seatingbowl"):
        Section([example_tier])
    assert "Section built: 1 tiers, 3 rows." in caplog.text
