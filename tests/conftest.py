import math

import pytest

from seatingbowl.model.geometry_primitives import Point2D
from seatingbowl.model.parameters import SpectatorParameters
from seatingbowl.model.tier import Tier


@pytest.fixture
def params() -> SpectatorParameters:
    return SpectatorParameters(
        eye_x=500.0,
        eye_y=1200.0,
        standing_eye_x=450.0,
        standing_eye_y=1650.0,
        unit=1000.0,
        target_c_value=90.0,
    )


@pytest.fixture
def example_tier(params) -> Tier:
    """Three 800 wide rows anchored at the point of focus."""
    return Tier(
        row_widths=[800.0, 800.0, 800.0],
        spectator_parameters=params,
        start_pt=Point2D(0.0, 0.0),
        max_rake_angle=math.radians(35.0),
        round_to=10.0,
    )


@pytest.fixture
def far_tier(params) -> Tier:
    """A tier far enough from the point of focus that no riser hits the rake limit."""
    return Tier(
        row_widths=[800.0] * 6,
        spectator_parameters=params,
        start_pt=Point2D(20000.0, 0.0),
        max_rake_angle=math.radians(35.0),
        round_to=10.0,
    )
