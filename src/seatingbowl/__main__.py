"""Command-line demo: builds a two-tier section and logs its riser schedule."""
import logging

from seatingbowl.logging_config import setup_logging
from seatingbowl.model.geometry_primitives import Point2D
from seatingbowl.model.geometry_utils import deg2rad
from seatingbowl.model.parameters import EyePosture, Fascia, SpectatorParameters, SuperRiser
from seatingbowl.model.section import Section
from seatingbowl.model.tier import Tier

logger = logging.getLogger("seatingbowl.demo")


def main() -> None:
    setup_logging(level=logging.INFO)

    params = SpectatorParameters(eye_x=500.0, eye_y=1200.0, standing_eye_x=450.0,
                                 standing_eye_y=1650.0, unit=1000.0, target_c_value=90.0)

    lower = Tier(
        row_widths=[800.0] * 12,
        spectator_parameters=params,
        start_pt=Point2D(20000.0, 1000.0),
        max_rake_angle=deg2rad(34.0),
        round_to=10.0,
        fascia=Fascia(points_2d=(Point2D(0.0, 0.0), Point2D(0.0, 1100.0), Point2D(-150.0, 1100.0)),
                      blocker=1),
    )
    upper = Tier(
        row_widths=[800.0] * 15,
        spectator_parameters=params,
        start_x=0.0,
        start_y=0.0,
        max_rake_angle=deg2rad(34.0),
        round_to=10.0,
        build_from_previous_tier=True,
        super_riser=SuperRiser(row=6, curb_width=200.0, curb_height=100.0, guardrail_width=300.0,
                               eye_x=500.0, eye_y=1200.0),
    )

    section = Section([lower, upper])

    for tier, c_values in zip(section.tiers, section.c_values(EyePosture.SEATED)):
        logger.info(f"Tier {tier.section_index}: risers {tier.riser_heights}")
        logger.info(f"Tier {tier.section_index}: C-values {[round(c, 1) for c in c_values]}")


if __name__ == "__main__":
    main()
