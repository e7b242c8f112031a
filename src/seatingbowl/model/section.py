"""
Section (Assembler)
===================
An ordered collection of Tiers that share one plane and one point of focus.

Why is this class needed?
-------------------------
1. Ordering: Tiers are built strictly in sequence, because a tier may start
   at the last profile point of the tier before it.
2. Atomicity: The section is computed eagerly in the constructor. Results are
   committed to the tiers only after every tier succeeded, so a failed build
   never leaves half-populated tiers behind.
3. Queries: Per-tier, per-row extraction of points, clearances and
   sightlines for either eye posture.
"""
from __future__ import annotations

import copy
import logging
from typing import Callable, List, Optional, Sequence, TypeVar, TYPE_CHECKING

import numpy as np

from seatingbowl.model.errors import InvalidConfigurationError, MissingPredecessorError
from seatingbowl.model.geometry_primitives import Plane, Point2D, Vector2D
from seatingbowl.model.parameters import EyePosture
from seatingbowl.model.spectator import Spectator
from seatingbowl.model.tier import Tier, TierGeometry
from seatingbowl.solvers.tier_builder import build_tier

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Section:
    """
    A fully computed seating section.

    The section deep-copies the tiers it is given and owns the copies;
    read results from `section.tiers`.
    """

    def __init__(
        self,
        tiers: Sequence[Tier],
        plane: Optional[Plane] = None,
        pof: Optional[Point2D] = None,
    ) -> None:
        """
        Build the section.

        Args:
            tiers: Ordered tiers, front (lowest) tier first.
            plane: Reference frame of the section. Defaults to world XY.
            pof: Point of focus in the local frame. Defaults to the origin.

        Raises:
            InvalidConfigurationError: if there are no tiers or a tier is misconfigured.
            GeometricDegeneracyError: if a riser cannot be solved.
        """
        if not tiers:
            raise InvalidConfigurationError("A section needs at least one tier.")

        self.plane: Plane = plane if plane is not None else Plane.xy()
        self.pof: Point2D = pof if pof is not None else Point2D.origin()
        self.tiers: List[Tier] = [tier.clone() for tier in tiers]

        # The first tier is always anchored on its own start point
        self.tiers[0].build_from_previous_tier = False

        for i, tier in enumerate(self.tiers):
            tier.section_index = i
            tier.plane = self.plane

        self._calc_points()

    def _calc_points(self) -> None:
        for tier in self.tiers:
            tier.validate()

        results: List[TierGeometry] = []
        for tier in self.tiers:
            start_pt = self._resolve_start(tier, results)
            results.append(build_tier(tier, start_pt, self.pof))

        for tier, geometry in zip(self.tiers, results):
            tier.commit(geometry)

        logger.info(
            f"Section built: {len(self.tiers)} tiers, "
            f"{sum(t.row_count for t in self.tiers)} rows."
        )

    def _resolve_start(self, tier: Tier, built: List[TierGeometry]) -> Point2D:
        """Anchor of `tier`: its own start, or the last point of the tier built before it."""
        if not tier.build_from_previous_tier:
            return tier.start_pt
        if tier.section_index == 0 or len(built) < tier.section_index:
            raise MissingPredecessorError(
                f"Tier {tier.section_index} builds from a previous tier, but there is none."
            )
        return built[tier.section_index - 1].points_2d[-1]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def _per_row(self, get: Callable[[Spectator], T]) -> List[List[T]]:
        return [[get(spectator) for spectator in tier.spectators] for tier in self.tiers]

    def profile_points(self) -> List[List[Point2D]]:
        """Profile polyline of every tier."""
        return [list(tier.points_2d) for tier in self.tiers]

    def riser_heights(self) -> List[List[float]]:
        return [list(tier.riser_heights) for tier in self.tiers]

    def aisle_points(self) -> List[List[Point2D]]:
        return [list(tier.aisle_points_2d) for tier in self.tiers]

    def c_values(self, posture: EyePosture = EyePosture.SEATED) -> List[List[float]]:
        """Achieved C-value of every row, in thousandths of the tier unit."""
        return self._per_row(lambda s: s.clearance(posture))

    def spectator_points(self, posture: EyePosture = EyePosture.SEATED) -> List[List[Point2D]]:
        return self._per_row(lambda s: s.eye(posture))

    def sightlines(self, posture: EyePosture = EyePosture.SEATED) -> List[List[Vector2D]]:
        return self._per_row(lambda s: s.sightline(posture))

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def to_arrays(self) -> List[npt.NDArray[np.float64]]:
        """Profile points of every tier as an (n, 2) array."""
        return [
            np.array([[p.x, p.y] for p in tier.points_2d], dtype=np.float64).reshape(-1, 2)
            for tier in self.tiers
        ]

    def profile_points_3d(self) -> List[npt.NDArray[np.float64]]:
        """Profile points of every tier mapped through the section plane, (n, 3) arrays."""
        return [self.plane.points_at(tier.points_2d) for tier in self.tiers]

    def clone(self) -> Section:
        """Deep copy with independently owned tiers."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tiers={len(self.tiers)}, pof={self.pof})"
