"""
Error kinds raised while building a section.
"""


class SeatingBowlError(Exception):
    """Base class for all errors raised by the section solver."""


class InvalidConfigurationError(SeatingBowlError, ValueError):
    """Counts, array lengths or dimensions that cannot describe a tier."""


class GeometricDegeneracyError(SeatingBowlError, ArithmeticError):
    """The sightline triangle of a riser solve is degenerate or inverted."""


class MissingPredecessorError(SeatingBowlError, LookupError):
    """A tier should build from a previous tier but has none."""


class SizingDefectError(SeatingBowlError, IndexError):
    """A pre-sized output sequence was over- or under-filled. Programmer error."""
