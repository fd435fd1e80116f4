"""Nonlinear solvers used in implicit time stepping schemes."""

from .protocol import RootFinderProtocol
from .fixedpoint import FixedPointIteration, FixedPointStats


__all__ = [
    "RootFinderProtocol",
    "FixedPointIteration",
    "FixedPointStats",
]
