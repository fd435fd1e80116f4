"""Protocol for the nonlinear solvers used in implicit time stepping."""

from typing import Any, Protocol, Tuple, runtime_checkable

from ..custom_types import FixedPointMap, State
from ..spaces import StateSpaceProtocol


@runtime_checkable
class RootFinderProtocol(Protocol):
    """
    Protocol for fixed-point solvers.

    Used by implicit time-stepping schemes to solve the nonlinear equation
    y = g(y) that arises from implicit discretisation.
    """

    def __call__(
        self,
        g: FixedPointMap,
        y_guess: State,
        space: StateSpaceProtocol,
    ) -> Tuple[State, Any]:
        """
        Find y such that y = g(y).

        Args:
            g: Fixed-point map.
            y_guess: Initial guess for the solution.
            space: Vector-space operations on states.

        Returns:
            y: Approximate fixed point.
            stats: Solver statistics.
        """
        ...
