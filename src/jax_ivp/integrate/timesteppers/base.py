"""Abstract base class for time-stepping schemes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from ..custom_types import Derivative, Scalar, State
from ..errors import InvalidConfiguration
from ..problem import AbstractIVP
from ..spaces import TREE_SPACE, StateSpaceProtocol
from ..trajectory import Trajectory


@dataclass(frozen=True)
class AbstractStepper(ABC):
    """
    Base class for fixed-step time-stepping schemes.

    Steppers are immutable configuration objects and may be shared between
    any number of problems and trajectories.

    Attributes:
        stepsize: Uniform time step h > 0.
        jit: Compile the per-step update with `jax.jit` once per trajectory.
            Requires a JAX-traceable right-hand side. Default: True.
    """

    stepsize: Scalar
    jit: bool = field(default=True, kw_only=True)

    def __post_init__(self):
        if not self.stepsize > 0:
            raise InvalidConfiguration(
                f"stepsize must be positive, got {self.stepsize!r}"
            )

    @abstractmethod
    def step(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        h: Scalar,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> State:
        """
        Take a single time step.

        Args:
            fun: Right-hand side of system dy/dt = fun(t, y).
            t: Current time.
            y: Current solution.
            h: Time step size.
            space: Vector-space operations on states.

        Returns:
            Solution at t + h.
        """
        ...

    def advance(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> Tuple[State, Optional[Any]]:
        """
        Advance by one step of the configured size.

        Returns:
            y_next: Solution at t + stepsize.
            stats: Solver statistics for the step, or None for explicit schemes.
        """
        return self.step(fun, t, y, self.stepsize, space), None

    def report_convergence(self, stats: Optional[Any], t: Scalar) -> None:
        """Hook called with the statistics of every accepted step."""
        return None

    def get_iterator(self, problem: AbstractIVP) -> Trajectory:
        """Create a fresh trajectory for `problem`."""
        return Trajectory(problem, self)
