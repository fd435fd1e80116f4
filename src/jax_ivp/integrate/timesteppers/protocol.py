"""Protocols for time-stepping schemes."""

from typing import Protocol, runtime_checkable

from ..custom_types import Derivative, Scalar, State
from ..spaces import StateSpaceProtocol


@runtime_checkable
class StepperProtocol(Protocol):
    """
    Protocol for time-stepping schemes.

    Defines the interface for advancing an ODE one time step.
    Any class implementing a step() method with this signature can be used
    to advance a state by hand; `AbstractStepper` adds trajectories on top.
    """

    def step(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        h: Scalar,
        space: StateSpaceProtocol,
    ) -> State:
        """
        Take a single time step.

        Args:
            fun: Right-hand side function.
            t: Current time.
            y: Current solution.
            h: Time step size.
            space: Vector-space operations on states.

        Returns:
            Solution at t + h.
        """
        ...
