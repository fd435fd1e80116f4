"""Explicit time-stepping schemes."""

from dataclasses import dataclass

from ..custom_types import Derivative, Scalar, State
from ..spaces import TREE_SPACE, StateSpaceProtocol
from .base import AbstractStepper


@dataclass(frozen=True)
class ForwardEuler(AbstractStepper):
    """
    Forward Euler method.

    Discretisation:
        $$ \\frac{\\partial y}{\\partial t} \\rightarrow
        \\frac{(y_{n+1} - y_n)}{h} = f(t_n, y_n) $$
    """

    def step(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        h: Scalar,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> State:
        """
        Perform a single Forward Euler step.

        Computes $$ y_{n+1} = y_n + h f(t_n, y_n). $$

        Args:
            fun: Right-hand side of system dydt = f(t, y).
            t: Current time.
            y: Current solution.
            h: Time step size.
            space: Vector-space operations on states.

        Returns:
            Solution at t + h.
        """
        return space.add(y, space.scale(h, fun(t, y)))


@dataclass(frozen=True)
class RK4(AbstractStepper):
    """Fourth (4th) order Runge-Kutta method."""

    def step(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        h: Scalar,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> State:
        """
        Perform a single RK4 step.

        Args:
            fun: Right-hand side of system dy/dt = f(t, y).
            t: Current time.
            y: Current solution.
            h: Time step size.
            space: Vector-space operations on states.

        Returns:
            Solution at t + h.
        """
        add, scale = space.add, space.scale
        k1 = fun(t, y)
        k2 = fun(t + 0.5 * h, add(y, scale(0.5 * h, k1)))
        k3 = fun(t + 0.5 * h, add(y, scale(0.5 * h, k2)))
        k4 = fun(t + h, add(y, scale(h, k3)))
        k = add(add(k1, scale(2.0, k2)), add(scale(2.0, k3), k4))
        return add(y, scale(h / 6.0, k))
