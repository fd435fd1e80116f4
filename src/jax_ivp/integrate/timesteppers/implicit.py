"""
Implicit time-stepping schemes.
"""

import warnings
from dataclasses import dataclass
from functools import cached_property
from typing import Optional, Tuple

from ..custom_types import Derivative, FixedPointMap, Scalar, State
from ..errors import DidNotConverge, InvalidConfiguration, NonConvergenceWarning
from ..rootfinders import FixedPointIteration, FixedPointStats
from ..spaces import TREE_SPACE, StateSpaceProtocol
from .base import AbstractStepper

NONCONVERGENCE_POLICIES = ("ignore", "warn", "raise")


@dataclass(frozen=True)
class BackwardEuler(AbstractStepper):
    """
    Backward Euler time-stepping scheme.

    Discretisation:
    $$ \\frac{\\partial y}{\\partial t} \\rightarrow
    \\frac{y_{n+1} - y_n}{h} = f(t_{n+1}, y_{n+1}) $$

    Fixed-point form:
    $$ y_{n+1} = g(y_{n+1}) = y_n + h f(t_{n+1}, y_{n+1}) $$

    Each step is solved by fixed-point iteration seeded with $y_n$. The
    iteration converges when g is a contraction, i.e. when h times the
    Lipschitz constant of f is below one. For stiff problems or large steps
    it diverges, and the last iterate is accepted regardless.

    With `jit=False` the iteration runs as a plain Python loop, so states
    only need the operations of the problem's state space.

    Attributes:
        stepsize: Uniform time step h > 0.
        tolerance: Convergence tolerance on the distance between successive
            iterates. Default: 1e-6.
        max_iterations: Maximum number of fixed-point iterations per step.
            Default: 50.
        on_nonconvergence: What to do when a step exhausts its iteration
            budget: "ignore" (accept the last iterate, default), "warn"
            (also issue a NonConvergenceWarning) or "raise"
            (raise DidNotConverge).
    """

    tolerance: Scalar = 1e-6
    max_iterations: int = 50
    on_nonconvergence: str = "ignore"

    def __post_init__(self):
        super().__post_init__()
        if self.on_nonconvergence not in NONCONVERGENCE_POLICIES:
            raise InvalidConfiguration(
                f"Unknown on_nonconvergence policy '{self.on_nonconvergence}'. "
                f"Valid options are: {', '.join(NONCONVERGENCE_POLICIES)}."
            )
        # Builds the root finder now so invalid settings fail at construction
        self.root_finder

    @cached_property
    def root_finder(self) -> FixedPointIteration:
        return FixedPointIteration(
            tol=self.tolerance, maxiter=self.max_iterations, eager=not self.jit
        )

    @staticmethod
    def make_fixed_point_map(
        fun: Derivative,
        t_prev: Scalar,
        y_prev: State,
        h: Scalar,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> FixedPointMap:
        """
        Create the fixed-point map of a backward Euler step.

        Map: $g(y) = y_n + h f(t_{n+1}, y)$

        Args:
            fun: Right-hand side of system dy/dt = f(t, y).
            t_prev: Time at previous step.
            y_prev: Solution at previous time step.
            h: Time step size.
            space: Vector-space operations on states.

        Returns:
            A function with signature y -> g(y)
        """
        t_next = t_prev + h
        return lambda y_np1: space.add(y_prev, space.scale(h, fun(t_next, y_np1)))

    def solve_step(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        h: Scalar,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> Tuple[State, FixedPointStats]:
        """
        Perform a backward Euler step and return the solver statistics.

        Args:
            fun: Right-hand side of system dydt = f(t, y).
            t: Current time.
            y: Current solution at time t.
            h: Time step size.
            space: Vector-space operations on states.

        Returns:
            y_next: Solution at time t + h.
            stats: Fixed-point iteration statistics.
        """
        g = self.make_fixed_point_map(fun, t, y, h, space)
        return self.root_finder(g, y, space)

    def step(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        h: Scalar,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> State:
        """
        Perform a backward Euler step.

        Solves $$ y_{n+1} = y_n + h f(t_{n+1}, y_{n+1}) $$
        for $y_{n+1}$ by fixed-point iteration.

        Returns:
            Solution at time t + h.
        """
        y_next, _ = self.solve_step(fun, t, y, h, space)
        return y_next

    def advance(
        self,
        fun: Derivative,
        t: Scalar,
        y: State,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> Tuple[State, FixedPointStats]:
        return self.solve_step(fun, t, y, self.stepsize, space)

    def report_convergence(self, stats: Optional[FixedPointStats], t: Scalar) -> None:
        """Apply the non-convergence policy to the statistics of a step."""
        if stats is None or self.on_nonconvergence == "ignore":
            return
        if bool(stats.converged):
            return

        iterations = int(stats.iterations)
        residual_norm = float(stats.residual_norm)
        if self.on_nonconvergence == "raise":
            raise DidNotConverge(t, iterations, residual_norm, self.tolerance)

        warnings.warn(
            f"Fixed-point iteration did not converge at t={t} "
            f"within {iterations} iterations. "
            f"Final residual norm: {residual_norm:.2e}.",
            NonConvergenceWarning,
            stacklevel=3,
        )
