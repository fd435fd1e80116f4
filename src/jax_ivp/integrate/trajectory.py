"""Lazy trajectories produced by the time steppers."""

from functools import partial
from typing import TYPE_CHECKING

import jax

from .custom_types import TrajectoryPoint
from .problem import AbstractIVP

if TYPE_CHECKING:
    from .timesteppers.base import AbstractStepper


class Trajectory:
    """
    Single-pass iterator over the points (t, y) of an initial value problem.

    Every call to `next` advances the solution by one step of the stepper.
    The first point lies one step after the initial time. Iteration ends the
    first time the stop condition rejects a candidate point, and an exhausted
    trajectory never produces points again: create a new one from the
    problem to integrate again.

    A step that raises (an error in the right-hand side, or
    `DidNotConverge`) leaves the trajectory at its last accepted point.

    Attributes:
        problem: Problem being integrated.
        stepper: Time-stepping scheme.
        current_time: Time of the last yielded point (initially t0).
        current_state: State of the last yielded point (initially y0).
        steps: Number of points yielded so far.
        exhausted: True once the stop condition has ended the trajectory.
    """

    def __init__(self, problem: AbstractIVP, stepper: "AbstractStepper"):
        self.problem = problem
        self.stepper = stepper
        self.current_time = problem.get_initial_time()
        self.current_state = problem.get_initial_state()
        self.steps = 0
        self.exhausted = False

        self._t0 = self.current_time
        self._stop_condition = problem.get_stop_condition()

        advance = partial(stepper.advance, problem.derive, space=problem.get_space())
        self._advance = jax.jit(advance) if stepper.jit else advance

    def __iter__(self) -> "Trajectory":
        return self

    def __next__(self) -> TrajectoryPoint:
        if self.exhausted:
            raise StopIteration

        # Times are measured from t0 so rounding errors do not accumulate
        n = self.steps + 1
        t_next = self._t0 + n * self.stepper.stepsize
        y_next, stats = self._advance(self.current_time, self.current_state)

        if not self._stop_condition.admits(t_next, y_next, n):
            self.exhausted = True
            raise StopIteration

        self.stepper.report_convergence(stats, t_next)

        self.current_time = t_next
        self.current_state = y_next
        self.steps = n
        return t_next, y_next
