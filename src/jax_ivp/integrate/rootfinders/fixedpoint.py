"""Fixed-point iteration."""

from typing import NamedTuple, Tuple

from flax import nnx
import jax
from jax import Array

from ..custom_types import FixedPointMap, State
from ..errors import InvalidConfiguration
from ..spaces import TREE_SPACE, StateSpaceProtocol


class FixedPointStats(NamedTuple):
    """
    Statistics of a fixed-point solve.

    Attributes:
        iterations: Number of applications of the map.
        residual_norm: Norm of the difference between the last two iterates.
        converged: Whether residual_norm reached the tolerance.

    Eager solves report Python int, float and bool values.
    """

    iterations: Array
    residual_norm: Array
    converged: Array


class FixedPointIteration(nnx.Module):
    """
    Unassisted fixed-point iteration.

    Iterative update: $y_{k+1} = g(y_k)$, starting from the initial guess.

    Stops as soon as $\\|y_{k+1} - y_k\\| \\le tol$ or after `maxiter`
    applications of g, whichever comes first. There is no divergence guard:
    if g is not a contraction the iterates may grow without bound, which is
    reported through the returned statistics only.

    Implements: RootFinderProtocol

    Attributes:
        tol: Convergence tolerance on the distance between successive iterates
        maxiter: Maximum number of applications of g
        eager: Iterate in a plain Python loop instead of `jax.lax.while_loop`.
            Needed for states that are not JAX types; the statistics are then
            Python values. Default: False.
    """

    def __init__(self, tol: float = 1e-6, maxiter: int = 50, eager: bool = False):
        if not tol >= 0:
            raise InvalidConfiguration(f"tol must be non-negative, got {tol!r}")
        if isinstance(maxiter, bool) or not isinstance(maxiter, int) or maxiter < 1:
            raise InvalidConfiguration(
                f"maxiter must be a positive integer, got {maxiter!r}"
            )
        self.tol = tol
        self.maxiter = maxiter
        self.eager = eager

    def __call__(
        self,
        g: FixedPointMap,
        y_guess: State,
        space: StateSpaceProtocol = TREE_SPACE,
    ) -> Tuple[State, FixedPointStats]:
        """
        Find a fixed point y = g(y).

        Args:
            g: Fixed-point map
            y_guess: Initial guess (zeroth iterate)
            space: Vector-space operations on states

        Returns:
            y: Last iterate
            stats: Iteration count, final residual norm and convergence flag
        """

        def distance(a, b):
            return space.norm(space.add(a, space.scale(-1.0, b)))

        # The first application happens outside the loop so that the carry
        # has the dtype of g's output rather than that of the guess
        y_k = g(y_guess)
        state0 = (y_k, distance(y_k, y_guess), 1)

        if self.eager:
            return self._iterate(g, state0, distance)

        def body_fun(state):
            y_k, _, k = state
            y_kp1 = g(y_k)
            return (y_kp1, distance(y_kp1, y_k), k + 1)

        # NaN residuals count as not converged
        def cond_fun(state):
            _, r_k, k = state
            return ~(r_k <= self.tol) & (k < self.maxiter)

        y_final, r_final, niters = jax.lax.while_loop(cond_fun, body_fun, state0)

        return y_final, FixedPointStats(niters, r_final, r_final <= self.tol)

    def _iterate(self, g, state0, distance) -> Tuple[State, FixedPointStats]:
        """Same iteration as `__call__`, run as a Python loop."""
        y_k, r_k, k = state0
        while not r_k <= self.tol and k < self.maxiter:
            y_kp1 = g(y_k)
            r_k = distance(y_kp1, y_k)
            y_k = y_kp1
            k += 1

        return y_k, FixedPointStats(k, float(r_k), bool(r_k <= self.tol))
