import itertools
import time
from typing import Optional, Tuple

import jax
from jax import Array
import jax.numpy as jnp

from .custom_types import TrajectoryPoint
from .problem import AbstractIVP
from .timesteppers import AbstractStepper


def solve_ivp(problem: AbstractIVP, stepper: AbstractStepper) -> TrajectoryPoint:
    """
    Integrate an initial value problem and return its last trajectory point.

    Args:
        problem: Initial value problem
        stepper: Time-stepping method instance (e.g., ForwardEuler(0.01))

    Returns:
        t_final: Time of the last point
        y_final: Solution at t_final

    If the stop condition rejects the very first step, the initial point
    (t0, y0) is returned.

    Example usage:
    ```python
    from jax_ivp.integrate import IVP, TimeBased, BackwardEuler, solve_ivp

    # Define ODE: dy/dt = y
    problem = IVP(lambda t, y: y, 1.0, 0.0, TimeBased(1.0))

    t, y = solve_ivp(problem, BackwardEuler(0.01, tolerance=1e-8))
    ```
    """
    t = problem.get_initial_time()
    y = problem.get_initial_state()
    for t, y in stepper.get_iterator(problem):
        pass
    return t, y


def solve_with_history(
    problem: AbstractIVP,
    stepper: AbstractStepper,
    max_points: Optional[int] = None,
    include_initial: bool = True,
    verbose: bool = False,
) -> Tuple[Array, Array]:
    """
    Integrate an initial value problem and store every trajectory point.

    States must be arrays or pytrees of arrays; they are stacked along a
    new leading axis.

    Args:
        problem: Initial value problem
        stepper: Time-stepping method instance
        max_points: Stop after this many steps even if the stop condition
            still admits more. If None, integrate until the stop condition ends
            the trajectory.
        include_initial: Prepend the initial point (t0, y0).
        verbose: Print progress information

    Returns:
        t: Array of time points, shape (n_points,)
        y: Array of solution values at times t, shape (n_points, *y0.shape)

    Example usage:
    ```python
    import jax.numpy as jnp
    from jax_ivp.integrate import IVP, TimeBased, RK4, solve_with_history

    # Define ODE: dy/dt = -k*y
    def fun(t, y, k):
        return -k * y

    problem = IVP(fun, jnp.array([1.0]), 0.0, TimeBased(2.0), args=(0.5,))

    t, y = solve_with_history(problem, RK4(0.01))
    ```
    """
    if max_points is not None and max_points < 0:
        raise ValueError(f"max_points must be non-negative, got {max_points}")

    t_start = problem.get_initial_time()

    if verbose:
        method_name = type(stepper).__name__
        print(f"Solving with {method_name}")
        print(f"Start time: {t_start}, dt={stepper.stepsize}")
        print(f"Stop condition: {problem.get_stop_condition()}")

    if include_initial:
        t_save = [t_start]
        y_save = [problem.get_initial_state()]
    else:
        t_save = []
        y_save = []

    start_wallclock = time.time()

    trajectory = stepper.get_iterator(problem)
    for t, y in itertools.islice(trajectory, max_points):
        t_save.append(t)
        y_save.append(y)

    elapsed_wallclock = time.time() - start_wallclock

    if verbose:
        n_steps = trajectory.steps
        print(
            f"Completed {n_steps} steps in {elapsed_wallclock:.3f}s "
            f"({n_steps / max(elapsed_wallclock, 1e-12):.1f} steps/s)"
        )

    if not t_save:
        raise ValueError("The trajectory produced no points to store")

    t_arr = jnp.asarray(t_save)
    y_arr = jax.tree.map(lambda *leaves: jnp.stack(leaves), *y_save)

    return t_arr, y_arr
