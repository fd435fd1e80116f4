import jax.numpy as jnp

from ..integrate import IVP, TimeBased


def linear_rhs(t, x: jnp.ndarray, A: jnp.ndarray) -> jnp.ndarray:
    """Linear system: dx/dt = A x."""
    return A @ x


def linear_problem(
    A: jnp.ndarray,
    x0: jnp.ndarray,
    t_span: tuple = (0.0, 1.0),
) -> IVP:
    """
    Linear system dx/dt = A x with x(t_start) = x0.

    Args:
        A: Square system matrix, shape (n, n)
        x0: Initial condition, shape (n,)
        t_span: (t_start, t_end) time interval

    Returns:
        The initial value problem.
    """
    A = jnp.asarray(A)
    x0 = jnp.asarray(x0)
    if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape[1] != x0.shape[0]:
        raise ValueError(
            f"A must be a square matrix matching x0, got A.shape={A.shape} "
            f"and x0.shape={x0.shape}"
        )
    t_start, t_end = t_span
    return IVP(linear_rhs, x0, t_start, TimeBased(t_end), args=(A,))
