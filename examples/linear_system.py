import jax.numpy as jnp

from jax_ivp.equations import linear_problem
from jax_ivp.integrate import BackwardEuler, solve_ivp


def main(dt=0.01, tol=0.01):
    """
    Solve dx/dt = A x with A = diag(1, 2, 0, 1, 2, -1) and x(0) = (1, ..., 1)
    on [0, 1] with backward Euler, and print the final trajectory point
    next to the exact solution.

    Arguments:
        dt - Time step size (default 0.01)
        tol - Fixed-point tolerance (default 0.01)
    """
    eigvals = jnp.array([1.0, 2.0, 0.0, 1.0, 2.0, -1.0])
    A = jnp.diag(eigvals)
    x0 = jnp.ones(6)

    problem = linear_problem(A, x0, t_span=(0.0, 1.0))
    method = BackwardEuler(dt, tolerance=tol)

    t, x = solve_ivp(problem, method)

    print(f"t = {t:.3f}")
    print(f"x = {x}")
    print(f"exact = {x0 * jnp.exp(eigvals * t)}")


if __name__ == "__main__":
    main()
