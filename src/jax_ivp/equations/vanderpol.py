import jax.numpy as jnp

from ..integrate import IVP, TimeBased


def van_der_pol_rhs(t, s: jnp.ndarray, mu: float) -> jnp.ndarray:
    """
    Van der Pol oscillator: d²x/dt² - mu (1 - x²) dx/dt + x = 0

    Written as a first-order system with v = dx/dt:
        dx/dt = v
        dv/dt = mu (1 - x²) v - x

    Args:
        t: Current time (unused, the system is autonomous)
        s: State (x, v)
        mu: Damping parameter

    Returns:
        Time derivative (dx/dt, dv/dt)
    """
    x, v = s[0], s[1]
    return jnp.stack([v, mu * (1.0 - x * x) * v - x])


def van_der_pol_problem(
    mu: float = 1.0,
    s0=(1.0, 1.0),
    t_span: tuple = (0.0, 1.0),
) -> IVP:
    """Van der Pol oscillator started from s0 = (x0, v0)."""
    t_start, t_end = t_span
    return IVP(
        van_der_pol_rhs, jnp.asarray(s0), t_start, TimeBased(t_end),
        args=(mu,),
    )
