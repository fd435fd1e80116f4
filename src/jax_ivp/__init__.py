"""
JAX IVP

Fixed-step time integration of initial value problems in JAX.

Main components:
- integrate: problem definition, time-stepping schemes and trajectories
- equations: built-in test problems
"""

from .integrate import (
    IVP,
    TimeBased,
    MaxSteps,
    ForwardEuler,
    RK4,
    BackwardEuler,
    solve_ivp,
    solve_with_history,
)

__all__ = [
    # Problem definition
    "IVP",
    "TimeBased",
    "MaxSteps",

    # ODE integration methods
    "ForwardEuler",
    "RK4",
    "BackwardEuler",
    "solve_ivp",
    "solve_with_history",
]
