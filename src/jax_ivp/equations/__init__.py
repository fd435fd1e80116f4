"""
Built-in ODEs

Pre-implemented right-hand sides and problem factories for common test
problems: exponential growth, linear systems and the Van der Pol oscillator.

All right-hand sides follow the standard interface:
- fun(t, y, *args) -> dydt
"""

from .exponential import exponential_rhs, exponential_problem
from .linear import linear_rhs, linear_problem
from .vanderpol import van_der_pol_rhs, van_der_pol_problem

__all__ = [
    "exponential_rhs",
    "exponential_problem",
    "linear_rhs",
    "linear_problem",
    "van_der_pol_rhs",
    "van_der_pol_problem",
]
