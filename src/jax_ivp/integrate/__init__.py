"""
Fixed-step time integration of initial value problems written in JAX.
"""

# Problem definition
from .problem import AbstractIVP, IVP
from .stop_conditions import AbstractStopCondition, StopCondition, TimeBased, MaxSteps
from .spaces import StateSpaceProtocol, PyTreeSpace, NativeSpace

# Trajectories and solver interfaces
from .trajectory import Trajectory
from .solve import solve_ivp, solve_with_history

# Time-stepping schemes
from .timesteppers import AbstractStepper, StepperProtocol, ForwardEuler, RK4, BackwardEuler

# Root-finding algorithms
from .rootfinders import RootFinderProtocol, FixedPointIteration, FixedPointStats

# Errors
from .errors import InvalidConfiguration, DidNotConverge, NonConvergenceWarning

__all__ = [
    # Problem definition
    'AbstractIVP',
    'IVP',
    'AbstractStopCondition',
    'StopCondition',
    'TimeBased',
    'MaxSteps',
    'StateSpaceProtocol',
    'PyTreeSpace',
    'NativeSpace',

    # Solver interfaces
    'Trajectory',
    'solve_ivp',
    'solve_with_history',

    # Time-stepping methods
    'AbstractStepper',
    'StepperProtocol',
    'ForwardEuler',
    'RK4',
    'BackwardEuler',

    # Root-finding algorithms
    'RootFinderProtocol',
    'FixedPointIteration',
    'FixedPointStats',

    # Errors
    'InvalidConfiguration',
    'DidNotConverge',
    'NonConvergenceWarning',
]
