"""Initial value problems."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Tuple

from .custom_types import Scalar, State
from .errors import InvalidConfiguration
from .spaces import TREE_SPACE, PyTreeSpace, StateSpaceProtocol
from .stop_conditions import AbstractStopCondition, TimeBased


class AbstractIVP(ABC):
    """
    Contract of an initial value problem dy/dt = f(t, y), y(t0) = y0.

    Steppers only read from a problem, so one problem may drive any number
    of independent trajectories.
    """

    @abstractmethod
    def get_initial_state(self) -> State:
        """Starting state y0. Must return the same value on every call."""
        ...

    @abstractmethod
    def get_initial_time(self) -> Scalar:
        """Starting time t0."""
        ...

    @abstractmethod
    def derive(self, t: Scalar, y: State) -> State:
        """
        Evaluate the right-hand side f(t, y).

        Must be a pure function of its arguments: implicit steppers evaluate
        it many times per step and rely on consistent results.
        """
        ...

    @abstractmethod
    def get_stop_condition(self) -> AbstractStopCondition:
        """Policy deciding when the trajectory is complete."""
        ...

    def get_space(self) -> StateSpaceProtocol:
        """Vector-space operations used to combine states."""
        return TREE_SPACE


@dataclass(frozen=True, eq=False)
class IVP(AbstractIVP):
    """
    Initial value problem defined by a right-hand side function.

    Attributes:
        fun: Right-hand side of dy/dt = fun(t, y, *args).
        y0: Initial state.
        t0: Initial time.
        stop_condition: When to end the trajectory.
        space: Vector-space operations on states. Default: PyTreeSpace.
        args: Additional arguments to pass to fun.

    Example usage:
    ```python
    from jax_ivp.integrate import IVP, TimeBased, ForwardEuler

    # dy/dt = -k*y on [0, 2]
    problem = IVP(lambda t, y, k: -k * y, 1.0, 0.0, TimeBased(2.0), args=(0.5,))

    for t, y in ForwardEuler(0.01).get_iterator(problem):
        ...
    ```
    """

    fun: Callable
    y0: State
    t0: Scalar
    stop_condition: AbstractStopCondition
    space: StateSpaceProtocol = field(default_factory=PyTreeSpace)
    args: tuple = ()

    def __post_init__(self):
        if not callable(self.fun):
            raise TypeError(f"fun must be callable, got {type(self.fun).__name__}")
        if not isinstance(self.stop_condition, AbstractStopCondition):
            raise InvalidConfiguration(
                "stop_condition must be an AbstractStopCondition instance, "
                f"got {type(self.stop_condition).__name__}"
            )
        if not isinstance(self.space, StateSpaceProtocol):
            raise InvalidConfiguration(
                f"space must implement add, scale and norm, got {type(self.space).__name__}"
            )

    @classmethod
    def from_span(
        cls,
        fun: Callable,
        t_span: Tuple[Scalar, Scalar],
        y0: State,
        **kwargs,
    ) -> "IVP":
        """Build a problem integrated over the interval t_span = (t_start, t_end)."""
        t_start, t_end = t_span
        return cls(fun, y0, t_start, TimeBased(t_end), **kwargs)

    def get_initial_state(self) -> State:
        return self.y0

    def get_initial_time(self) -> Scalar:
        return self.t0

    def derive(self, t: Scalar, y: State) -> State:
        return self.fun(t, y, *self.args)

    def get_stop_condition(self) -> AbstractStopCondition:
        return self.stop_condition

    def get_space(self) -> StateSpaceProtocol:
        return self.space
