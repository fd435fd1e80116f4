"""Policies deciding when a trajectory is complete."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .custom_types import Scalar, State
from .errors import InvalidConfiguration


@dataclass(frozen=True)
class AbstractStopCondition(ABC):
    """
    Base class for stop conditions.

    Steppers compute each candidate point first and ask the stop condition
    whether it belongs to the trajectory. The first rejected candidate is
    dropped and ends the trajectory.
    """

    @abstractmethod
    def admits(self, t: Scalar, y: State, n: int) -> bool:
        """
        Decide whether a candidate point is part of the trajectory.

        Args:
            t: Time of the candidate point.
            y: State of the candidate point.
            n: Index of the step producing it (the first step is 1).

        Returns:
            True if the point should be yielded.
        """
        ...


@dataclass(frozen=True)
class TimeBased(AbstractStopCondition):
    """Stop once the candidate time exceeds `end_time`."""

    end_time: Scalar

    def admits(self, t: Scalar, y: State, n: int) -> bool:
        return bool(t <= self.end_time)


@dataclass(frozen=True)
class MaxSteps(AbstractStopCondition):
    """Stop after `max_steps` points have been produced."""

    max_steps: int

    def __post_init__(self):
        if (
            isinstance(self.max_steps, bool)
            or not isinstance(self.max_steps, int)
            or self.max_steps < 0
        ):
            raise InvalidConfiguration(
                f"max_steps must be a non-negative integer, got {self.max_steps!r}"
            )

    def admits(self, t: Scalar, y: State, n: int) -> bool:
        return n <= self.max_steps


type StopCondition = TimeBased | MaxSteps
