"""Type aliases to improve type hint readability."""

from typing import Any, Callable

type Scalar = Any
type State = Any
type Derivative = Callable[[Scalar, State], State]
type FixedPointMap = Callable[[State], State]
type TrajectoryPoint = tuple[Scalar, State]
