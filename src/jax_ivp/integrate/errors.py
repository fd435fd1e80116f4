"""Exceptions and warnings raised by the time-stepping engine."""


class InvalidConfiguration(ValueError):
    """A stepper, root finder, problem or stop condition was built with invalid settings."""


class DidNotConverge(RuntimeError):
    """
    Fixed-point iteration of an implicit step exhausted its iteration budget.

    Raised only by steppers configured with ``on_nonconvergence="raise"``.
    Points yielded before the failing step remain valid, and the trajectory
    is left at the last accepted point.

    Attributes:
        time: Time of the step that failed to converge.
        iterations: Number of fixed-point iterations performed.
        residual_norm: Norm of the difference between the last two iterates.
        tolerance: Tolerance the residual had to reach.
    """

    def __init__(self, time, iterations: int, residual_norm: float, tolerance):
        self.time = time
        self.iterations = iterations
        self.residual_norm = residual_norm
        self.tolerance = tolerance
        super().__init__(
            f"Fixed-point iteration did not converge at t={time} "
            f"within {iterations} iterations. "
            f"Final residual norm: {residual_norm:.2e} (tol={tolerance})."
        )


class NonConvergenceWarning(RuntimeWarning):
    """Issued by steppers configured with ``on_nonconvergence="warn"``."""
