from ..integrate import IVP, TimeBased


def exponential_rhs(t, y, rate=1.0):
    """Exponential growth: dy/dt = rate * y. Solution: y0 exp(rate (t - t0))."""
    return rate * y


def exponential_problem(
    rate: float = 1.0,
    y0: float = 1.0,
    t_span: tuple = (0.0, 1.0),
) -> IVP:
    """Scalar exponential growth problem, y(t_end) = y0 exp(rate (t_end - t_start))."""
    t_start, t_end = t_span
    return IVP(exponential_rhs, y0, t_start, TimeBased(t_end), args=(rate,))
