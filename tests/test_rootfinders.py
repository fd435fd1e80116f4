"""Unit tests for the fixed-point solver."""

import pytest
import jax.numpy as jnp

from jax_ivp.integrate import (
    FixedPointIteration,
    RootFinderProtocol,
    InvalidConfiguration,
)


@pytest.fixture
def contraction():
    """
    Fixed-point map g(y) = cos(y)

    A contraction near its unique fixed point y* = 0.7390851...
    """
    g = lambda y: jnp.cos(y)
    y0 = jnp.ones((4,))
    soln = jnp.full_like(y0, 0.7390851332)
    return g, y0, soln


class TestFixedPointIteration:

    def test_converges(self, contraction):
        g, y0, expected = contraction
        solver = FixedPointIteration(tol=1e-6, maxiter=100)
        soln, stats = solver(g, y0)

        assert jnp.allclose(soln, expected, atol=1e-5)
        assert bool(stats.converged)
        assert float(stats.residual_norm) <= 1e-6
        assert int(stats.iterations) < 100

    def test_exits_early(self):
        """A constant map reaches its fixed point after two applications."""
        solver = FixedPointIteration(tol=0.0, maxiter=50)
        soln, stats = solver(lambda y: jnp.full_like(y, 2.0), jnp.zeros(3))

        assert jnp.array_equal(soln, jnp.full(3, 2.0))
        assert int(stats.iterations) == 2
        assert bool(stats.converged)

    def test_divergence_exhausts_budget(self):
        """g(y) = 1 - 3y is not a contraction; iterates grow without bound."""
        solver = FixedPointIteration(tol=1e-6, maxiter=15)
        soln, stats = solver(lambda y: 1.0 - 3.0 * y, jnp.array(0.0))

        assert int(stats.iterations) == 15
        assert not bool(stats.converged)
        assert abs(float(soln)) > 1e6

    def test_nan_residual_is_not_converged(self):
        solver = FixedPointIteration(tol=1e-6, maxiter=5)
        _, stats = solver(lambda y: y * jnp.nan, jnp.array(1.0))

        assert int(stats.iterations) == 5
        assert not bool(stats.converged)

    def test_single_iteration(self, contraction):
        g, y0, _ = contraction
        soln, stats = FixedPointIteration(tol=1e-6, maxiter=1)(g, y0)

        assert jnp.allclose(soln, jnp.cos(y0))
        assert int(stats.iterations) == 1

    def test_pytree_state(self):
        g = lambda s: (jnp.cos(s[0]), 0.5 * s[1] + 1.0)
        soln, stats = FixedPointIteration(tol=1e-6, maxiter=100)(g, (1.0, 0.0))

        assert float(soln[0]) == pytest.approx(0.7390851, abs=1e-5)
        assert float(soln[1]) == pytest.approx(2.0, abs=1e-5)
        assert bool(stats.converged)

    def test_implements_protocol(self):
        assert isinstance(FixedPointIteration(), RootFinderProtocol)

    @pytest.mark.parametrize("tol", [-1e-3, float("nan")])
    def test_invalid_tolerance(self, tol):
        with pytest.raises(InvalidConfiguration):
            FixedPointIteration(tol=tol)

    @pytest.mark.parametrize("maxiter", [0, -1, 1.5, True])
    def test_invalid_maxiter(self, maxiter):
        with pytest.raises(InvalidConfiguration):
            FixedPointIteration(maxiter=maxiter)


class TestEagerFixedPointIteration:
    """The Python-loop iteration matches the compiled one."""

    def test_matches_compiled(self, contraction):
        g, y0, _ = contraction
        compiled, compiled_stats = FixedPointIteration(tol=1e-6, maxiter=100)(g, y0)
        eager, eager_stats = FixedPointIteration(tol=1e-6, maxiter=100, eager=True)(g, y0)

        assert jnp.allclose(eager, compiled, atol=1e-6)
        assert abs(eager_stats.iterations - int(compiled_stats.iterations)) <= 1
        assert eager_stats.converged is True

    def test_python_floats(self):
        soln, stats = FixedPointIteration(tol=1e-12, maxiter=100, eager=True)(
            lambda y: 0.5 * y + 1.0, 0.0
        )

        assert soln == pytest.approx(2.0, abs=1e-11)
        assert isinstance(stats.iterations, int)
        assert isinstance(stats.residual_norm, float)

    def test_divergence_exhausts_budget(self):
        solver = FixedPointIteration(tol=1e-6, maxiter=15, eager=True)
        soln, stats = solver(lambda y: 1.0 - 3.0 * y, 0.0)

        assert stats.iterations == 15
        assert stats.converged is False
        assert abs(soln) > 1e6

    def test_nan_residual_is_not_converged(self):
        solver = FixedPointIteration(tol=1e-6, maxiter=5, eager=True)
        _, stats = solver(lambda y: y * float("nan"), 1.0)

        assert stats.iterations == 5
        assert stats.converged is False
