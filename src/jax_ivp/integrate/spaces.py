"""
State spaces.

A state space supplies the vector-space operations the time steppers need:
addition of two states, scaling of a state by a field element, and a norm.
"""

import operator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import jax
import jax.numpy as jnp

from .custom_types import Scalar, State


@runtime_checkable
class StateSpaceProtocol(Protocol):
    """
    Protocol for state spaces.

    Any object implementing these three methods can be attached to a problem
    and will be used by every stepper to combine states.
    """

    def add(self, x: State, y: State) -> State:
        """Return x + y."""
        ...

    def scale(self, a: Scalar, x: State) -> State:
        """Return a * x."""
        ...

    def norm(self, x: State) -> Scalar:
        """Return the norm of x."""
        ...


@dataclass(frozen=True)
class PyTreeSpace:
    """
    Vector space of JAX pytrees.

    Operations are applied leaf-wise, so a state may be a scalar, an array,
    or any nested container of them (tuples, dicts, registered pytree
    classes). The norm is the Euclidean norm over all leaves.
    """

    def add(self, x: State, y: State) -> State:
        return jax.tree.map(operator.add, x, y)

    def scale(self, a: Scalar, x: State) -> State:
        return jax.tree.map(lambda leaf: a * leaf, x)

    def norm(self, x: State) -> Scalar:
        squares = [jnp.sum(jnp.abs(leaf) ** 2) for leaf in jax.tree.leaves(x)]
        return jnp.sqrt(sum(squares))


@dataclass(frozen=True)
class NativeSpace:
    """
    Vector space backed by the state's own operators.

    States must implement ``+`` and scalar ``*``. The norm is taken from a
    ``norm()`` method when the state has one, and from ``abs`` otherwise.
    """

    def add(self, x: State, y: State) -> State:
        return x + y

    def scale(self, a: Scalar, x: State) -> State:
        return a * x

    def norm(self, x: State) -> Scalar:
        norm = getattr(x, "norm", None)
        return norm() if callable(norm) else abs(x)


TREE_SPACE = PyTreeSpace()
