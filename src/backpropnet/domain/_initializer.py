"""
Parameter initializer interface definitions.

Networks in backpropnet draw their weights and biases one scalar at a time, in
construction order, from an initializer. Keeping this contract in the domain
layer lets every component stay agnostic of how values are produced (seeded
random, constant, ...).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IParameterInitializer(Protocol):
    """
    Supplier of initial scalar parameters.

    Notes
    -----
    - Each call returns the next value of the underlying sequence, so the
      order in which components are constructed determines which values they
      receive.
    """

    def next_weight(self) -> float:
        """Return the next initial weight."""
        ...

    def next_bias(self) -> float:
        """Return the next initial bias."""
        ...
