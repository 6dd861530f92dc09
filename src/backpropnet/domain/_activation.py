"""
Activation function interface definitions.

An activation is a stateless pair of pure scalar functions: the value
`y = f(z)` and its derivative `dy/dz`. Implementations must accept both Python
scalars and NumPy arrays, applying the function elementwise to the latter, so
that the same object serves a single MLP unit and a whole convolution map.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IActivation(Protocol):
    """
    Domain-level activation interface.

    Notes
    -----
    - Both methods are pure and defined for every real input.
    - For scalar input a Python `float` is returned; for array input an array
      of the same shape is returned.
    """

    def value(self, z):
        """
        Evaluate the activation at the pre-activation value(s) `z`.
        """
        ...

    def derivative(self, z):
        """
        Evaluate the derivative of the activation at `z`.
        """
        ...
