"""
Dense layer: an ordered collection of units sharing one input vector.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

import numpy as np

from ...domain._activation import IActivation
from ...domain._errors import ShapeMismatchError
from ...domain._initializer import IParameterInitializer
from .._activations import get_activation
from ._unit import Unit


class DenseLayer:
    """
    Fully-connected layer built from independent `Unit`s.

    Every unit sees the same input vector; the layer output is the unit
    outputs concatenated in order.

    Backward
    --------
    `incoming[j]` is dL/dy_j for unit j: (y_j - t_j) for the output layer, the
    summed next-layer gradient for a hidden layer. The layer multiplies it by
    the unit's sigma'(z_j), lets the unit update itself, and sums the returned
    per-input vectors, since each input dimension feeds every unit.

    Raises
    ------
    ValueError
        If `units` is empty or the units disagree on their input dimension.
    """

    def __init__(self, units: Sequence[Unit]) -> None:
        units = list(units)
        if not units:
            raise ValueError("DenseLayer requires at least one unit")
        for u in units:
            if not isinstance(u, Unit):
                raise TypeError(f"DenseLayer expects Unit instances, got: {type(u)}")
        in_dims = {u.in_features for u in units}
        if len(in_dims) != 1:
            raise ValueError(
                f"All units in a DenseLayer must share one input dimension, got {sorted(in_dims)}"
            )
        self._units: List[Unit] = units

    @classmethod
    def build(
        cls,
        in_features: int,
        out_features: int,
        activation: Union[str, IActivation],
        initializer: IParameterInitializer,
    ) -> "DenseLayer":
        """
        Build a layer of `out_features` units over `in_features` inputs.

        Each unit draws its `in_features` weights and then its bias from
        `initializer`, unit by unit.
        """
        if in_features < 1 or out_features < 1:
            raise ValueError(
                f"DenseLayer sizes must be positive, got {in_features} -> {out_features}"
            )
        act = get_activation(activation)
        units = []
        for _ in range(out_features):
            weights = [initializer.next_weight() for _ in range(in_features)]
            units.append(Unit(weights, initializer.next_bias(), act))
        return cls(units)

    @property
    def units(self) -> tuple[Unit, ...]:
        return tuple(self._units)

    @property
    def in_features(self) -> int:
        return self._units[0].in_features

    @property
    def out_features(self) -> int:
        return len(self._units)

    def get_config(self) -> Dict[str, Any]:
        return {
            "in_features": self.in_features,
            "out_features": self.out_features,
            "units": [u.get_config() for u in self._units],
        }

    def forward(self, x: Sequence[float]) -> np.ndarray:
        """Apply every unit to `x` and return their outputs in order."""
        return np.array([u.forward(x) for u in self._units], dtype=np.float64)

    def backward(self, incoming: Sequence[float], learning_rate: float) -> np.ndarray:
        """
        Backpropagate through every unit and return dL/dx.

        Raises
        ------
        ShapeMismatchError
            If `len(incoming)` differs from the number of units.
        """
        incoming = np.asarray(incoming, dtype=np.float64).reshape(-1)
        if incoming.size != len(self._units):
            raise ShapeMismatchError(
                "DenseLayer.backward", expected=len(self._units), actual=incoming.size
            )

        outgoing = np.zeros(self.in_features, dtype=np.float64)
        for g, unit in zip(incoming, self._units):
            delta = float(g) * unit.activation_derivative()
            outgoing += unit.backward(delta, learning_rate)
        return outgoing
