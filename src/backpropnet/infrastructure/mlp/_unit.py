"""
Single fully-connected unit (MLP neuron).

A unit owns a weight vector `w`, a bias `b` and an activation `sigma`:

    z = sum_i w_i * x_i + b
    y = sigma(z)

Backward contract
-----------------
The unit does NOT apply sigma'(z) itself. The owning `DenseLayer` reads
`activation_derivative()` and hands `backward` the final delta for this unit's
pre-activation. `backward` then

- returns delta_prev_i = delta * w_i using the weights *before* the update,
- applies w_i <- w_i - lr * delta * x_i and b <- b - lr * delta.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence, Union

import numpy as np

from ...domain._activation import IActivation
from ...domain._errors import ShapeMismatchError
from ...domain.model._forward_cache_mixin import ForwardCacheMixin
from .._activations import activation_name, get_activation


class Unit(ForwardCacheMixin):
    """
    Weighted sum followed by an activation, with manual backpropagation.

    Parameters
    ----------
    weights : Sequence[float]
        Initial weight vector; its length fixes the input dimension.
    bias : float
        Initial bias.
    activation : str or IActivation, default="sigmoid"
        Activation applied to the pre-activation value.

    Raises
    ------
    ValueError
        If `weights` is empty or not one-dimensional.
    """

    def __init__(
        self,
        weights: Sequence[float],
        bias: float = 0.0,
        activation: Union[str, IActivation] = "sigmoid",
    ) -> None:
        w = np.array(weights, dtype=np.float64)
        if w.ndim != 1 or w.size == 0:
            raise ValueError(
                f"Unit requires a non-empty 1-D weight vector, got shape {w.shape}"
            )
        self._weights = w
        self._bias = float(bias)
        self.activation = get_activation(activation)

    @property
    def in_features(self) -> int:
        return int(self._weights.size)

    @property
    def weights(self) -> np.ndarray:
        """Copy of the current weight vector."""
        return self._weights.copy()

    @property
    def bias(self) -> float:
        return self._bias

    def get_config(self) -> Dict[str, Any]:
        return {
            "in_features": self.in_features,
            "activation": activation_name(self.activation),
        }

    def forward(self, x: Sequence[float]) -> float:
        """
        Compute y = sigma(w . x + b) and cache (x, z, y).

        Raises
        ------
        ShapeMismatchError
            If `x` is not a vector of length `in_features`.
        """
        x = np.array(x, dtype=np.float64)
        if x.shape != self._weights.shape:
            raise ShapeMismatchError(
                "Unit.forward", expected=self._weights.shape, actual=x.shape
            )

        z = float(np.dot(self._weights, x)) + self._bias
        y = float(self.activation.value(z))
        self._store_cache((x, z, y))
        return y

    def activation_derivative(self) -> float:
        """
        Return sigma'(z) for the cached pre-activation.

        Raises
        ------
        BackwardBeforeForwardError
            If no forward pass is cached.
        """
        _, z, _ = self._require_cache()
        return float(self.activation.derivative(z))

    def backward(self, delta: float, learning_rate: float) -> np.ndarray:
        """
        Propagate `delta` to the inputs and apply one gradient-descent step.

        Parameters
        ----------
        delta : float
            dL/dz for this unit, activation derivative already applied.
        learning_rate : float
            Step size eta.

        Returns
        -------
        np.ndarray
            delta * w_old, one entry per input dimension.
        """
        x, _, _ = self._consume_cache()
        delta = float(delta)

        propagated = delta * self._weights
        self._weights -= learning_rate * delta * x
        self._bias -= learning_rate * delta
        return propagated
