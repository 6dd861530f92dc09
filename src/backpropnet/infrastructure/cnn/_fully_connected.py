"""
Fully-connected output head for the CNN pipeline.

Maps a flattened feature vector x (length N) to one scalar:

    z = sum_i w_i * x_i + b,   y = sigma(z)

Unlike the MLP `Unit`, the head applies sigma'(z) itself: `backward` receives
dL/dy and computes delta = dL/dy * sigma'(z) before propagating and updating.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence, Union

import numpy as np

from ...domain._activation import IActivation
from ...domain._errors import ShapeMismatchError
from ...domain._initializer import IParameterInitializer
from ...domain.model._forward_cache_mixin import ForwardCacheMixin
from .._activations import activation_name, get_activation


class FullyConnectedHead(ForwardCacheMixin):
    """
    Dense vector-to-scalar stage with manual backprop.

    Parameters
    ----------
    in_features : int
        Flattened input size N (> 0).
    initializer : IParameterInitializer
        Supplies N weights and then the bias.
    activation : str or IActivation, default="sigmoid"
    """

    def __init__(
        self,
        in_features: int,
        initializer: IParameterInitializer,
        activation: Union[str, IActivation] = "sigmoid",
    ) -> None:
        in_features = int(in_features)
        if in_features <= 0:
            raise ValueError(f"in_features must be positive, got {in_features}")
        self.activation = get_activation(activation)
        self._weights = np.array(
            [initializer.next_weight() for _ in range(in_features)], dtype=np.float64
        )
        self._bias = float(initializer.next_bias())

    @property
    def in_features(self) -> int:
        return int(self._weights.size)

    @property
    def weights(self) -> np.ndarray:
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
        x = np.array(x, dtype=np.float64)
        if x.shape != self._weights.shape:
            raise ShapeMismatchError(
                "FullyConnectedHead.forward", expected=self._weights.shape, actual=x.shape
            )
        z = float(np.dot(self._weights, x)) + self._bias
        self._store_cache((x, z))
        return float(self.activation.value(z))

    def backward(self, grad_y: float, learning_rate: float) -> np.ndarray:
        """
        Apply sigma'(z), update w and b, and return dL/dx (pre-update weights).
        """
        x, z = self._consume_cache()
        delta = float(grad_y) * float(self.activation.derivative(z))

        grad_x = delta * self._weights
        self._weights -= learning_rate * delta * x
        self._bias -= learning_rate * delta
        return grad_x
