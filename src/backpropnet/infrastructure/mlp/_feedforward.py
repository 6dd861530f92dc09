"""
Feed-forward network: an ordered stack of dense layers (the MLP core).

    y = L_n(...L_2(L_1(x)))

Training runs one sample at a time. `train_one` performs the forward pass,
seeds the output layer with (y - t), and folds `backward` over the layers in
reverse order, feeding each layer's input gradient to the layer below. All
parameter updates happen inside the units.

Layer compatibility is not checked up front: a layer whose input dimension
disagrees with the previous layer's output surfaces as a `ShapeMismatchError`
from the first unit that receives the wrong-sized vector.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

import numpy as np

from ...domain._activation import IActivation
from ...domain._errors import ShapeMismatchError
from ...domain._initializer import IParameterInitializer
from ._dense_layer import DenseLayer


class FeedForwardNetwork:
    """
    Ordered, non-empty stack of `DenseLayer`s.

    Parameters
    ----------
    layers : Sequence[DenseLayer]
        Layers in forward order.

    Raises
    ------
    ValueError
        If `layers` is empty.
    """

    def __init__(self, layers: Sequence[DenseLayer]) -> None:
        layers = list(layers)
        if not layers:
            raise ValueError("FeedForwardNetwork requires at least one layer")
        self._layers: List[DenseLayer] = layers

    @classmethod
    def from_sizes(
        cls,
        sizes: Sequence[int],
        activation: Union[str, IActivation],
        initializer: IParameterInitializer,
    ) -> "FeedForwardNetwork":
        """
        Build a network from layer sizes, e.g. (3, 3, 2, 1).

        The first entry is the input dimension; each following entry is the
        unit count of one layer. Layers are built in order, so parameters are
        drawn from `initializer` input-side first.
        """
        sizes = [int(s) for s in sizes]
        if len(sizes) < 2:
            raise ValueError(f"from_sizes needs an input size and at least one layer, got {sizes}")
        if any(s < 1 for s in sizes):
            raise ValueError(f"Layer sizes must be positive, got {sizes}")

        layers = [
            DenseLayer.build(n_in, n_out, activation, initializer)
            for n_in, n_out in zip(sizes[:-1], sizes[1:])
        ]
        return cls(layers)

    @property
    def layers(self) -> tuple[DenseLayer, ...]:
        return tuple(self._layers)

    def get_config(self) -> Dict[str, Any]:
        return {"layers": [layer.get_config() for layer in self._layers]}

    def predict(self, x: Sequence[float]) -> np.ndarray:
        """Run the forward pass and return the final layer's output."""
        out = np.asarray(x, dtype=np.float64)
        for layer in self._layers:
            out = layer.forward(out)
        return out

    def train_one(
        self, x: Sequence[float], target: Sequence[float], learning_rate: float
    ) -> None:
        """
        One forward + backward + update cycle on a single sample.

        Raises
        ------
        ShapeMismatchError
            If `target` does not match the output length.
        """
        y = self.predict(x)
        t = np.asarray(target, dtype=np.float64).reshape(-1)
        if t.shape != y.shape:
            raise ShapeMismatchError(
                "FeedForwardNetwork.train_one", expected=y.shape, actual=t.shape
            )

        grad = y - t
        for layer in reversed(self._layers):
            grad = layer.backward(grad, learning_rate)
