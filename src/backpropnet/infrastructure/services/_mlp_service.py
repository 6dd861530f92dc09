"""
MLP model service: a fully-connected 3 -> 3 -> 2 -> 1 sigmoid network.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from ...domain._activation import IActivation
from ...domain._initializer import IParameterInitializer
from ...domain._loss import ILoss
from .._losses import HalfSquaredError
from ..mlp._feedforward import FeedForwardNetwork
from ..utils.initializer import resolve_initializer

DEFAULT_LAYER_SIZES = (3, 3, 2, 1)


class MlpService:
    """
    Predictor/trainer wrapping a `FeedForwardNetwork`.

    Parameters
    ----------
    layer_sizes : Sequence[int], default=(3, 3, 2, 1)
        Input dimension followed by the unit count of every layer.
    activation : str or IActivation, default="sigmoid"
        Activation shared by every unit.
    initializer : IParameterInitializer or str, optional
        Defaults to the seeded ``uniform`` initializer (weights in
        [-0.5, 0.5), biases 0).
    loss : ILoss, optional
        Defaults to `HalfSquaredError`.
    seed : int, default=0
    """

    name = "MLP (Fully-Connected FeedForward)"

    def __init__(
        self,
        layer_sizes: Sequence[int] = DEFAULT_LAYER_SIZES,
        activation: Union[str, IActivation] = "sigmoid",
        initializer: Optional[Union[str, IParameterInitializer]] = None,
        loss: Optional[ILoss] = None,
        seed: int = 0,
    ) -> None:
        init = resolve_initializer(initializer, seed=seed)
        self.layer_sizes = tuple(int(s) for s in layer_sizes)
        self.network = FeedForwardNetwork.from_sizes(self.layer_sizes, activation, init)
        self._loss = loss if loss is not None else HalfSquaredError()

    def get_config(self) -> Dict[str, Any]:
        return {"layer_sizes": list(self.layer_sizes), **self.network.get_config()}

    def predict(self, inputs: Sequence[float]) -> List[float]:
        return [float(v) for v in self.network.predict(inputs)]

    def train(
        self, inputs: Sequence[float], target: Sequence[float], learning_rate: float
    ) -> None:
        self.network.train_one(inputs, target, learning_rate)

    def loss(self, output: Sequence[float], target: Sequence[float]) -> float:
        return self._loss.loss(output, target)
