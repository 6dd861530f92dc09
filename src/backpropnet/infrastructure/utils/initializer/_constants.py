"""
Constant parameter initializer.

Registered as ``constant``. Every weight and every bias receives the same
fixed value, which makes hand-checked forward/backward results easy to derive.
"""

from ._base import ParameterInitializer

__all__ = ["ConstantInitializer"]


@ParameterInitializer.register_initializer("constant")
class ConstantInitializer:
    """Weights and biases with fixed values."""

    def __init__(self, weight: float = 0.0, bias: float = 0.0) -> None:
        self._weight = float(weight)
        self._bias = float(bias)

    def next_weight(self) -> float:
        return self._weight

    def next_bias(self) -> float:
        return self._bias
