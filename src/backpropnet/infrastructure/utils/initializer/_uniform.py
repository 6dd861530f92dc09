"""
Seeded uniform parameter initializer.

Registered as ``uniform``: weights are drawn from U[-0.5, 0.5) using a NumPy
`Generator` seeded at construction, biases start at 0.0. The fixed seed makes
model construction reproducible: two models built from initializers with the
same seed receive identical parameters.
"""

import numpy as np

from ._base import ParameterInitializer

__all__ = ["UniformInitializer"]


@ParameterInitializer.register_initializer("uniform")
class UniformInitializer:
    """
    Weights ~ U[low, high), biases constant.

    Parameters
    ----------
    seed : int, default=0
        Seed of the underlying `numpy.random.Generator`.
    low, high : float, default=(-0.5, 0.5)
        Half-open weight range.
    bias : float, default=0.0
        Value returned by every `next_bias` call.
    """

    def __init__(
        self, seed: int = 0, low: float = -0.5, high: float = 0.5, bias: float = 0.0
    ) -> None:
        if not high > low:
            raise ValueError(f"uniform initializer requires high > low, got [{low}, {high})")
        self._rng = np.random.default_rng(seed)
        self._low = float(low)
        self._high = float(high)
        self._bias = float(bias)

    def next_weight(self) -> float:
        return float(self._rng.uniform(self._low, self._high))

    def next_bias(self) -> float:
        return self._bias
