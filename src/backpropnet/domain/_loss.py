"""
Loss function interface definitions.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class ILoss(Protocol):
    """
    Domain-level loss interface.

    A loss maps an output vector and a target vector of equal length to a
    non-negative scalar, and exposes the gradient of that scalar with respect
    to the outputs so networks can seed their backward pass.
    """

    def loss(self, output: Sequence[float], target: Sequence[float]) -> float:
        """
        Compute the scalar loss for one sample.
        """
        ...

    def gradient(self, output: Sequence[float], target: Sequence[float]) -> np.ndarray:
        """
        Compute dL/dy for one sample.
        """
        ...
