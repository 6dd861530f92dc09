"""
Loss functions for backpropnet.

Currently implemented losses:
- HalfSquaredError : L = 0.5 * sum_k (y_k - t_k)^2

Design notes
------------
- The half factor makes dL/dy_k = (y_k - t_k) exactly, so networks can seed
  their backward pass with the plain output error and no scale constant.
- Losses are stateless strategy objects shared by reference.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ..domain._errors import ShapeMismatchError
from ..domain.model._stateless_mixin import StatelessConfigMixin


def _as_pair(
    op: str, output: Sequence[float], target: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert output/target to 1-D float64 arrays of equal length.

    Raises
    ------
    ShapeMismatchError
        If the lengths differ.
    """
    y = np.asarray(output, dtype=np.float64).reshape(-1)
    t = np.asarray(target, dtype=np.float64).reshape(-1)
    if y.shape != t.shape:
        raise ShapeMismatchError(op, expected=y.shape, actual=t.shape)
    return y, t


class HalfSquaredError(StatelessConfigMixin):
    """
    Half sum of squared errors.

    Computes the scalar loss:

        L(y, t) = 0.5 * sum_k (y_k - t_k)^2

    Notes
    -----
    - The loss is non-negative and zero exactly when y == t.
    - No broadcasting is performed; lengths must match.
    """

    def loss(self, output: Sequence[float], target: Sequence[float]) -> float:
        """
        Compute the loss for one sample.

        Parameters
        ----------
        output : Sequence[float]
            Network outputs y.
        target : Sequence[float]
            Targets t, same length as `output`.

        Returns
        -------
        float
            The scalar loss.

        Raises
        ------
        ShapeMismatchError
            If `len(output) != len(target)`.
        """
        y, t = _as_pair("HalfSquaredError.loss", output, target)
        diff = y - t
        return float(0.5 * np.sum(diff * diff))

    def gradient(self, output: Sequence[float], target: Sequence[float]) -> np.ndarray:
        """
        Compute dL/dy = y - t.
        """
        y, t = _as_pair("HalfSquaredError.gradient", output, target)
        return y - t
