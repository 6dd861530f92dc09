"""
2x2, stride-2 max pooling with arg-max gradient routing.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np

from ...domain._errors import ShapeMismatchError
from ...domain.model._forward_cache_mixin import ForwardCacheMixin
from ..ops.pool2d_cpu import (
    POOL_SIZE,
    maxpool2d_backward_cpu,
    maxpool2d_forward_cpu,
    maxpool2d_out_hw,
)


class MaxPool2D(ForwardCacheMixin):
    """
    Non-overlapping 2x2 max pooling over a single (H, W) map.

    The stage has no parameters. `forward` remembers, for every output cell,
    which input cell won the window; `backward` sends each incoming gradient
    entry back to exactly that cell and leaves every other cell at zero.

    Notes
    -----
    - Odd trailing rows/columns are dropped (H_out = H // 2).
    - Ties keep the first maximum in row-major order within the window.
    """

    kernel_size: Tuple[int, int] = (POOL_SIZE, POOL_SIZE)
    stride: Tuple[int, int] = (POOL_SIZE, POOL_SIZE)

    def get_config(self) -> Dict[str, Any]:
        return {"kernel_size": list(self.kernel_size), "stride": list(self.stride)}

    def output_shape(self, input_shape: Tuple[int, int]) -> Tuple[int, int]:
        """
        Pooled shape for an input of `input_shape`.

        Raises
        ------
        ShapeMismatchError
            If the input holds no complete 2x2 window.
        """
        H_out, W_out = maxpool2d_out_hw(*input_shape)
        if H_out <= 0 or W_out <= 0:
            raise ShapeMismatchError(
                "MaxPool2D.forward", expected=f">= {self.kernel_size}", actual=tuple(input_shape)
            )
        return H_out, W_out

    def forward(self, x: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        if x.ndim != 2:
            raise ShapeMismatchError("MaxPool2D.forward", expected="(H, W)", actual=x.shape)
        self.output_shape(x.shape)

        y, argmax = maxpool2d_forward_cpu(x)
        self._store_cache((x.shape, y.shape, argmax))
        return y

    @property
    def argmax(self) -> np.ndarray:
        """
        Arg-max map of the live forward pass, shape (H_out, W_out, 2).

        Raises
        ------
        BackwardBeforeForwardError
            If no forward pass is cached.
        """
        _, _, argmax = self._require_cache()
        return argmax.copy()

    def backward(self, grad_y: np.ndarray) -> np.ndarray:
        """
        Route dL/dY to the recorded arg-max cells.

        Raises
        ------
        BackwardBeforeForwardError
            If no forward pass is cached.
        ShapeMismatchError
            If `grad_y` does not have the pooled output shape.
        """
        x_shape, y_shape, argmax = self._require_cache()
        grad_y = np.asarray(grad_y, dtype=np.float64)
        if grad_y.shape != y_shape:
            raise ShapeMismatchError(
                "MaxPool2D.backward", expected=y_shape, actual=grad_y.shape
            )
        self._consume_cache()
        return maxpool2d_backward_cpu(grad_y, argmax, x_shape)
