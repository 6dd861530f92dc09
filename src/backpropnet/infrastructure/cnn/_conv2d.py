"""
Single-filter 2D convolution stage with activation and manual backprop.

Forward
-------
    Z[i, j] = sum_{u,v} X[i+u, j+v] * K[u, v] + b
    Y       = phi(Z)

for a single input channel, a single kernel, stride 1 and no padding
("valid" mode), so Y has shape (H-kH+1, W-kW+1).

Backward (given dL/dY)
----------------------
    dL/dZ = dL/dY * phi'(Z)
    dL/dK[u, v] = sum_{i,j} X[i+u, j+v] * dL/dZ[i, j]
    dL/db = sum_{i,j} dL/dZ[i, j]
    dL/dX = full correlation of dL/dZ with K (pre-update)

followed by K <- K - lr * dL/dK and b <- b - lr * dL/db.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple, Union

import numpy as np

from ...domain._activation import IActivation
from ...domain._errors import ShapeMismatchError
from ...domain._initializer import IParameterInitializer
from ...domain.model._forward_cache_mixin import ForwardCacheMixin
from .._activations import activation_name, get_activation
from ..ops.conv2d_cpu import (
    conv2d_valid_backward_cpu,
    conv2d_valid_forward_cpu,
    conv2d_valid_out_hw,
)


def _pair(v: Union[int, Tuple[int, int]]) -> Tuple[int, int]:
    return v if isinstance(v, tuple) else (v, v)


class Convolution2D(ForwardCacheMixin):
    """
    Valid, stride-1 convolution of one (H, W) map with one (kH, kW) kernel.

    Parameters
    ----------
    kernel_size : int or tuple[int, int]
        Kernel height and width; both must be positive.
    activation : str or IActivation, default="relu"
        Activation phi applied to the convolution output.
    initializer : IParameterInitializer
        Supplies the kernel weights (row-major) and then the bias.

    Raises
    ------
    ValueError
        If a kernel dimension is not positive.
    """

    def __init__(
        self,
        kernel_size: Union[int, Tuple[int, int]],
        initializer: IParameterInitializer,
        activation: Union[str, IActivation] = "relu",
    ) -> None:
        k_h, k_w = (int(v) for v in _pair(kernel_size))
        if k_h <= 0 or k_w <= 0:
            raise ValueError(f"kernel_size must be positive, got ({k_h}, {k_w})")

        self.kernel_size: Tuple[int, int] = (k_h, k_w)
        self.activation = get_activation(activation)

        self._kernel = np.array(
            [[initializer.next_weight() for _ in range(k_w)] for _ in range(k_h)],
            dtype=np.float64,
        )
        self._bias = float(initializer.next_bias())

    @property
    def kernel(self) -> np.ndarray:
        """Snapshot (copy) of the current kernel."""
        return self._kernel.copy()

    @property
    def bias(self) -> float:
        return self._bias

    def output_shape(self, input_shape: Tuple[int, int]) -> Tuple[int, int]:
        """
        Output shape for an input of `input_shape`.

        Raises
        ------
        ShapeMismatchError
            If the input is smaller than the kernel in either dimension.
        """
        H_out, W_out = conv2d_valid_out_hw(*input_shape, self.kernel_size)
        if H_out <= 0 or W_out <= 0:
            raise ShapeMismatchError(
                "Convolution2D.forward",
                expected=f">= {self.kernel_size}",
                actual=tuple(input_shape),
            )
        return H_out, W_out

    def get_config(self) -> Dict[str, Any]:
        return {
            "kernel_size": list(self.kernel_size),
            "activation": activation_name(self.activation),
        }

    def forward(self, x: np.ndarray) -> np.ndarray:
        """
        Convolve `x`, apply the activation and cache (X, Z, Y).

        Raises
        ------
        ShapeMismatchError
            If `x` is not 2-D or is smaller than the kernel.
        """
        x = np.array(x, dtype=np.float64)
        if x.ndim != 2:
            raise ShapeMismatchError(
                "Convolution2D.forward", expected="(H, W)", actual=x.shape
            )
        self.output_shape(x.shape)

        z = conv2d_valid_forward_cpu(x, self._kernel, self._bias)
        y = self.activation.value(z)
        self._store_cache((x, z, y))
        return y.copy()

    def backward(self, grad_y: np.ndarray, learning_rate: float) -> np.ndarray:
        """
        Backpropagate dL/dY, update K and b, and return dL/dX.

        Raises
        ------
        BackwardBeforeForwardError
            If no forward pass is cached.
        ShapeMismatchError
            If `grad_y` does not have the shape of the last output.
        """
        x, z, y = self._require_cache()
        grad_y = np.asarray(grad_y, dtype=np.float64)
        if grad_y.shape != y.shape:
            raise ShapeMismatchError(
                "Convolution2D.backward", expected=y.shape, actual=grad_y.shape
            )
        self._consume_cache()

        grad_z = grad_y * self.activation.derivative(z)
        grad_x, grad_k, grad_b = conv2d_valid_backward_cpu(x, self._kernel, grad_z)

        self._kernel -= learning_rate * grad_k
        self._bias -= learning_rate * grad_b
        return grad_x
