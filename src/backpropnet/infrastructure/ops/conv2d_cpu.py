"""
CPU reference kernels for single-filter "valid" 2D convolution (NumPy).

This module provides the forward and backward passes of a stride-1,
no-padding convolution of one 2-D input map with one 2-D kernel. The kernels
are independent of any layer state: callers pass in everything they need and
receive plain arrays back, which keeps them easy to unit-test against
hand-computed values.

Shape conventions
-----------------
- x : (H, W)            input map
- k : (kH, kW)          kernel
- z : (H-kH+1, W-kW+1)  pre-activation output

Non-goals
---------
- Multiple channels or filters
- Stride, padding or dilation
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


def conv2d_valid_out_hw(
    H: int, W: int, kernel_size: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Compute the output spatial size of a valid, stride-1 convolution.

    Returns
    -------
    tuple[int, int]
        (H - kH + 1, W - kW + 1). Either value may be <= 0 when the input is
        smaller than the kernel; callers are responsible for rejecting that.
    """
    k_h, k_w = kernel_size
    return H - k_h + 1, W - k_w + 1


def conv2d_valid_forward_cpu(x: np.ndarray, k: np.ndarray, b: float) -> np.ndarray:
    """
    Compute Z[i, j] = sum_{u,v} x[i+u, j+v] * k[u, v] + b.

    Parameters
    ----------
    x : np.ndarray
        Input map of shape (H, W), with H >= kH and W >= kW.
    k : np.ndarray
        Kernel of shape (kH, kW).
    b : float
        Scalar bias added to every output position.

    Returns
    -------
    np.ndarray
        Pre-activation map of shape (H-kH+1, W-kW+1).

    Notes
    -----
    The loop runs over kernel taps rather than output positions: each tap
    contributes a shifted, scaled slice of the input to the whole output map.
    """
    k_h, k_w = k.shape
    H_out, W_out = conv2d_valid_out_hw(x.shape[0], x.shape[1], (k_h, k_w))

    z = np.full((H_out, W_out), float(b), dtype=np.float64)
    for u in range(k_h):
        for v in range(k_w):
            z += k[u, v] * x[u : u + H_out, v : v + W_out]
    return z


def conv2d_valid_backward_cpu(
    x: np.ndarray, k: np.ndarray, grad_z: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, float]:
    """
    Backward pass of `conv2d_valid_forward_cpu`.

    Parameters
    ----------
    x : np.ndarray
        Input map used in the forward pass, shape (H, W).
    k : np.ndarray
        Kernel used in the forward pass, shape (kH, kW).
    grad_z : np.ndarray
        dL/dZ, shape (H-kH+1, W-kW+1).

    Returns
    -------
    tuple[np.ndarray, np.ndarray, float]
        grad_x :
            dL/dX[a, b] = sum over taps (u, v) with (a-u, b-v) inside the
            output of grad_z[a-u, b-v] * k[u, v] (full correlation), shape (H, W).
        grad_k :
            dL/dK[u, v] = sum_{i,j} x[i+u, j+v] * grad_z[i, j], shape (kH, kW).
        grad_b :
            dL/db = sum(grad_z).
    """
    k_h, k_w = k.shape
    H_out, W_out = grad_z.shape

    grad_x = np.zeros_like(x, dtype=np.float64)
    grad_k = np.empty((k_h, k_w), dtype=np.float64)
    for u in range(k_h):
        for v in range(k_w):
            window = x[u : u + H_out, v : v + W_out]
            grad_k[u, v] = np.sum(window * grad_z)
            grad_x[u : u + H_out, v : v + W_out] += k[u, v] * grad_z

    grad_b = float(np.sum(grad_z))
    return grad_x, grad_k, grad_b
