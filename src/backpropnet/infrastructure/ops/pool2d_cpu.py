"""
CPU reference kernels for 2x2 / stride-2 max pooling (NumPy).

Windows are non-overlapping and unpadded. A trailing row or column that does
not fill a whole window is dropped, matching integer division of the output
size:

    H_out = H // 2,  W_out = W // 2

The forward kernel returns an arg-max map alongside the pooled values; the
backward kernel needs only that map and the original input shape to route
gradients.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

POOL_SIZE = 2


def maxpool2d_out_hw(H: int, W: int) -> Tuple[int, int]:
    """Return the pooled spatial size (H // 2, W // 2)."""
    return H // POOL_SIZE, W // POOL_SIZE


def maxpool2d_forward_cpu(x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Naive MaxPool2D forward pass over a single (H, W) map.

    Parameters
    ----------
    x : np.ndarray
        Input map of shape (H, W).

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        y :
            Pooled map of shape (H // 2, W // 2).
        argmax :
            Integer array of shape (H // 2, W // 2, 2). `argmax[p, q]` holds
            the (row, col) input coordinate that produced `y[p, q]`.

    Notes
    -----
    Ties keep the first maximum in row-major order within the window
    (`np.argmax` returns the first occurrence).
    """
    H_out, W_out = maxpool2d_out_hw(*x.shape)

    y = np.empty((H_out, W_out), dtype=np.float64)
    argmax = np.empty((H_out, W_out, 2), dtype=np.int64)

    for p in range(H_out):
        h0 = p * POOL_SIZE
        for q in range(W_out):
            w0 = q * POOL_SIZE
            patch = x[h0 : h0 + POOL_SIZE, w0 : w0 + POOL_SIZE]
            flat_idx = int(np.argmax(patch))
            ph, pw = divmod(flat_idx, POOL_SIZE)
            y[p, q] = patch[ph, pw]
            argmax[p, q, 0] = h0 + ph
            argmax[p, q, 1] = w0 + pw

    return y, argmax


def maxpool2d_backward_cpu(
    grad_out: np.ndarray, argmax: np.ndarray, x_shape: Tuple[int, int]
) -> np.ndarray:
    """
    Naive MaxPool2D backward pass.

    Parameters
    ----------
    grad_out : np.ndarray
        dL/dY, shape (H_out, W_out).
    argmax : np.ndarray
        Arg-max map returned by the forward pass.
    x_shape : tuple[int, int]
        Original input shape (H, W).

    Returns
    -------
    np.ndarray
        dL/dX of shape `x_shape`: zero everywhere except at arg-max
        coordinates, which accumulate the matching `grad_out` entries.
    """
    grad_x = np.zeros(x_shape, dtype=np.float64)
    np.add.at(grad_x, (argmax[..., 0], argmax[..., 1]), grad_out)
    return grad_x
