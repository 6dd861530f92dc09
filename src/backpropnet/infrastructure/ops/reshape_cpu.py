"""
Row-major reshape helpers bridging flat vectors and 2-D maps.

The CNN pipeline receives images as flat sequences and feeds its dense head a
flat vector; these helpers perform both directions with one fixed convention
(row-major, C order) so that `unflatten` is the exact inverse of `flatten`.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ...domain._errors import ShapeMismatchError


def to_image(values: Sequence[float], shape: Tuple[int, int]) -> np.ndarray:
    """
    Reshape a flat sequence into an (H, W) image in row-major order.

    Raises
    ------
    ShapeMismatchError
        If `len(values) != H * W`.
    """
    flat = np.asarray(values, dtype=np.float64).reshape(-1)
    H, W = shape
    if flat.size != H * W:
        raise ShapeMismatchError("to_image", expected=H * W, actual=flat.size)
    return flat.reshape(H, W).copy()


def flatten(image: np.ndarray) -> np.ndarray:
    """Flatten a 2-D map into a 1-D vector in row-major order."""
    return np.asarray(image, dtype=np.float64).reshape(-1).copy()


def unflatten(vector: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
    """Inverse of `flatten` for a map of the given shape."""
    return to_image(vector, shape)
