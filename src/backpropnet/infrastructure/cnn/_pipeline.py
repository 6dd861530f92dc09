"""
Fixed CNN pipeline: reshape -> Convolution2D -> MaxPool2D -> flatten -> head.

The pipeline takes a flat, row-major image of `image_height * image_width`
values and produces a single output. It implements the model-service
capability set (`predict`, `train`, `loss`) directly.

Training
--------
`train` recomputes the forward pass (so every stage holds a fresh cache),
seeds dL/dy = y - t[0], and backpropagates

    head -> unflatten -> pool -> conv

The convolution's input gradient has no upstream consumer and is discarded;
every parameter update happens inside the stages' own `backward`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from ...domain._activation import IActivation
from ...domain._errors import ShapeMismatchError
from ...domain._initializer import IParameterInitializer
from ...domain._loss import ILoss
from .._losses import HalfSquaredError
from ..ops.reshape_cpu import flatten, to_image, unflatten
from ..utils.initializer import resolve_initializer
from ._conv2d import Convolution2D
from ._fully_connected import FullyConnectedHead
from ._maxpool2d import MaxPool2D


class CnnPipeline:
    """
    Single-channel Conv -> MaxPool -> FC network for one-sample training.

    Parameters
    ----------
    image_height, image_width : int, default=8
        Shape of the images the flat input is reshaped into.
    kernel_size : int or tuple[int, int], default=(3, 3)
        Convolution kernel size.
    conv_activation : str or IActivation, default="relu"
    head_activation : str or IActivation, default="sigmoid"
    initializer : IParameterInitializer or str, optional
        Supplies the convolution parameters first, then the head's. Defaults
        to the seeded ``uniform`` initializer.
    loss : ILoss, optional
        Loss used by `loss`; defaults to `HalfSquaredError`.
    seed : int, default=0
        Seed used when `initializer` is None or ``"uniform"``.

    Raises
    ------
    ValueError
        If the image is too small to leave a non-empty pooled map.
    """

    name = "CNN (Conv3x3 + MaxPool2 + FC1)"

    def __init__(
        self,
        image_height: int = 8,
        image_width: int = 8,
        kernel_size: Union[int, Tuple[int, int]] = (3, 3),
        conv_activation: Union[str, IActivation] = "relu",
        head_activation: Union[str, IActivation] = "sigmoid",
        initializer: Optional[Union[str, IParameterInitializer]] = None,
        loss: Optional[ILoss] = None,
        seed: int = 0,
    ) -> None:
        if image_height <= 0 or image_width <= 0:
            raise ValueError(
                f"image size must be positive, got ({image_height}, {image_width})"
            )
        init = resolve_initializer(initializer, seed=seed)

        self.image_shape: Tuple[int, int] = (int(image_height), int(image_width))
        self.conv = Convolution2D(kernel_size, init, activation=conv_activation)
        self.pool = MaxPool2D()

        try:
            conv_shape = self.conv.output_shape(self.image_shape)
            self.pooled_shape: Tuple[int, int] = self.pool.output_shape(conv_shape)
        except ShapeMismatchError as e:
            raise ValueError(
                f"image {self.image_shape} is too small for kernel {self.conv.kernel_size} "
                "followed by 2x2 pooling"
            ) from e

        self.head = FullyConnectedHead(
            self.pooled_shape[0] * self.pooled_shape[1], init, activation=head_activation
        )
        self._loss = loss if loss is not None else HalfSquaredError()

    @property
    def input_size(self) -> int:
        return self.image_shape[0] * self.image_shape[1]

    def get_config(self) -> Dict[str, Any]:
        return {
            "image_shape": list(self.image_shape),
            "conv": self.conv.get_config(),
            "pool": self.pool.get_config(),
            "head": self.head.get_config(),
        }

    def _forward(self, inputs: Sequence[float]) -> float:
        image = to_image(inputs, self.image_shape)
        feature_map = self.conv.forward(image)
        pooled = self.pool.forward(feature_map)
        return self.head.forward(flatten(pooled))

    def predict(self, inputs: Sequence[float]) -> List[float]:
        """
        Run inference on one flat image.

        Raises
        ------
        ShapeMismatchError
            If `len(inputs) != image_height * image_width`.
        """
        return [self._forward(inputs)]

    def train(
        self, inputs: Sequence[float], target: Sequence[float], learning_rate: float
    ) -> None:
        """One forward + backward + update cycle on a single image."""
        t = np.asarray(target, dtype=np.float64).reshape(-1)
        if t.size == 0:
            raise ShapeMismatchError("CnnPipeline.train", expected=1, actual=0)

        y = self._forward(inputs)

        grad_flat = self.head.backward(y - float(t[0]), learning_rate)
        grad_pooled = unflatten(grad_flat, self.pooled_shape)
        grad_feature_map = self.pool.backward(grad_pooled)
        self.conv.backward(grad_feature_map, learning_rate)

    def loss(self, output: Sequence[float], target: Sequence[float]) -> float:
        return self._loss.loss(output, target)
