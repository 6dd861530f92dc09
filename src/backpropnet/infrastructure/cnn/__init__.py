from ._conv2d import Convolution2D
from ._maxpool2d import MaxPool2D
from ._fully_connected import FullyConnectedHead
from ._pipeline import CnnPipeline

__all__ = [
    Convolution2D.__name__,
    MaxPool2D.__name__,
    FullyConnectedHead.__name__,
    CnnPipeline.__name__,
]
