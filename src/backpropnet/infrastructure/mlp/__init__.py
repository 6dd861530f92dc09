from ._unit import Unit
from ._dense_layer import DenseLayer
from ._feedforward import FeedForwardNetwork

__all__ = [
    Unit.__name__,
    DenseLayer.__name__,
    FeedForwardNetwork.__name__,
]
