"""
backpropnet: forward inference and hand-derived backpropagation for a small
fully-connected network (MLP) and a single-filter convolutional network (CNN).
"""

from .domain import (
    BackwardBeforeForwardError,
    ModelKind,
    ShapeMismatchError,
    TopologyNotImplementedError,
    UnsupportedModelKindError,
)
from .infrastructure import *
from .infrastructure import __all__ as _infrastructure_all

__version__ = "0.1.0"

__all__ = [
    "BackwardBeforeForwardError",
    "ModelKind",
    "ShapeMismatchError",
    "TopologyNotImplementedError",
    "UnsupportedModelKindError",
    *_infrastructure_all,
]
