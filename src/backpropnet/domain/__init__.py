"""
Domain layer: contracts, identifiers and exceptions.

Nothing in this package depends on a concrete implementation.
"""

from ._errors import (
    BackwardBeforeForwardError,
    ShapeMismatchError,
    TopologyNotImplementedError,
    UnsupportedModelKindError,
)
from ._activation import IActivation
from ._loss import ILoss
from ._initializer import IParameterInitializer
from ._service import IDemoDataProvider, INeuralNetService, ModelKind

__all__ = [
    BackwardBeforeForwardError.__name__,
    ShapeMismatchError.__name__,
    TopologyNotImplementedError.__name__,
    UnsupportedModelKindError.__name__,
    IActivation.__name__,
    ILoss.__name__,
    IParameterInitializer.__name__,
    IDemoDataProvider.__name__,
    INeuralNetService.__name__,
    ModelKind.__name__,
]
