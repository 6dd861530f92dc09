from ._factory import NeuralNetFactory, resolve_kind

__all__ = [
    NeuralNetFactory.__name__,
    resolve_kind.__name__,
]
