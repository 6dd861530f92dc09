"""
Model factory: `ModelKind` -> freshly constructed model service.

Builders are registered per kind with a decorator. `create` resolves the kind
(an enum member or its string value), calls the builder with any keyword
arguments, and returns a new instance every time, so separate runs never
share mutable parameters.

Usage example
-------------
    @NeuralNetFactory.register_model(ModelKind.MLP)
    def _build_mlp(**kwargs): return MlpService(**kwargs)

    service = NeuralNetFactory.create("mlp", seed=0)
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, TypeVar, Union

from ...domain._errors import UnsupportedModelKindError
from ...domain._service import INeuralNetService, ModelKind
from ..cnn._pipeline import CnnPipeline
from ..services._mlp_service import MlpService
from ..services._stubs import RnnServiceStub, TransformerServiceStub

B = TypeVar("B", bound=Callable[..., INeuralNetService])


def resolve_kind(kind: Union[str, ModelKind], available: tuple[str, ...] = ()) -> ModelKind:
    """
    Convert a `ModelKind` or its string value into a `ModelKind`.

    Raises
    ------
    UnsupportedModelKindError
        If `kind` names no known topology.
    """
    if isinstance(kind, ModelKind):
        return kind
    try:
        return ModelKind(str(kind).lower())
    except ValueError as e:
        raise UnsupportedModelKindError(kind, available) from e


class NeuralNetFactory:
    """
    Registry-backed model service factory.

    Notes
    -----
    - Builders are stored by `ModelKind` in a class-level registry.
    - Selecting a kind without a builder fails at selection time.
    """

    BUILDERS: ClassVar[Dict[ModelKind, Callable[..., INeuralNetService]]] = {}

    @classmethod
    def register_model(
        cls, kind: Union[str, ModelKind], *, overwrite: bool = False
    ) -> Callable[[B], B]:
        """
        Decorator to register a service builder for `kind`.

        Raises
        ------
        ValueError
            If `kind` is already registered and `overwrite` is False.
        """
        key = resolve_kind(kind, cls.available())

        def decorator(builder: B) -> B:
            if not overwrite and key in cls.BUILDERS:
                raise ValueError(f"Model kind already registered: {key.value!r}")
            cls.BUILDERS[key] = builder
            return builder

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered kind values (sorted)."""
        return tuple(sorted(k.value for k in cls.BUILDERS))

    @classmethod
    def create(cls, kind: Union[str, ModelKind], **kwargs: Any) -> INeuralNetService:
        """
        Build a new service for `kind`.

        Raises
        ------
        UnsupportedModelKindError
            If `kind` is unknown or has no registered builder.
        """
        key = resolve_kind(kind, cls.available())
        try:
            builder = cls.BUILDERS[key]
        except KeyError as e:
            raise UnsupportedModelKindError(key.value, cls.available()) from e
        return builder(**kwargs)


NeuralNetFactory.register_model(ModelKind.MLP)(MlpService)
NeuralNetFactory.register_model(ModelKind.CNN)(CnnPipeline)
NeuralNetFactory.register_model(ModelKind.RNN)(RnnServiceStub)
NeuralNetFactory.register_model(ModelKind.TRANSFORMER)(TransformerServiceStub)
