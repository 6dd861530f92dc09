"""
Placeholder services for topologies that are not implemented.

The recurrent and attention-based topologies can be selected through the
factory, but they perform no computation: every operation raises
`TopologyNotImplementedError` rather than echoing its input.
"""

from __future__ import annotations

from typing import List, NoReturn, Sequence

from ...domain._errors import TopologyNotImplementedError
from ...domain._service import ModelKind


class _PlaceholderService:
    kind: ModelKind
    name: str

    def __init__(self, **_: object) -> None:
        pass

    def _fail(self, op: str) -> NoReturn:
        raise TopologyNotImplementedError(self.kind.value, op)

    def predict(self, inputs: Sequence[float]) -> List[float]:
        self._fail("predict")

    def train(
        self, inputs: Sequence[float], target: Sequence[float], learning_rate: float
    ) -> None:
        self._fail("train")

    def loss(self, output: Sequence[float], target: Sequence[float]) -> float:
        self._fail("loss")


class RnnServiceStub(_PlaceholderService):
    """Recurrent network placeholder."""

    kind = ModelKind.RNN
    name = "RNN (stub)"


class TransformerServiceStub(_PlaceholderService):
    """Attention-based network placeholder."""

    kind = ModelKind.TRANSFORMER
    name = "Transformer (stub)"
