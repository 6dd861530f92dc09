"""
Model service interface and topology identifiers.

A model service is the capability set the orchestration layer works with:
inference, one-sample training and loss evaluation over plain numeric
sequences. Each topology is identified by a `ModelKind` value and produced by
the model factory.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Protocol, Sequence, runtime_checkable


class ModelKind(str, Enum):
    """
    Identifiers of the supported network topologies.

    `RNN` and `TRANSFORMER` are placeholders: they can be selected, but every
    operation on them fails.
    """

    MLP = "mlp"
    CNN = "cnn"
    RNN = "rnn"
    TRANSFORMER = "transformer"


@runtime_checkable
class INeuralNetService(Protocol):
    """
    Domain-level predictor/trainer interface.

    Notes
    -----
    - `predict` and `loss` do not update parameters.
    - `train` runs one full forward + backward + update cycle on a single
      sample; it returns nothing.
    """

    @property
    def name(self) -> str:
        """Human-readable description of the topology."""
        ...

    def predict(self, inputs: Sequence[float]) -> List[float]:
        """Run inference on one sample."""
        ...

    def train(
        self, inputs: Sequence[float], target: Sequence[float], learning_rate: float
    ) -> None:
        """Run one gradient-descent step on one sample."""
        ...

    def loss(self, output: Sequence[float], target: Sequence[float]) -> float:
        """Evaluate the loss of `output` against `target`."""
        ...


@runtime_checkable
class IDemoDataProvider(Protocol):
    """
    Supplier of the fixed demo sample for one topology.
    """

    @property
    def kind(self) -> ModelKind:
        """The topology whose input format this provider matches."""
        ...

    def get_sample(self) -> tuple[List[float], List[float]]:
        """Return one `(input, target)` pair."""
        ...
