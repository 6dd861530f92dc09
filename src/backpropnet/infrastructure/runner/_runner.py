"""
Epoch-loop demo runner.

For a selected topology, the runner builds a fresh model service and the
matching demo data provider, then repeats for every epoch:

    y = predict(x)
    L = loss(y, t)
    record (y, t, L); print it when verbose
    train(x, t, learning_rate)

The recorded values therefore describe the model *before* each epoch's update.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union

from ...domain._service import IDemoDataProvider, INeuralNetService, ModelKind
from ..datasets._demo_data import resolve_demo_data
from ..factory._factory import NeuralNetFactory, resolve_kind
from ._history import History

DEFAULT_LEARNING_RATES: Dict[ModelKind, float] = {
    ModelKind.MLP: 0.5,
    ModelKind.CNN: 0.1,
}


@dataclass(frozen=True)
class DemoConfig:
    """
    Settings of one demo run.

    Attributes
    ----------
    epochs : int
        Number of training steps on the demo sample (>= 1).
    learning_rate : float, optional
        Step size. None selects the per-topology default (MLP 0.5, CNN 0.1).
    seed : int
        Seed of the parameter initializer.
    verbose : bool
        Whether to print banners and per-epoch lines.
    """

    epochs: int = 20
    learning_rate: Optional[float] = None
    seed: int = 0
    verbose: bool = True

    def learning_rate_for(self, kind: ModelKind) -> float:
        if self.learning_rate is not None:
            return float(self.learning_rate)
        return DEFAULT_LEARNING_RATES.get(kind, 0.1)


def run_demo(
    kind: Union[str, ModelKind],
    config: Optional[DemoConfig] = None,
    service: Optional[INeuralNetService] = None,
    data: Optional[IDemoDataProvider] = None,
) -> History:
    """
    Train one topology on its demo sample and return the per-epoch history.

    Parameters
    ----------
    kind : str or ModelKind
        Topology to run.
    config : DemoConfig, optional
        Run settings; defaults to `DemoConfig()`.
    service : INeuralNetService, optional
        Pre-built service; built through `NeuralNetFactory` when omitted.
    data : IDemoDataProvider, optional
        Sample provider; resolved by kind when omitted.

    Returns
    -------
    History
        Keys "output", "target" and "loss" (first output/target component).

    Raises
    ------
    ValueError
        If `config.epochs < 1`.
    UnsupportedModelKindError
        If the kind has no service or demo data.
    """
    config = config if config is not None else DemoConfig()
    if config.epochs < 1:
        raise ValueError("epochs must be >= 1")

    key = resolve_kind(kind, NeuralNetFactory.available())
    if service is None:
        service = NeuralNetFactory.create(key, seed=config.seed)
    if data is None:
        data = resolve_demo_data(key)
    learning_rate = config.learning_rate_for(key)

    hist = History()
    if config.verbose:
        print(f"=== {service.name} : training demo start ===")

    for epoch_idx in range(config.epochs):
        inputs, target = data.get_sample()
        output = service.predict(inputs)
        loss = service.loss(output, target)

        hist.append_epoch(
            epoch_idx, {"output": output[0], "target": target[0], "loss": loss}
        )
        if config.verbose:
            print(
                f"[Epoch {epoch_idx + 1}/{config.epochs}] "
                f"output: {output[0]:.4f} - target: {target[0]} - loss: {loss:.4f}"
            )

        service.train(inputs, target, learning_rate)

    if config.verbose:
        print(f"=== {service.name} : training demo end ===")
    return hist
