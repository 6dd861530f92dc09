"""
Training history utilities.

This module defines `History`, a lightweight record of per-epoch values
produced by the demo runner (network output, target and loss before each
training step).

Design goals
------------
- Minimal surface area: no dependency on networks or NumPy
- Deterministic ordering and explicit epoch indexing
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Union


Number = Union[int, float]


@dataclass
class History:
    """
    Container for per-epoch run metrics.

    Attributes
    ----------
    history : Dict[str, List[float]]
        Mapping from metric name to a list of per-epoch values, ordered by
        epoch index.
    epoch : List[int]
        Epoch indices (0-based) corresponding to entries in `history`.
    """

    history: Dict[str, List[float]] = field(default_factory=dict)
    epoch: List[int] = field(default_factory=list)

    def append_epoch(self, epoch_idx: int, logs: Mapping[str, Number]) -> None:
        """
        Append metrics for a completed epoch.

        Notes
        -----
        Metric values are coerced to `float` before storage.
        """
        self.epoch.append(int(epoch_idx))
        for k, v in logs.items():
            self.history.setdefault(k, []).append(float(v))

    def last(self) -> Dict[str, float]:
        """Return metrics from the most recent epoch."""
        return {k: float(vs[-1]) for k, vs in self.history.items() if vs}

    def __getitem__(self, key: str) -> List[float]:
        return self.history[key]
