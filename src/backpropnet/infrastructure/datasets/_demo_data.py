"""
Fixed demo samples, one provider per implemented topology.

- MLP : x = (1.0, 0.5, -1.2), t = (0.8,)
- CNN : 8x8 gradient image img[i, j] = (i + j) / 14.0 flattened row-major,
        t = (1.0,)

The placeholder topologies have no demo data; resolving them fails.
"""

from __future__ import annotations

from typing import Dict, List, Tuple, Type, Union

from ...domain._errors import UnsupportedModelKindError
from ...domain._service import IDemoDataProvider, ModelKind
from ..factory._factory import resolve_kind


class MlpDemoDataProvider:
    kind = ModelKind.MLP

    def get_sample(self) -> Tuple[List[float], List[float]]:
        return [1.0, 0.5, -1.2], [0.8]


class CnnDemoDataProvider:
    """
    Single-channel 8x8 gradient image, values in [0, 1].
    """

    kind = ModelKind.CNN
    height = 8
    width = 8

    def get_sample(self) -> Tuple[List[float], List[float]]:
        image = [
            (i + j) / 14.0 for i in range(self.height) for j in range(self.width)
        ]
        return image, [1.0]


_PROVIDERS: Dict[ModelKind, Type] = {
    ModelKind.MLP: MlpDemoDataProvider,
    ModelKind.CNN: CnnDemoDataProvider,
}


def resolve_demo_data(kind: Union[str, ModelKind]) -> IDemoDataProvider:
    """
    Return the demo data provider for `kind`.

    Raises
    ------
    UnsupportedModelKindError
        If `kind` has no demo data.
    """
    available = tuple(sorted(k.value for k in _PROVIDERS))
    key = resolve_kind(kind, available)
    try:
        return _PROVIDERS[key]()
    except KeyError as e:
        raise UnsupportedModelKindError(key.value, available) from e
