"""
Parameter initialization public API.

Importing this module registers the built-in strategies (``uniform``,
``constant``) into the `ParameterInitializer` registry via import side
effects.

Exports
-------
- ParameterInitializer:
    The registry-backed dispatcher.
- resolve_initializer:
    Accepts a registry name, an existing initializer, or None (seeded
    ``uniform``).
"""

from typing import Optional, Union

from ._uniform import *
from ._constants import *
from ._base import ParameterInitializer
from ....domain._initializer import IParameterInitializer


def resolve_initializer(
    initializer: Optional[Union[str, IParameterInitializer]] = None, seed: int = 0
) -> IParameterInitializer:
    """
    Resolve an initializer given by name, by instance, or defaulted.

    Names are dispatched through `ParameterInitializer`; ``uniform`` receives
    `seed`. None selects ``uniform`` with `seed`.
    """
    if initializer is None:
        return ParameterInitializer("uniform", seed=seed)
    if isinstance(initializer, str):
        if initializer == "uniform":
            return ParameterInitializer(initializer, seed=seed)
        return ParameterInitializer(initializer)
    return initializer


__all__ = [
    ParameterInitializer.__name__,
    resolve_initializer.__name__,
]
