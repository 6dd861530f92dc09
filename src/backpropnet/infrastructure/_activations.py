"""
Scalar activation functions.

This module provides the concrete `IActivation` strategies used by the MLP
units, the convolution filter and the fully-connected head:

- Sigmoid : y = 1 / (1 + exp(-z)),  dy/dz = y * (1 - y)
- ReLU    : y = max(0, z),          dy/dz = 1 if z > 0 else 0

Design notes
------------
- Activations are stateless strategy objects; a single instance may be shared
  freely between components because it holds no mutable state.
- Every function accepts a Python scalar or a NumPy array. Arrays are
  processed elementwise; scalars come back as Python `float`.
- Activations can be referenced by registry name (e.g. "relu") wherever a
  component accepts one; see `get_activation`.
"""

from __future__ import annotations

from typing import Callable, Dict, Type, TypeVar, Union

import numpy as np

from ..domain._activation import IActivation
from ..domain.model._stateless_mixin import StatelessConfigMixin

A = TypeVar("A", bound=type)

_ACTIVATIONS: Dict[str, Type] = {}


def register_activation(name: str) -> Callable[[A], A]:
    """
    Class decorator registering an activation under `name`.

    Raises
    ------
    ValueError
        If `name` is already registered.
    """

    def decorator(cls: A) -> A:
        if name in _ACTIVATIONS:
            raise ValueError(f"Activation already registered: {name!r}")
        _ACTIVATIONS[name] = cls
        return cls

    return decorator


def _like_input(out: np.ndarray, z) -> Union[float, np.ndarray]:
    """Return a float for scalar input, the array otherwise."""
    if np.ndim(z) == 0:
        return float(out)
    return out


@register_activation("sigmoid")
class Sigmoid(StatelessConfigMixin):
    """
    Logistic sigmoid activation.

    Notes
    -----
    The derivative evaluates the sigmoid once and reuses it:
    sigma'(z) = sigma(z) * (1 - sigma(z)).
    """

    def value(self, z):
        z = np.asarray(z, dtype=np.float64)
        return _like_input(1.0 / (1.0 + np.exp(-z)), z)

    def derivative(self, z):
        z = np.asarray(z, dtype=np.float64)
        s = 1.0 / (1.0 + np.exp(-z))
        return _like_input(s * (1.0 - s), z)


@register_activation("relu")
class ReLU(StatelessConfigMixin):
    """
    Rectified linear unit.

    The derivative at exactly z == 0 is 0 (strict "greater than" comparison).
    """

    def value(self, z):
        z = np.asarray(z, dtype=np.float64)
        return _like_input(np.where(z > 0.0, z, 0.0), z)

    def derivative(self, z):
        z = np.asarray(z, dtype=np.float64)
        return _like_input((z > 0.0).astype(np.float64), z)


def available_activations() -> tuple[str, ...]:
    """Return registered activation names (sorted)."""
    return tuple(sorted(_ACTIVATIONS))


def get_activation(activation: Union[str, IActivation]) -> IActivation:
    """
    Resolve an activation given by registry name or by instance.

    Parameters
    ----------
    activation : str or IActivation
        A registered name ("sigmoid", "relu") or an object implementing
        `value` and `derivative`.

    Returns
    -------
    IActivation
        A new instance for names; the object itself otherwise.

    Raises
    ------
    ValueError
        If the name is not registered.
    TypeError
        If the object does not implement the activation interface.
    """
    if isinstance(activation, str):
        try:
            return _ACTIVATIONS[activation]()
        except KeyError as e:
            available = ", ".join(available_activations()) or "<none>"
            raise ValueError(
                f"Unsupported activation name: {activation!r}. "
                f"Available: {available}"
            ) from e
    if not isinstance(activation, IActivation):
        raise TypeError(
            f"Expected an activation name or IActivation, got: {type(activation)}"
        )
    return activation


def activation_name(activation: IActivation) -> str:
    """Return the registry name of `activation`, or its class name."""
    for name, cls in _ACTIVATIONS.items():
        if type(activation) is cls:
            return name
    return type(activation).__name__
