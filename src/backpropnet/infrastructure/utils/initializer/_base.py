"""
Parameter initializer registry and dispatch utilities.

This module defines `ParameterInitializer`, the infrastructure-level
dispatcher that resolves a registered initialization strategy by name and
exposes it through the domain `IParameterInitializer` contract
(`next_weight()` / `next_bias()`).

Design
------
- Strategies are registered by string name via a decorator-based registry.
- A registered entry is a factory: called with the dispatcher's keyword
  arguments, it returns an object implementing `next_weight`/`next_bias`.
- The dispatcher builds its strategy once at construction; every subsequent
  draw advances that strategy's own sequence.

Usage example
-------------
Registering a strategy:

    @ParameterInitializer.register_initializer("uniform")
    class UniformInitializer:
        def __init__(self, seed=0): ...
        def next_weight(self): ...
        def next_bias(self): ...

Applying a strategy:

    init = ParameterInitializer("uniform", seed=0)
    w = init.next_weight()
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, TypeVar

from ....domain._initializer import IParameterInitializer

T = TypeVar("T", bound=Callable[..., IParameterInitializer])


class ParameterInitializer:
    """
    Registry-backed parameter initializer dispatcher.

    Usage
    -----
    Register:
        @ParameterInitializer.register_initializer("uniform")
        class UniformInitializer: ...

    Dispatch:
        init = ParameterInitializer("uniform", seed=0)
        init.next_weight(); init.next_bias()

    Notes
    -----
    - Strategies are stored by string name in a class-level registry.
    - Two dispatchers built with the same name and arguments produce the same
      sequence of values.
    """

    INITIALIZERS: ClassVar[Dict[str, Callable[..., IParameterInitializer]]] = {}

    def __init__(self, initializer_name: str = "uniform", **kwargs: Any) -> None:
        try:
            factory = self.INITIALIZERS[initializer_name]
        except KeyError as e:
            available = ", ".join(sorted(self.INITIALIZERS)) or "<none>"
            raise ValueError(
                f"Unsupported initializer name: {initializer_name!r}. "
                f"Available: {available}"
            ) from e
        self.name = initializer_name
        self._kwargs = dict(kwargs)
        self._strategy: IParameterInitializer = factory(**kwargs)

    @classmethod
    def register_initializer(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register an initializer factory under `name`.

        Parameters
        ----------
        name:
            Registry key used to retrieve the initializer later.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Initializer name must be a non-empty string")

        def decorator(factory: T) -> T:
            if not overwrite and name in cls.INITIALIZERS:
                raise ValueError(f"Initializer already registered: {name!r}")
            cls.INITIALIZERS[name] = factory
            return factory

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered initializer names (sorted)."""
        return tuple(sorted(cls.INITIALIZERS))

    @classmethod
    def get(cls, name: str) -> Callable[..., IParameterInitializer]:
        """Get a registered initializer factory by name."""
        return cls.INITIALIZERS[name]

    def get_config(self) -> Dict[str, Any]:
        return {"name": self.name, **self._kwargs}

    def next_weight(self) -> float:
        return float(self._strategy.next_weight())

    def next_bias(self) -> float:
        return float(self._strategy.next_bias())
