"""
Shape-, sequencing- and selection-related exceptions for backpropnet.

This module defines the custom errors raised by the numerical engine and by
the model factory. Every failure is fatal to the current call and is surfaced
to the caller unmodified; nothing in the engine retries or degrades.

Taxonomy
--------
- ShapeMismatchError:
    an input vector/image or an incoming gradient does not match a
    component's fixed expectation.
- BackwardBeforeForwardError:
    `backward` was invoked on a component holding no forward cache.
- UnsupportedModelKindError:
    a model kind has no registered implementation or demo data.
- TopologyNotImplementedError:
    a placeholder topology was asked to do real work.
"""

from __future__ import annotations

from typing import Any, Sequence


class ShapeMismatchError(ValueError):
    """
    Raised when an operand's length or shape does not match what a component
    expects.

    Attributes
    ----------
    op : str
        Name of the operation that rejected the operand (e.g. "Unit.forward").
    expected : Any
        The expected length or shape.
    actual : Any
        The length or shape that was received.
    """

    def __init__(self, op: str, expected: Any, actual: Any) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        op : str
            The operation name that rejected the operand.
        expected : Any
            The expected length or shape.
        actual : Any
            The received length or shape.
        """
        super().__init__(f"{op}: expected shape {expected}, got {actual}.")
        self.op = op
        self.expected = expected
        self.actual = actual


class BackwardBeforeForwardError(RuntimeError):
    """
    Raised when `backward` is called on a component with no live forward cache.

    This happens either when `forward` was never called, or when `backward`
    already consumed the cache of the last `forward`.
    """

    def __init__(self, component: str) -> None:
        super().__init__(
            f"{component}.backward called without a preceding forward pass."
        )
        self.component = component


class UnsupportedModelKindError(ValueError):
    """
    Raised when a model kind is requested that has no registered implementation.

    Attributes
    ----------
    kind : str
        The requested model kind.
    available : tuple[str, ...]
        Kinds that are registered at the time of the request.
    """

    def __init__(self, kind: Any, available: Sequence[str]) -> None:
        shown = ", ".join(available) or "<none>"
        super().__init__(f"Unsupported model kind: {kind!r}. Available: {shown}")
        self.kind = str(kind)
        self.available = tuple(available)


class TopologyNotImplementedError(NotImplementedError):
    """
    Raised by placeholder topologies (recurrent, attention-based), which
    perform no computation.
    """

    def __init__(self, kind: str, op: str) -> None:
        super().__init__(f"{op} is not implemented for the '{kind}' topology.")
        self.kind = kind
        self.op = op
