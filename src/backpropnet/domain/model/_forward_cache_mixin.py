"""
Single-slot forward cache.

Every trainable stage in backpropnet remembers exactly one forward pass: the
values its `backward` needs (last input, pre-activation, output, arg-max map,
...). This mixin makes that slot explicit and enforces the two-state protocol

    Uninitialized --forward--> Ready --backward--> Uninitialized

so that calling `backward` before `forward`, or twice for one `forward`, fails
with `BackwardBeforeForwardError` instead of silently reusing stale values.
A new `forward` is always legal and replaces the cache.
"""

from __future__ import annotations

from typing import Any, Optional

from .._errors import BackwardBeforeForwardError


class ForwardCacheMixin:
    """
    Mixin holding the most recent forward-pass cache of a component.

    Host classes call `_store_cache` at the end of `forward` and
    `_consume_cache` at the start of `backward`.
    """

    _cache: Optional[Any] = None

    @property
    def is_ready(self) -> bool:
        """Whether a forward cache is live (the `Ready` state)."""
        return self._cache is not None

    def _store_cache(self, cache: Any) -> None:
        self._cache = cache

    def _require_cache(self) -> Any:
        """
        Return the live cache without releasing it.

        Raises
        ------
        BackwardBeforeForwardError
            If no forward cache is live.
        """
        if self._cache is None:
            raise BackwardBeforeForwardError(type(self).__name__)
        return self._cache

    def _consume_cache(self) -> Any:
        """
        Return the live cache and return the component to `Uninitialized`.
        """
        cache = self._require_cache()
        self._cache = None
        return cache
