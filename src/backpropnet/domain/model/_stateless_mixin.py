"""
Stateless configuration mixin.

This module defines `StatelessConfigMixin`, a helper mixin for components whose
behavior does not depend on any configurable hyperparameters (activations and
losses).

It provides trivial configuration hooks so that stateless components can be
described alongside configurable ones without special cases.
"""

from typing import Any, Dict
from typing_extensions import Self


class StatelessConfigMixin:
    """
    Mixin providing configuration hooks for stateless components.
    """

    def get_config(self) -> Dict[str, Any]:
        """
        Return a JSON-serializable configuration dictionary.

        Returns
        -------
        Dict[str, Any]
            An empty configuration dictionary.
        """
        return {}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> Self:
        """
        Reconstruct the component from a configuration dictionary.

        The configuration is ignored and a default instance is returned.
        """
        return cls()
