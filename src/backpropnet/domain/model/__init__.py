from ._forward_cache_mixin import ForwardCacheMixin
from ._stateless_mixin import StatelessConfigMixin

__all__ = [
    ForwardCacheMixin.__name__,
    StatelessConfigMixin.__name__,
]
