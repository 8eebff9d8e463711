"""cachecompat cache: one get/set/delete contract over several Redis client shapes."""

from cachecompat.cache.adapters.compat import CompatibilityCacheAdapter
from cachecompat.cache.ports.outbound import CacheStore, ClientDialect
from cachecompat.cache.shapes import ClientShape, detect_shape

__all__ = [
    "CacheStore",
    "ClientDialect",
    "ClientShape",
    "CompatibilityCacheAdapter",
    "detect_shape",
]
