"""FlyCache Cache — standardized cache facade over configurable engines."""

from flycache.cache.engine import BaseCacheEngine
from flycache.cache.facade import SimpleCacheFacade
from flycache.cache.ports.outbound import CacheEngine, SimpleCache
from flycache.cache.types import MISS, is_miss

__all__ = [
    "BaseCacheEngine",
    "CacheEngine",
    "MISS",
    "SimpleCache",
    "SimpleCacheFacade",
    "is_miss",
]
