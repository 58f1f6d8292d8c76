from ._base_service import BaseService
from .cache_service import CacheService

__all__ = [
    "BaseService",
    "CacheService",
]
