"""Command-line client for the TinyCache key/value service."""

from ._config import Config
from ._services import CacheService
from ._utils import RequestSpec
from .models import CachePayload, Verb

__all__ = [
    "CacheService",
    "CachePayload",
    "Config",
    "RequestSpec",
    "Verb",
]
