from .errors import (
    FileReadError,
    InvalidVerbError,
    MalformedJsonError,
    MissingCacheKeyError,
    MissingCredentialError,
    MissingValueError,
    TinyCacheError,
    TransportError,
)
from .payload import CachePayload, Verb

__all__ = [
    "CachePayload",
    "Verb",
    "TinyCacheError",
    "InvalidVerbError",
    "MissingCacheKeyError",
    "MissingValueError",
    "MalformedJsonError",
    "FileReadError",
    "MissingCredentialError",
    "TransportError",
]
