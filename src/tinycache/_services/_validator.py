"""Checks that reject an illegal combination of inputs before any request is sent."""

from typing import Optional

from ..models.errors import (
    InvalidVerbError,
    MissingCacheKeyError,
    MissingCredentialError,
    MissingValueError,
)
from ..models.payload import CachePayload, Verb

WRITE_VERBS = frozenset({Verb.POST, Verb.PUT})


def parse_verb(raw: str) -> Verb:
    """Normalize a user-supplied verb.

    Args:
        raw: The verb as typed on the command line, in any case.

    Returns:
        Verb: The matching verb.

    Raises:
        InvalidVerbError: If the verb is not one of GET, POST, PUT or DELETE.
    """
    try:
        return Verb((raw or "").upper())
    except ValueError:
        raise InvalidVerbError(raw) from None


def require_cache_key(verb: Verb, cache_key: Optional[str]) -> None:
    if verb in WRITE_VERBS and not cache_key:
        raise MissingCacheKeyError()


def require_cache_value(payload: CachePayload) -> None:
    if not payload.has("cache_value"):
        raise MissingValueError()


def require_credential(api_key: Optional[str]) -> str:
    if not api_key:
        raise MissingCredentialError()
    return api_key
