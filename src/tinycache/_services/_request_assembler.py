import json
from typing import Optional

from .._config import Config
from .._utils._request_spec import RequestSpec
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_API_KEY,
    HEADER_CONTENT_TYPE,
    HEADER_DECRYPT,
    HEADER_ENCRYPT,
)
from ..models.payload import CachePayload, Verb
from ._validator import require_credential


def build_url(base_url: str, cache_key: Optional[str], query: Optional[str]) -> str:
    """Compose ``base[/cache_key][?query]``.

    The query string is appended verbatim, callers must encode it themselves.
    """
    url = base_url
    if cache_key:
        url += "/" + cache_key
    if query:
        url += "?" + query
    return url


def assemble(
    config: Config,
    verb: Verb,
    *,
    cache_key: Optional[str] = None,
    payload: Optional[CachePayload] = None,
    query: Optional[str] = None,
) -> RequestSpec:
    """Turn resolved inputs into the request sent to the cache service.

    The encrypt and decrypt keys are moved from the payload into their
    headers. A body is produced only when the payload carries a
    `cache_value`, so GET and DELETE requests are always body-less.

    Raises:
        MissingCredentialError: If the config holds no API key.
    """
    headers = {HEADER_API_KEY: require_credential(config.api_key)}

    if payload is not None and payload.has("encrypt"):
        headers[HEADER_ENCRYPT] = payload.encrypt  # type: ignore[assignment]

    if payload is not None and payload.has("decrypt"):
        headers[HEADER_DECRYPT] = payload.decrypt  # type: ignore[assignment]

    content: Optional[bytes] = None
    if payload is not None and payload.has("cache_value"):
        content = json.dumps(payload.body_fields()).encode("utf-8")
        headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

    return RequestSpec(
        method=verb.value,
        url=build_url(config.base_url, cache_key, query),
        headers=headers,
        content=content,
    )
