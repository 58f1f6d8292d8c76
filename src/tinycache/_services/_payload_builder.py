import base64
import json
import logging
from typing import Any, Optional
from urllib.parse import parse_qsl

from pydantic import ValidationError

from ..models.errors import FileReadError, MalformedJsonError
from ..models.payload import CachePayload
from ._validator import require_cache_value

logger = logging.getLogger(__name__)


def _parse_json(raw_json: str) -> dict[str, Any]:
    try:
        data = json.loads(raw_json)
    except ValueError:
        raise MalformedJsonError() from None

    if not isinstance(data, dict):
        raise MalformedJsonError()
    return data


def _parse_form_data(form_data: str) -> dict[str, Any]:
    # later duplicates win, blank values are kept
    return dict(parse_qsl(form_data, keep_blank_values=True))


def _read_file_base64(file_path: str) -> str:
    try:
        with open(file_path, "rb") as f:
            contents = f.read()
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e

    logger.debug(f"Read {len(contents)} bytes from {file_path}")
    return base64.b64encode(contents).decode("ascii")


def build_write_payload(
    *,
    raw_json: Optional[str] = None,
    form_data: Optional[str] = None,
    value: Optional[str] = None,
    expire: Optional[str] = None,
    encrypt: Optional[str] = None,
    file_path: Optional[str] = None,
) -> CachePayload:
    """Resolve the payload for a POST or PUT request.

    Raw JSON takes precedence over form data as the base payload. The
    explicit value, expire and encrypt inputs only fill fields the base
    does not already carry. A file, when given, always replaces
    `cache_value` with its base64-encoded contents.

    Args:
        raw_json: JSON object text from ``--json``.
        form_data: URL-encoded pairs from ``--data``. Ignored when raw_json is given.
        value: Cache value from ``--value``.
        expire: Expire time from ``--expire``.
        encrypt: Encryption key from ``--encrypt``.
        file_path: Path of a file whose contents become the cache value.

    Returns:
        CachePayload: The payload, guaranteed to carry a `cache_value`.

    Raises:
        MalformedJsonError: If raw_json is not a JSON object.
        FileReadError: If file_path cannot be read.
        MissingValueError: If no source provided a cache value.
    """
    if raw_json:
        fields = _parse_json(raw_json)
    elif form_data:
        fields = _parse_form_data(form_data)
    else:
        fields = {}

    # null fields count as absent
    fields = {name: field for name, field in fields.items() if field is not None}

    if "cache_value" not in fields and value:
        fields["cache_value"] = value

    if "expire" not in fields and expire:
        fields["expire"] = expire

    if "encrypt" not in fields and encrypt:
        fields["encrypt"] = encrypt

    if file_path:
        fields["cache_value"] = _read_file_base64(file_path)

    try:
        payload = CachePayload(**fields)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise MalformedJsonError(f"{field} must be a string") from None

    require_cache_value(payload)
    return payload


def build_read_payload(decrypt: Optional[str] = None) -> CachePayload:
    if decrypt:
        return CachePayload(decrypt=decrypt)
    return CachePayload()
