from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Verb(str, Enum):
    """HTTP methods understood by the cache service."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class CachePayload(BaseModel):
    """Fields sent to the cache service for a single request.

    `encrypt` and `decrypt` travel as headers and never reach the body.
    A field holding ``None`` is treated as unset. Any other field supplied
    through ``--json`` or ``--data`` is kept and forwarded as-is.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    # JSON input may carry any JSON value here, it is forwarded untouched
    cache_value: Any = None
    expire: Any = None
    encrypt: Optional[str] = None
    decrypt: Optional[str] = None

    def has(self, field: str) -> bool:
        return getattr(self, field, None) is not None

    def body_fields(self) -> dict[str, Any]:
        """Fields that remain for the body once the key headers are extracted."""
        return self.model_dump(exclude={"encrypt", "decrypt"}, exclude_none=True)
