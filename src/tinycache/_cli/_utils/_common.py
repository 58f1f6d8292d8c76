import os
from typing import Optional

from ..._config import Config
from ..._utils.constants import ENV_API_KEY, ENV_BASE_URL


def resolve_config(
    api_key: Optional[str] = None, base_url: Optional[str] = None
) -> Config:
    """Build the client config, falling back to the environment.

    Explicit values win over ``TINYCACHE_API_KEY`` and ``TINYCACHE_URL``.
    A missing API key is not an error here, it is reported when the
    request is assembled.
    """
    return Config(
        api_key=api_key or os.environ.get(ENV_API_KEY) or None,
        base_url=base_url or os.environ.get(ENV_BASE_URL) or None,  # type: ignore[arg-type]
    )
