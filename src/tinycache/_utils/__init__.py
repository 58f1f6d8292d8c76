from ._errors import handle_errors
from ._logs import mask_secret, setup_logging
from ._request_spec import RequestSpec

__all__ = [
    "RequestSpec",
    "handle_errors",
    "mask_secret",
    "setup_logging",
]
