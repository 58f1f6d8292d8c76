from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import TransportError


@contextmanager
def handle_errors(url: str | None = None) -> Generator[None, None, None]:
    """Context manager for handling transport errors in API calls.

    Converts any `httpx.HTTPError` raised by the wrapped code into a
    `TransportError`. HTTP status codes are never inspected, so a response
    with an error status passes through unchanged.

    Args:
        url: URL reported when the error does not carry its request.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        TransportError: When the request could not be sent or no response arrived.
    """
    try:
        yield
    except httpx.HTTPError as e:
        try:
            url = str(e.request.url)
        except RuntimeError:
            pass

        message = str(e) or type(e).__name__
        if url:
            message = f"Request to {url} failed: {message}"

        raise TransportError(message, url=url) from e
