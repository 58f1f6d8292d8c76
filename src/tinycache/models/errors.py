class TinyCacheError(Exception):
    """Base class for every error the client raises before or while sending a request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidVerbError(TinyCacheError):
    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f'Invalid method "{verb}" given.')


class MissingCacheKeyError(TinyCacheError):
    def __init__(self, message: str = "Cache key is required."):
        super().__init__(message)


class MissingValueError(TinyCacheError):
    def __init__(self, message: str = "Cache value must be set."):
        super().__init__(message)


class MalformedJsonError(TinyCacheError):
    """Raised when the raw JSON payload does not parse to an object."""

    def __init__(self, message: str = "JSON could not be parsed."):
        super().__init__(message)


class FileReadError(TinyCacheError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read file '{path}': {reason}")


class MissingCredentialError(TinyCacheError):
    def __init__(
        self,
        message="Invalid API key. Pass --api-key or set the TINYCACHE_API_KEY environment variable.",
    ):
        super().__init__(message)


class TransportError(TinyCacheError):
    """Raised when the request could not be delivered to the cache service.

    Wraps connection failures and timeouts. HTTP error statuses are not
    transport errors: their body is printed like any other response.
    """

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)
