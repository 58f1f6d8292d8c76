from logging import getLogger

from httpx import Client

from .._config import Config
from .._utils._errors import handle_errors
from .._utils._logs import mask_secret
from .._utils._request_spec import RequestSpec
from .._utils.constants import HEADER_API_KEY, HEADER_DECRYPT, HEADER_ENCRYPT

_SECRET_HEADERS = frozenset({HEADER_API_KEY, HEADER_ENCRYPT, HEADER_DECRYPT})


class BaseService:
    """Sends exactly one request to the cache service and returns its raw text."""

    def __init__(self, config: Config, client: Client | None = None) -> None:
        self._logger = getLogger("tinycache")
        self._config = config
        self._client = client

    def send(self, spec: RequestSpec) -> str:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {self._loggable_headers(spec.headers)}")

        with handle_errors(spec.url):
            if self._client is not None:
                response = self._client.request(
                    spec.method,
                    spec.url,
                    headers=self._wire_headers(spec.headers),
                    content=spec.content,
                )
            else:
                with Client() as client:
                    response = client.request(
                        spec.method,
                        spec.url,
                        headers=self._wire_headers(spec.headers),
                        content=spec.content,
                    )

        self._logger.debug(f"Response: {response.status_code}")
        return response.text + "\n"

    @staticmethod
    def _wire_headers(headers: dict[str, str]) -> dict[str, bytes]:
        # keys may hold non-ASCII text, httpx only encodes str values as ASCII
        return {name: value.encode("utf-8") for name, value in headers.items()}

    @staticmethod
    def _loggable_headers(headers: dict[str, str]) -> dict[str, str]:
        return {
            name: mask_secret(value) if name in _SECRET_HEADERS else value
            for name, value in headers.items()
        }
