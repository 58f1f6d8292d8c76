from typing import Optional, assert_never

from httpx import Client

from .._config import Config
from .._utils._request_spec import RequestSpec
from ..models.payload import Verb
from ._base_service import BaseService
from ._payload_builder import build_read_payload, build_write_payload
from ._request_assembler import assemble
from ._validator import parse_verb, require_cache_key


class CacheService(BaseService):
    """Reads, writes and deletes entries of the remote cache.

    Every method validates its inputs, builds the payload, assembles the
    request and sends it once. Validation failures are raised before
    anything goes over the network.
    """

    def __init__(self, config: Config, client: Client | None = None) -> None:
        super().__init__(config=config, client=client)

    def get(
        self,
        cache_key: Optional[str] = None,
        *,
        decrypt: Optional[str] = None,
        query: Optional[str] = None,
    ) -> str:
        """Retrieve an entry, or run a cache query when no key is given.

        Args:
            cache_key: Key of the entry to read.
            decrypt: Key used by the service to decrypt the stored value.
            query: Raw query string appended to the URL.

        Returns:
            str: The raw response text followed by a newline.
        """
        spec = self._get_spec(cache_key, decrypt=decrypt, query=query)
        return self.send(spec)

    def post(self, cache_key: Optional[str], **inputs: Optional[str]) -> str:
        """Create an entry.

        Accepts the keyword inputs of `build_write_payload` plus ``query``.
        """
        spec = self._write_spec(Verb.POST, cache_key, **inputs)
        return self.send(spec)

    def put(self, cache_key: Optional[str], **inputs: Optional[str]) -> str:
        """Replace an entry, resolving the payload exactly like `post`."""
        spec = self._write_spec(Verb.PUT, cache_key, **inputs)
        return self.send(spec)

    def delete(
        self, cache_key: Optional[str] = None, *, query: Optional[str] = None
    ) -> str:
        spec = self._delete_spec(cache_key, query=query)
        return self.send(spec)

    def request_spec(
        self,
        verb: Verb | str,
        cache_key: Optional[str] = None,
        *,
        raw_json: Optional[str] = None,
        form_data: Optional[str] = None,
        value: Optional[str] = None,
        expire: Optional[str] = None,
        encrypt: Optional[str] = None,
        file_path: Optional[str] = None,
        query: Optional[str] = None,
    ) -> RequestSpec:
        """Build the request for any verb without sending it.

        `encrypt` is the shared encrypt/decrypt key: it encrypts on POST
        and PUT and decrypts on GET.

        Raises:
            InvalidVerbError: If verb is not GET, POST, PUT or DELETE.
        """
        if not isinstance(verb, Verb):
            verb = parse_verb(verb)

        match verb:
            case Verb.GET:
                return self._get_spec(cache_key, decrypt=encrypt, query=query)
            case Verb.POST | Verb.PUT:
                return self._write_spec(
                    verb,
                    cache_key,
                    raw_json=raw_json,
                    form_data=form_data,
                    value=value,
                    expire=expire,
                    encrypt=encrypt,
                    file_path=file_path,
                    query=query,
                )
            case Verb.DELETE:
                return self._delete_spec(cache_key, query=query)
            case _:
                assert_never(verb)

    def execute(
        self, verb: Verb | str, cache_key: Optional[str] = None, **inputs
    ) -> str:
        """Build the request for `verb` and send it once."""
        return self.send(self.request_spec(verb, cache_key, **inputs))

    def _get_spec(
        self,
        cache_key: Optional[str],
        *,
        decrypt: Optional[str] = None,
        query: Optional[str] = None,
    ) -> RequestSpec:
        return assemble(
            self._config,
            Verb.GET,
            cache_key=cache_key,
            payload=build_read_payload(decrypt),
            query=query,
        )

    def _write_spec(
        self,
        verb: Verb,
        cache_key: Optional[str],
        *,
        query: Optional[str] = None,
        **inputs: Optional[str],
    ) -> RequestSpec:
        require_cache_key(verb, cache_key)
        payload = build_write_payload(**inputs)
        return assemble(
            self._config, verb, cache_key=cache_key, payload=payload, query=query
        )

    def _delete_spec(
        self, cache_key: Optional[str], *, query: Optional[str] = None
    ) -> RequestSpec:
        return assemble(self._config, Verb.DELETE, cache_key=cache_key, query=query)
