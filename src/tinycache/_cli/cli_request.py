import logging
import os
from typing import Optional

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from .._services import CacheService
from .._utils._logs import setup_logging
from .._utils.constants import DOTENV_FILE, ENV_API_KEY, ENV_BASE_URL
from ..models.errors import TinyCacheError
from ._utils._common import resolve_config
from ._utils._console import ConsoleLogger

logger = logging.getLogger(__name__)
console = ConsoleLogger()


@click.command(name="tinycache")
@click.argument("method", metavar="METHOD")
@click.argument("cache_key", metavar="CACHE_KEY", required=False)
@click.option("-k", "--key", "key_option", help="Cache key to interact with.")
@click.option("-d", "--data", help="Data to send as URL-encoded params.")
@click.option("-j", "--json", "raw_json", help="Raw JSON to send to the API.")
@click.option("-x", "--expire", help="Expire time to set in POST or PUT.")
@click.option("-v", "--value", help="Cache value to POST or PUT.")
@click.option(
    "-e",
    "--encrypt",
    "--decrypt",
    "encrypt",
    help="Encryption key on POST or PUT, decryption key on GET.",
)
@click.option(
    "-f",
    "--file",
    "file_path",
    help="File to pass as the cache value. Will be base64 encoded.",
)
@click.option("-q", "--query", help="Query params for doing an advanced cache query.")
@click.option(
    "--api-key",
    help=f"API key. Overrides the {ENV_API_KEY} environment variable.",
)
@click.option(
    "--base-url",
    help=f"Cache service endpoint. Overrides the {ENV_BASE_URL} environment variable.",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def request(
    ctx: click.Context,
    method: str,
    cache_key: Optional[str],
    key_option: Optional[str],
    data: Optional[str],
    raw_json: Optional[str],
    expire: Optional[str],
    value: Optional[str],
    encrypt: Optional[str],
    file_path: Optional[str],
    query: Optional[str],
    api_key: Optional[str],
    base_url: Optional[str],
    verbose: bool,
) -> None:
    r"""Send a single request to the TinyCache API and print the response.

    METHOD is one of GET, POST, PUT or DELETE.

    \b
    Examples:
        tinycache POST greeting -v "hello" -x 3600
        tinycache PUT greeting -j '{"cache_value": "hi"}'
        tinycache POST secret-doc -f ./notes.txt -e passphrase
        tinycache GET secret-doc --decrypt passphrase
        tinycache GET -q "prefix=greet"
        tinycache DELETE greeting
    """
    setup_logging(should_debug=verbose)
    load_dotenv(os.path.join(os.getcwd(), DOTENV_FILE))

    if cache_key and key_option and cache_key != key_option:
        logger.debug(f"Both CACHE_KEY and --key given, using '{cache_key}'")

    try:
        config = resolve_config(api_key=api_key, base_url=base_url)
        service = CacheService(config)
        response_text = service.execute(
            method,
            cache_key or key_option,
            raw_json=raw_json,
            form_data=data,
            value=value,
            expire=expire,
            encrypt=encrypt,
            file_path=file_path,
            query=query,
        )
    except TinyCacheError as e:
        console.error(e.message)
        ctx.exit(1)
    except ValidationError as e:
        console.error(f"Invalid configuration: {e.errors()[0]['msg']}")
        ctx.exit(1)

    console.raw(response_text)
