import base64
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from tinycache._config import Config
from tinycache._services import CacheService

# Ensure local source package (src/tinycache) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("TINYCACHE_API_KEY", raising=False)
    monkeypatch.delenv("TINYCACHE_URL", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://cache.example.com/api/v1"


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def config(base_url: str, api_key: str) -> Config:
    return Config(base_url=base_url, api_key=api_key)


@pytest.fixture
def service(config: Config) -> CacheService:
    return CacheService(config=config)


@pytest.fixture
def file_contents() -> bytes:
    return b"\x00binary\xffcontents\n"


@pytest.fixture
def file_path(temp_dir: str, file_contents: bytes) -> str:
    path = Path(temp_dir) / "payload.bin"
    path.write_bytes(file_contents)
    return str(path)


@pytest.fixture
def file_base64(file_contents: bytes) -> str:
    return base64.b64encode(file_contents).decode("ascii")
