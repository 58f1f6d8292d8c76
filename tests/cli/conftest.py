import pytest


@pytest.fixture
def mock_env_vars(base_url: str, api_key: str) -> dict[str, str]:
    """Fixture to provide mock environment variables."""
    return {
        "TINYCACHE_URL": base_url,
        "TINYCACHE_API_KEY": api_key,
    }
