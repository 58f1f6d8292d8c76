# Environment
ENV_API_KEY = "TINYCACHE_API_KEY"
ENV_BASE_URL = "TINYCACHE_URL"

DEFAULT_BASE_URL = "https://tinycache.io/api/v1"

# Headers
HEADER_API_KEY = "X-TINYCACHE-API-KEY"
HEADER_ENCRYPT = "X-TINYCACHE-ENCRYPT"
HEADER_DECRYPT = "X-TINYCACHE-DECRYPT"
HEADER_CONTENT_TYPE = "Content-Type"

CONTENT_TYPE_JSON = "application/json"

# Files
DOTENV_FILE = ".env"
