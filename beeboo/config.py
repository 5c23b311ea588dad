# =============================================================================
# beeboo/config.py  —  Environment Configuration
# =============================================================================
#
# Two inputs come from the environment (or a .env file):
#   BEEBOO_API_KEY   required, sent with every request
#   BEEBOO_API_URL   optional, defaults to the production API
#
# Configuration is read on every call to get_config() rather than cached at
# import time, so a host that changes the environment sees the new values.
# =============================================================================

import os

from dotenv import load_dotenv

from beeboo.errors import ConfigError
from beeboo.models import ApiConfig

# Load .env before anything reads the environment.  Existing variables win.
load_dotenv()

API_KEY_ENV = "BEEBOO_API_KEY"
API_URL_ENV = "BEEBOO_API_URL"
LOG_LEVEL_ENV = "BEEBOO_LOG_LEVEL"

DEFAULT_API_URL = "https://beeboo-api-625726065149.us-central1.run.app"
API_KEY_HELP_URL = "https://beeboo.ai/settings/api-keys"

SERVER_NAME = "beeboo"
SERVER_VERSION = "0.1.0"
USER_AGENT = f"beeboo-mcp-server/{SERVER_VERSION}"

REQUEST_TIMEOUT_SECONDS = 30


def get_config() -> ApiConfig:
    """Read the API credentials and endpoint from the environment.

    Raises:
        ConfigError: BEEBOO_API_KEY is unset or empty.
    """
    api_key = os.environ.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} environment variable is required")

    api_url = os.environ.get(API_URL_ENV, "").strip() or DEFAULT_API_URL
    return ApiConfig(api_key=api_key, api_url=api_url.rstrip("/"))


def get_log_level() -> str:
    """Log level name for the server, INFO unless BEEBOO_LOG_LEVEL says otherwise."""
    return os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
