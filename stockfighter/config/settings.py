from pathlib import Path

# API Settings
STOCKFIGHTER_API_URL = "https://api.stockfighter.io/ob/api"
AUTH_HEADER = "X-Starfighter-Authorization"
DEFAULT_TIMEOUT = 10.0  # seconds
USER_AGENT = "stockfighter-python/0.1"

# Environment / file configuration
ENV_PREFIX = "STOCKFIGHTER_"
LEGACY_API_KEY_ENV = "STOCKFIGHTERAPI"
CONFIG_PATH_ENV = "STOCKFIGHTER_CONFIG"
DEFAULT_CONFIG_PATH = Path("stockfighter.yaml")

# Public test exchange, always up, trades a single symbol
TEST_VENUE = "TESTEX"
TEST_SYMBOL = "FOOBAR"
