# stockfighter/config/constants.py
from stockfighter.config.spec import ConfigSpec
from stockfighter.config.settings import (
    STOCKFIGHTER_API_URL,
    DEFAULT_TIMEOUT,
    LEGACY_API_KEY_ENV,
    TEST_VENUE,
    TEST_SYMBOL
)

CONFIG_SPECS = {
    'api_url': ConfigSpec(
        type=str,
        default=STOCKFIGHTER_API_URL,
        validator=lambda x: x.startswith(('http://', 'https://')),
        description="Base URL of the trading-simulation API"
    ),
    'api_key': ConfigSpec(
        type=str,
        default="",
        description="Secret sent in the X-Starfighter-Authorization header",
        aliases=(LEGACY_API_KEY_ENV,)
    ),
    'account': ConfigSpec(
        type=str,
        default="",
        description="Trading account used for order submission"
    ),
    'venue': ConfigSpec(
        type=str,
        default=TEST_VENUE,
        description="Default venue code"
    ),
    'symbol': ConfigSpec(
        type=str,
        default=TEST_SYMBOL,
        description="Default ticker symbol"
    ),
    'request_timeout': ConfigSpec(
        type=float,
        default=DEFAULT_TIMEOUT,
        validator=lambda x: 0 < x <= 120,
        description="Per-request timeout in seconds"
    ),
    'debug': ConfigSpec(
        type=bool,
        default=False,
        description="Enable debug logging"
    )
}
