# logger.py
import logging
import re

LOGGER_NAME = "stockfighter"

_SENSITIVE_PAIR = re.compile(
    r'(?P<key>(?:api_?key|token|secret|password|x-starfighter-authorization)"?\s*[=:]\s*"?)'
    r"(?P<value>[^\s&,;'\"}]+)",
    re.IGNORECASE,
)

def setup_logger(debug=False):
    """Configure logger with optional debug mode"""
    level = logging.DEBUG if debug else logging.INFO
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[
            logging.StreamHandler()
        ]
    )
    stockfighter_logger = logging.getLogger(LOGGER_NAME)
    stockfighter_logger.setLevel(level)
    return stockfighter_logger

def mask_key(key: str) -> str:
    """Show only the first/last 4 chars of a secret."""
    if not key:
        return key
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}...{key[-4:]}"

def redact_sensitive(text: str) -> str:
    if not text:
        return text

    # Standalone tokens (a bare API key)
    if 20 <= len(text) < 100 and re.fullmatch(r"[A-Za-z0-9_\-]+", text):
        return mask_key(text)

    # Tokens in key=value or header: value pairs
    return _SENSITIVE_PAIR.sub(lambda m: f"{m.group('key')}REDACTED", text)

# Initialize with debug=False by default
logger = setup_logger()
