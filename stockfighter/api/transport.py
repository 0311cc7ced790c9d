# stockfighter/api/transport.py
from typing import Dict, Optional, Protocol, Union, runtime_checkable

import requests

from stockfighter.config.settings import DEFAULT_TIMEOUT, USER_AGENT
from stockfighter.errors import TransportError
from stockfighter.logger import logger, redact_sensitive


@runtime_checkable
class Transport(Protocol):
    """Issues one HTTP request and returns the raw response body."""

    def send(
        self,
        method: str,
        url: str,
        body: Optional[Union[str, bytes]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> bytes:
        ...


class HttpTransport:
    """
    requests-based transport.

    Every call opens its own Session and closes it before returning, and asks
    the server to close the connection. No retries. Non-2xx answers are
    returned like any other body; the status is only logged.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, user_agent: str = USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent

    def _headers(self, body, extra: Optional[Dict[str, str]]) -> Dict[str, str]:
        headers = {
            'Accept': 'application/json',
            'Connection': 'close',
            'User-Agent': self.user_agent
        }
        if body is not None:
            headers['Content-Type'] = 'application/json'
        headers.update(extra or {})
        return headers

    def send(
        self,
        method: str,
        url: str,
        body: Optional[Union[str, bytes]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> bytes:
        if isinstance(body, str):
            body = body.encode("utf-8")

        logger.debug(f"{method} {url}")
        if body is not None:
            logger.debug(redact_sensitive(f"Request body: {body.decode('utf-8', errors='replace')}"))

        try:
            with requests.Session() as session:
                response = session.request(
                    method,
                    url,
                    data=body,
                    headers=self._headers(body, headers),
                    timeout=self.timeout
                )
                content = response.content
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e

        if response.ok:
            logger.debug(f"HTTP {response.status_code} from {url} ({len(content)} bytes)")
        else:
            logger.info(f"HTTP {response.status_code} from {url}: {content[:200]!r}")
        return content
