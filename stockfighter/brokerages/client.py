from typing import List, Optional, Tuple, Union
from stockfighter.api import market_data, venues
from stockfighter.api.orders import OrderGateway
from stockfighter.api.transport import HttpTransport, Transport
from stockfighter.config.manager import ConfigManager
from stockfighter.config.settings import DEFAULT_TIMEOUT, STOCKFIGHTER_API_URL
from stockfighter.logger import logger
from stockfighter.orders.models import OrderRequest, OrderResponse
from stockfighter.pricing.models import OrderBook, Quote
from stockfighter.venues.models import ApiStatus, Instrument, Venue
from .protocol import MarketDataProtocol, OrderProtocol, VenueProtocol

class StockfighterClient(VenueProtocol, OrderProtocol, MarketDataProtocol):
    """Stockfighter implementation of the venue, order and market data protocols."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = STOCKFIGHTER_API_URL,
        transport: Optional[Transport] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        The API key is only needed for submit_order(); a read-only client can
        leave it out.
        """
        self.base_url = base_url
        self.transport = transport or HttpTransport(timeout=timeout)
        self._api_key = api_key
        self._gateway: Optional[OrderGateway] = None

    @classmethod
    def from_config(cls, config: Optional[ConfigManager] = None, **kwargs) -> "StockfighterClient":
        """Build a client from STOCKFIGHTER_* settings."""
        config = config or ConfigManager()
        logger.debug(f"Creating client for {config.get('api_url')}")
        return cls(
            api_key=config.get("api_key") or None,
            base_url=config.get("api_url"),
            timeout=config.get("request_timeout"),
            **kwargs
        )

    @property
    def gateway(self) -> OrderGateway:
        """Lazy-build the order gateway (requires an API key)."""
        if self._gateway is None:
            self._gateway = OrderGateway(self.transport, self._api_key, self.base_url)
        return self._gateway

    # --- VenueProtocol Implementation ---
    def probe_api(self, status: Optional[ApiStatus] = None) -> Tuple[bool, Optional[str]]:
        return venues.probe_api(self.transport, self.base_url, status)

    def probe_venue(self, venue: Union[Venue, str]) -> bool:
        return venues.probe_venue(self.transport, venue, self.base_url)

    def list_instruments(self, venue: str) -> List[Instrument]:
        return venues.list_instruments(self.transport, venue, self.base_url)

    # --- OrderProtocol Implementation ---
    def submit_order(self, order: OrderRequest) -> OrderResponse:
        return self.gateway.submit_order(order)

    # --- MarketDataProtocol Implementation ---
    def refresh_order_book(self, book: OrderBook) -> None:
        market_data.refresh_order_book(self.transport, book, self.base_url)

    def refresh_quote(self, quote: Quote) -> None:
        market_data.refresh_quote(self.transport, quote, self.base_url)
