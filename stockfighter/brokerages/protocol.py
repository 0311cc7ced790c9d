from typing import List, Optional, Protocol, Tuple, Union, runtime_checkable
from stockfighter.orders.models import OrderRequest, OrderResponse
from stockfighter.pricing.models import OrderBook, Quote
from stockfighter.venues.models import ApiStatus, Instrument, Venue

@runtime_checkable
class VenueProtocol(Protocol):
    """Liveness and instrument listing."""

    def probe_api(self, status: Optional[ApiStatus] = None) -> Tuple[bool, Optional[str]]:
        """Returns (ok, error message) for the API as a whole, refreshing `status` if given."""
        ...

    def probe_venue(self, venue: Union[Venue, str]) -> bool:
        """Refreshes the venue in place and returns its liveness."""
        ...

    def list_instruments(self, venue: str) -> List[Instrument]:
        ...


@runtime_checkable
class OrderProtocol(Protocol):
    """Interface for order execution."""

    def submit_order(self, order: OrderRequest) -> OrderResponse:
        """Submits an order and returns the venue's ack/fill report."""
        ...


@runtime_checkable
class MarketDataProtocol(Protocol):
    """In-place market data snapshots."""

    def refresh_order_book(self, book: OrderBook) -> None:
        ...

    def refresh_quote(self, quote: Quote) -> None:
        ...
