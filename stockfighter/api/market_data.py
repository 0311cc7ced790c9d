# stockfighter/api/market_data.py
from stockfighter.config.settings import STOCKFIGHTER_API_URL
from stockfighter.errors import StockfighterError
from stockfighter.logger import logger
from stockfighter.models import WireModel
from stockfighter.pricing.models import OrderBook, Quote
from .endpoints import order_book_url, quote_url
from .envelope import Envelope, decode
from .transport import Transport

ORDER_BOOK = Envelope(success=OrderBook)
QUOTE = Envelope(success=Quote)


def _refresh(transport: Transport, snapshot: WireModel, url: str, envelope: Envelope) -> None:
    """
    Fetch `url` and replace every field of `snapshot` with the decoded value.

    On failure only `ok` is touched (set False); the stale data stays.
    """
    try:
        raw = transport.send("GET", url)
        fresh = decode(raw, envelope)
    except StockfighterError:
        snapshot.ok = False
        raise
    snapshot.replace_with(fresh)


def refresh_order_book(
    transport: Transport,
    book: OrderBook,
    base_url: str = STOCKFIGHTER_API_URL
) -> None:
    _refresh(transport, book, order_book_url(base_url, book.venue, book.symbol), ORDER_BOOK)
    logger.debug(
        f"Order book {book.venue}/{book.symbol}: {len(book.bids)} bids, "
        f"{len(book.asks)} asks, ok={book.ok}"
    )


def refresh_quote(
    transport: Transport,
    quote: Quote,
    base_url: str = STOCKFIGHTER_API_URL
) -> None:
    _refresh(transport, quote, quote_url(base_url, quote.venue, quote.symbol), QUOTE)
    logger.debug(
        f"Quote {quote.venue}/{quote.symbol}: bid {quote.bid}x{quote.bid_size} "
        f"ask {quote.ask}x{quote.ask_size} last {quote.last}"
    )
