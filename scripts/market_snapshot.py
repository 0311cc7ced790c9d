# market_snapshot.py
import argparse
import sys
from tabulate import tabulate
from stockfighter.brokerages.client import StockfighterClient
from stockfighter.config.manager import ConfigManager
from stockfighter.errors import StockfighterError
from stockfighter.logger import logger, setup_logger
from stockfighter.pricing.models import OrderBook, Quote

def format_quote(quote: Quote) -> str:
    rows = [
        ["bid", quote.bid, quote.bid_size, quote.bid_depth],
        ["ask", quote.ask, quote.ask_size, quote.ask_depth],
        ["last", quote.last, quote.last_size, quote.last_trade],
    ]
    return tabulate(rows, headers=["", "price", "size", "depth / time"])

def format_book(book: OrderBook, depth: int) -> str:
    rows = []
    for i in range(min(depth, max(len(book.bids), len(book.asks)))):
        bid = book.bids[i] if i < len(book.bids) else None
        ask = book.asks[i] if i < len(book.asks) else None
        rows.append([
            bid.qty if bid else "", bid.price if bid else "",
            ask.price if ask else "", ask.qty if ask else ""
        ])
    return tabulate(rows, headers=["bid qty", "bid", "ask", "ask qty"])

def main(venue: str, symbol: str, depth: int, config: ConfigManager) -> int:
    client = StockfighterClient.from_config(config)
    quote = Quote.new(venue, symbol)
    book = OrderBook.new(venue, symbol)

    try:
        client.refresh_quote(quote)
        client.refresh_order_book(book)
    except StockfighterError as e:
        logger.error(f"Snapshot of {venue}/{symbol} failed: {e}")
        return 1

    print(f"\n{symbol} @ {venue}  (quote {quote.quote_time or 'n/a'})")
    print(format_quote(quote))
    print(f"\nOrder book ({book.ts or 'n/a'})")
    print(format_book(book, depth))
    return 0 if quote.ok and book.ok else 1

if __name__ == "__main__":
    config = ConfigManager()
    parser = argparse.ArgumentParser(description="Print quote and order book for a symbol")
    parser.add_argument('--venue', default=config.get('venue'))
    parser.add_argument('--symbol', default=config.get('symbol'))
    parser.add_argument('--depth', type=int, default=10, help='Price levels per side to show')
    parser.add_argument('--debug', action='store_true', default=config.get('debug'))
    args = parser.parse_args()
    setup_logger(debug=args.debug)
    sys.exit(main(args.venue, args.symbol, args.depth, config))
