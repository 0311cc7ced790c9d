# stockfighter/api/endpoints.py
from urllib.parse import quote

def _url(base_url: str, *segments: str) -> str:
    path = "/".join(quote(str(segment), safe="") for segment in segments)
    return f"{base_url.rstrip('/')}/{path}"

def api_heartbeat_url(base_url: str) -> str:
    return _url(base_url, "heartbeat")

def venue_heartbeat_url(base_url: str, venue: str) -> str:
    return _url(base_url, "venues", venue, "heartbeat")

def stocks_url(base_url: str, venue: str) -> str:
    return _url(base_url, "venues", venue, "stocks")

def order_book_url(base_url: str, venue: str, symbol: str) -> str:
    return _url(base_url, "venues", venue, "stocks", symbol)

def quote_url(base_url: str, venue: str, symbol: str) -> str:
    return _url(base_url, "venues", venue, "stocks", symbol, "quote")

def orders_url(base_url: str, venue: str, symbol: str) -> str:
    return _url(base_url, "venues", venue, "stocks", symbol, "orders")
