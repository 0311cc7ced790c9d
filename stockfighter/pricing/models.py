from typing import List
from pydantic import Field, field_validator
from stockfighter.models import WireModel


class PriceLevel(WireModel):
    price: int
    qty: int
    is_buy: bool = Field(alias="isBuy")


class OrderBook(WireModel):
    """
    Resting bids/asks for one symbol at one venue.

    Levels stay in the order the server sent them.
    """
    ok: bool
    venue: str
    symbol: str
    bids: List[PriceLevel] = Field(default_factory=list)
    asks: List[PriceLevel] = Field(default_factory=list)
    ts: str = ""

    @classmethod
    def new(cls, venue: str, symbol: str):
        return cls(venue=venue, symbol=symbol, ok=False)

    @field_validator("bids", "asks", mode="before")
    @classmethod
    def _empty_side(cls, value):
        # An empty side is sent as null
        return [] if value is None else value


class Quote(WireModel):
    """
    Top-of-book and last-trade summary.

    The server omits fields it has no data for; those keep their zero/empty
    defaults.
    """
    ok: bool
    venue: str
    symbol: str
    bid: int = 0
    ask: int = 0
    bid_size: int = Field(default=0, alias="bidSize")
    ask_size: int = Field(default=0, alias="askSize")
    bid_depth: int = Field(default=0, alias="bidDepth")
    ask_depth: int = Field(default=0, alias="askDepth")
    last: int = 0
    last_size: int = Field(default=0, alias="lastSize")
    last_trade: str = Field(default="", alias="lastTrade")
    quote_time: str = Field(default="", alias="quoteTime")

    @classmethod
    def new(cls, venue: str, symbol: str):
        return cls(venue=venue, symbol=symbol, ok=False)

    @property
    def spread(self) -> int:
        """Ask minus bid, 0 when either side is missing"""
        if not self.bid or not self.ask:
            return 0
        return self.ask - self.bid
