from typing import List, Optional
from pydantic import ConfigDict, Field, PositiveInt
from stockfighter.models import WireModel, Direction, OrderType


class OrderRequest(WireModel):
    """Request to place one order (inputs). Immutable once built."""
    model_config = ConfigDict(frozen=True, strict=False)

    account: str
    venue: str
    symbol: str = Field(alias="stock")
    price: int  # cents; ignored by the venue for market orders
    qty: PositiveInt = Field(strict=True)
    direction: Direction
    order_type: OrderType = Field(alias="orderType")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class Fill(WireModel):
    price: int = 0
    qty: int = 0
    ts: str = ""


class OrderResponse(WireModel):
    """
    Result of an order submission (outputs).

    Only `ok` is mandatory: a rejected order comes back as
    {"ok": false, "error": "..."} and still decodes, so check `ok` before
    trusting the other fields. `fills` is kept in arrival order.
    """
    ok: bool
    error: str = ""
    symbol: str = ""
    venue: str = ""
    direction: Optional[Direction] = None
    original_qty: int = Field(default=0, alias="originalQty")
    qty: int = 0
    price: int = 0
    order_type: Optional[OrderType] = Field(default=None, alias="orderType")
    id: int = 0
    account: str = ""
    ts: str = ""
    fills: List[Fill] = Field(default_factory=list)
    total_filled: int = Field(default=0, alias="totalFilled")
    open: bool = False
