# stockfighter/api/orders.py
from stockfighter.config.settings import AUTH_HEADER, STOCKFIGHTER_API_URL
from stockfighter.logger import logger, mask_key
from stockfighter.orders.models import OrderRequest, OrderResponse
from .endpoints import orders_url
from .envelope import Envelope, decode
from .transport import Transport

ORDER_RESPONSE = Envelope(success=OrderResponse)


class OrderGateway:
    """
    Places orders with an explicit API key.

    Each successful submit_order() places exactly one order server-side.
    There is no deduplication: calling it again for the same request places
    a second order.
    """

    def __init__(self, transport: Transport, api_key: str, base_url: str = STOCKFIGHTER_API_URL):
        if not api_key:
            raise ValueError("An API key is required to submit orders")
        self.transport = transport
        self.base_url = base_url
        self._api_key = api_key
        logger.debug(f"Order gateway using API key {mask_key(api_key)}")

    def _auth_headers(self) -> dict:
        return {AUTH_HEADER: self._api_key}

    def submit_order(self, order: OrderRequest) -> OrderResponse:
        url = orders_url(self.base_url, order.venue, order.symbol)
        logger.info(
            f"Submitting {order.order_type.value} {order.direction.value} "
            f"{order.qty} {order.symbol}@{order.price} on {order.venue} for {order.account}"
        )

        raw = self.transport.send("POST", url, body=order.to_json(), headers=self._auth_headers())
        response = decode(raw, ORDER_RESPONSE)

        if response.ok:
            logger.info(
                f"Order {response.id} accepted: filled {response.total_filled}/"
                f"{response.original_qty}, open={response.open}"
            )
        else:
            logger.warning(f"Order rejected by {order.venue}: {response.error or 'no reason given'}")
        return response
