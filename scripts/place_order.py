# place_order.py
import argparse
import sys
from stockfighter.brokerages.client import StockfighterClient
from stockfighter.config.manager import ConfigManager
from stockfighter.errors import StockfighterError
from stockfighter.logger import logger, setup_logger
from stockfighter.models import Direction, OrderType
from stockfighter.orders.models import OrderRequest

def main(args, config: ConfigManager) -> int:
    try:
        order = OrderRequest(
            account=args.account or config.require('account'),
            venue=args.venue,
            symbol=args.symbol,
            price=args.price,
            qty=args.qty,
            direction=args.direction,
            order_type=args.order_type
        )
        client = StockfighterClient(
            api_key=config.require('api_key'),
            base_url=config.get('api_url'),
            timeout=config.get('request_timeout')
        )
    except ValueError as e:  # includes pydantic ValidationError
        logger.error(f"Invalid order: {e}")
        return 2

    try:
        response = client.submit_order(order)
    except StockfighterError as e:
        logger.error(f"Order submission failed: {e}")
        return 1

    if not response.ok:
        logger.error(f"Order rejected: {response.error}")
        return 1

    for fill in response.fills:
        logger.info(f"  fill {fill.qty} @ {fill.price} ({fill.ts})")
    return 0

if __name__ == "__main__":
    config = ConfigManager()
    parser = argparse.ArgumentParser(description="Submit a single order")
    parser.add_argument('direction', choices=[d.value for d in Direction])
    parser.add_argument('qty', type=int)
    parser.add_argument('--price', type=int, default=0, help='Limit price in cents')
    parser.add_argument('--type', dest='order_type', default=OrderType.LIMIT.value,
                        choices=[t.value for t in OrderType])
    parser.add_argument('--account', default=None, help='Defaults to STOCKFIGHTER_ACCOUNT')
    parser.add_argument('--venue', default=config.get('venue'))
    parser.add_argument('--symbol', default=config.get('symbol'))
    parser.add_argument('--debug', action='store_true', default=config.get('debug'))
    args = parser.parse_args()
    setup_logger(debug=args.debug)
    sys.exit(main(args, config))
