# heartbeat.py
import argparse
import sys
from stockfighter.brokerages.client import StockfighterClient
from stockfighter.config.manager import ConfigManager
from stockfighter.errors import StockfighterError, VenueNotFound
from stockfighter.logger import logger, setup_logger
from stockfighter.venues.models import Venue

def main(venue_code: str, config: ConfigManager) -> int:
    client = StockfighterClient.from_config(config)

    try:
        api_ok, api_error = client.probe_api()
        logger.info(f"API is {'UP' if api_ok else 'DOWN'}" + (f": {api_error}" if api_error else ""))

        venue = Venue.new(venue_code)
        try:
            client.probe_venue(venue)
        except VenueNotFound as e:
            logger.error(f"Venue {venue_code}: {e}")
            return 1
        logger.info(f"Venue {venue.venue} is {'up' if venue.ok else 'wedged'}")

        for instrument in client.list_instruments(venue_code):
            logger.info(f"  {instrument.symbol:<8} {instrument.name}")

    except StockfighterError as e:
        logger.error(f"Heartbeat failed: {e}")
        return 1

    return 0 if api_ok and venue.ok else 1

if __name__ == "__main__":
    config = ConfigManager()
    parser = argparse.ArgumentParser(description="Check API and venue liveness")
    parser.add_argument('--venue', default=config.get('venue'), help='Venue code (default from STOCKFIGHTER_VENUE)')
    parser.add_argument('--debug', action='store_true', default=config.get('debug'))
    args = parser.parse_args()
    setup_logger(debug=args.debug)
    sys.exit(main(args.venue, config))
