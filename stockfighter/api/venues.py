# stockfighter/api/venues.py
from typing import List, Optional, Tuple, Union

from stockfighter.config.settings import STOCKFIGHTER_API_URL
from stockfighter.errors import VenueNotFound
from stockfighter.logger import logger
from stockfighter.venues.models import (
    ApiStatus,
    ErrorEnvelope,
    Instrument,
    InstrumentListing,
    Venue
)
from .endpoints import api_heartbeat_url, stocks_url, venue_heartbeat_url
from .envelope import Envelope, decode
from .transport import Transport

VENUE_HEARTBEAT = Envelope(
    success=Venue,
    failures=((ErrorEnvelope, lambda failure: VenueNotFound(failure.error, payload=failure)),)
)
API_HEARTBEAT = Envelope(success=ApiStatus)
INSTRUMENT_LISTING = Envelope(success=InstrumentListing)


def probe_venue(
    transport: Transport,
    venue: Union[Venue, str],
    base_url: str = STOCKFIGHTER_API_URL
) -> bool:
    """
    Check whether a venue is up (not "wedged").

    `venue` is refreshed in place: every field is replaced on success. When
    the server answers with the error shape, `ok` takes the error payload's
    value, `error` its message, and VenueNotFound is raised. Any other
    failure leaves `ok` False and propagates.
    """
    if isinstance(venue, str):
        venue = Venue.new(venue)

    venue.ok = False
    url = venue_heartbeat_url(base_url, venue.venue)
    raw = transport.send("GET", url)
    try:
        fresh = decode(raw, VENUE_HEARTBEAT)
    except VenueNotFound as e:
        venue.ok = e.payload.ok
        venue.error = e.message
        raise

    venue.replace_with(fresh)
    logger.debug(f"Venue {venue.venue} heartbeat ok={venue.ok}")
    return venue.ok


def probe_api(
    transport: Transport,
    base_url: str = STOCKFIGHTER_API_URL,
    status: Optional[ApiStatus] = None
) -> Tuple[bool, Optional[str]]:
    """Check whether the API as a whole is up. Returns (ok, error message or None)."""
    if status is None:
        status = ApiStatus(ok=False)

    status.ok = False
    raw = transport.send("GET", api_heartbeat_url(base_url))
    status.replace_with(decode(raw, API_HEARTBEAT))

    if not status.ok:
        logger.warning(f"API heartbeat reports down: {status.error or 'no reason given'}")
    return status.ok, status.error or None


def list_instruments(
    transport: Transport,
    venue: str,
    base_url: str = STOCKFIGHTER_API_URL
) -> List[Instrument]:
    """Stocks traded on a venue, in server order. An empty list is a valid answer."""
    raw = transport.send("GET", stocks_url(base_url, venue))
    listing = decode(raw, INSTRUMENT_LISTING)
    if not listing.ok:
        logger.warning(f"Instrument listing for {venue} returned ok=false")
    logger.debug(f"{venue} lists {len(listing.symbols)} instruments")
    return list(listing.symbols)
