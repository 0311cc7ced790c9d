from typing import List
from pydantic import ConfigDict
from stockfighter.models import WireModel


class Venue(WireModel):
    """
    A venue code plus its last known liveness.

    Created once by the caller and refreshed in place by each heartbeat.
    On the wire only `ok` and `venue` are required; a payload missing
    `venue` is the error shape, not this one.
    """
    ok: bool
    venue: str
    error: str = ""

    @classmethod
    def new(cls, venue: str) -> "Venue":
        """Caller-side constructor: venue code set, not yet probed."""
        return cls(venue=venue, ok=False)


class Instrument(WireModel):
    model_config = ConfigDict(frozen=True)

    name: str
    symbol: str


class InstrumentListing(WireModel):
    ok: bool
    symbols: List[Instrument]


class ApiStatus(WireModel):
    """API-level heartbeat; same shape whether the API is up or down."""
    ok: bool
    error: str = ""


class ErrorEnvelope(WireModel):
    """Distinct failure shape, e.g. {"ok": false, "error": "No venue exists with that id"}"""
    ok: bool
    error: str
