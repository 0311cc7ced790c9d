import pytest

from stockfighter.api.venues import list_instruments, probe_api, probe_venue
from stockfighter.errors import SerializationError, TransportError, VenueNotFound
from stockfighter.venues.models import ApiStatus, Instrument, Venue


class TestProbeVenue:
    def test_up_venue_replaces_fields(self, transport, base_url):
        transport.queue({"ok": True, "venue": "TESTEX"})
        venue = Venue(venue="TESTEX", ok=False, error="stale message")

        assert probe_venue(transport, venue, base_url) is True
        assert venue.ok is True
        assert venue.venue == "TESTEX"
        assert venue.error == ""
        assert transport.last_call["method"] == "GET"
        assert transport.last_call["url"] == f"{base_url}/venues/TESTEX/heartbeat"

    def test_accepts_plain_venue_code(self, transport, base_url):
        transport.queue({"ok": True, "venue": "TESTEX"})
        assert probe_venue(transport, "TESTEX", base_url) is True

    def test_wedged_venue_is_not_an_error(self, transport, base_url):
        transport.queue({"ok": False, "venue": "WEDGEX"})
        venue = Venue(venue="WEDGEX", ok=True)

        assert probe_venue(transport, venue, base_url) is False
        assert venue.ok is False

    def test_unknown_venue_raises_venue_not_found(self, transport, base_url):
        transport.queue({"ok": False, "error": "No venue exists with that id"})
        venue = Venue(venue="NOPEX", ok=True)

        with pytest.raises(VenueNotFound) as excinfo:
            probe_venue(transport, venue, base_url)

        assert excinfo.value.message == "No venue exists with that id"
        assert venue.ok is False
        assert venue.error == "No venue exists with that id"
        assert venue.venue == "NOPEX"

    def test_garbage_response_is_serialization_error(self, transport, base_url):
        transport.queue(b"Service Unavailable")
        venue = Venue(venue="TESTEX", ok=True)

        with pytest.raises(SerializationError):
            probe_venue(transport, venue, base_url)
        assert venue.ok is False

    def test_transport_failure_propagates(self, transport, base_url):
        transport.queue(TransportError("connection refused"))
        venue = Venue(venue="TESTEX", ok=True)

        with pytest.raises(TransportError):
            probe_venue(transport, venue, base_url)
        assert venue.ok is False


class TestProbeApi:
    def test_api_up(self, transport, base_url):
        transport.queue({"ok": True, "error": ""})
        assert probe_api(transport, base_url) == (True, None)
        assert transport.last_call["url"] == f"{base_url}/heartbeat"

    def test_api_down_reports_message(self, transport, base_url):
        transport.queue({"ok": False, "error": "Scheduled maintenance"})
        status = ApiStatus(ok=True)

        assert probe_api(transport, base_url, status) == (False, "Scheduled maintenance")
        assert status.ok is False
        assert status.error == "Scheduled maintenance"

    def test_missing_ok_is_serialization_error(self, transport, base_url):
        transport.queue({"error": "???"})
        with pytest.raises(SerializationError):
            probe_api(transport, base_url)


class TestListInstruments:
    def test_keeps_server_order(self, transport, base_url):
        transport.queue({
            "ok": True,
            "symbols": [
                {"name": "Foreign Owned Occluded Bridge Architecture Resources", "symbol": "FOOBAR"},
                {"name": "Alpha Beta Corp", "symbol": "ABC"},
            ]
        })

        instruments = list_instruments(transport, "TESTEX", base_url)

        assert instruments == [
            Instrument(name="Foreign Owned Occluded Bridge Architecture Resources", symbol="FOOBAR"),
            Instrument(name="Alpha Beta Corp", symbol="ABC"),
        ]
        assert transport.last_call["url"] == f"{base_url}/venues/TESTEX/stocks"

    def test_empty_listing_is_valid(self, transport, base_url):
        transport.queue({"ok": True, "symbols": []})
        assert list_instruments(transport, "EMPTYX", base_url) == []

    def test_error_shape_is_serialization_error(self, transport, base_url):
        transport.queue({"ok": False, "error": "No venue exists with that id"})
        with pytest.raises(SerializationError):
            list_instruments(transport, "NOPEX", base_url)

    def test_instruments_are_immutable(self):
        instrument = Instrument(name="Alpha Beta Corp", symbol="ABC")
        with pytest.raises(ValueError):
            instrument.symbol = "XYZ"
