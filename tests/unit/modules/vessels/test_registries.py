"""Tests for registry response normalization."""

import pytest

from src.modules.vessels.models import VesselSearchHints, VesselSource
from src.modules.vessels.registries import MarineTrafficClient, VesselFinderClient


class TestMarineTraffic:
    def test_format_vessel(self):
        vessel = MarineTrafficClient.format_vessel(
            [
                {
                    "SHIPNAME": "EVER GIVEN",
                    "MMSI": 353136000,
                    "IMO": 9811000,
                    "SHIPTYPE": "Container Ship",
                    "LENGTH": 400,
                    "DWT": 199629,
                    "OWNER": "Shoei Kisen Kaisha",
                    "AIS_LAST_POS": "Suez Canal",
                    "FLAG": "PA",
                }
            ]
        )

        assert vessel.name == "EVER GIVEN"
        assert vessel.mmsi == "353136000"
        assert vessel.imo == "9811000"
        assert vessel.length == "400m"
        assert vessel.tonnage == "199629 GT"
        assert vessel.source == VesselSource.LIVE_REGISTRY
        assert vessel.note is None

    @pytest.mark.parametrize("data", [None, [], {}, [{"SHIPNAME": ""}]])
    def test_no_vessel(self, data):
        assert MarineTrafficClient.format_vessel(data) is None

    @pytest.mark.asyncio
    async def test_search_needs_query(self):
        client = MarineTrafficClient(api_key="key", base_url="http://mt.test")

        assert await client.search(VesselSearchHints(type="Yacht")) is None


class TestVesselFinder:
    def test_format_vessel(self):
        vessel = VesselFinderClient.format_vessel(
            [
                {
                    "AIS": {
                        "NAME": "BLUE MARLIN",
                        "MMSI": 244000000,
                        "IMO": 9000000,
                        "TYPE": "Heavy Load Carrier",
                        "LATITUDE": 51.9,
                        "LONGITUDE": 4.4,
                    },
                    "MASTERDATA": {"LENGTH": 206, "GT": 38000, "FLAG": "NL"},
                }
            ]
        )

        assert vessel.name == "BLUE MARLIN"
        assert vessel.location == "51.9, 4.4"
        assert vessel.length == "206m"
        assert vessel.tonnage == "38000 GT"
        assert vessel.flag == "NL"
        assert vessel.owner is None

    @pytest.mark.asyncio
    async def test_free_text_is_not_forwarded(self):
        client = VesselFinderClient(api_key="key", base_url="http://vf.test")

        assert await client.search(VesselSearchHints(query="Blue Marlin")) is None
