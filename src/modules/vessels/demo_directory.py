"""Small embedded directory of representative vessels used without registry keys."""

from src.modules.vessels.models import VesselRecord, VesselSource

DEMO_NOTE = "Using demo data. Add API keys for real vessel lookup."

DEMO_VESSELS: tuple[VesselRecord, ...] = (
    VesselRecord(
        name="Sea Explorer",
        mmsi="123456789",
        imo="8765432",
        vessel_type="Yacht",
        length="45m",
        tonnage="500 GT",
        owner="Ocean Adventures LLC",
        location="Marina del Rey, CA",
        flag="USA",
        source=VesselSource.DEMO_DATABASE,
    ),
    VesselRecord(
        name="Blue Horizon",
        mmsi="987654321",
        imo="2345678",
        vessel_type="Sailboat",
        length="18m",
        tonnage="45 GT",
        owner="Private Owner",
        location="San Diego, CA",
        flag="USA",
        source=VesselSource.DEMO_DATABASE,
    ),
    VesselRecord(
        name="Pacific Dream",
        mmsi="456789123",
        imo="3456789",
        vessel_type="Motor Yacht",
        length="32m",
        tonnage="280 GT",
        owner="Maritime Holdings Inc",
        location="Newport Beach, CA",
        flag="Cayman Islands",
        source=VesselSource.DEMO_DATABASE,
    ),
)
