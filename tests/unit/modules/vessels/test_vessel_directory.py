"""Tests for the vessel directory adapter."""

import random
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import SecretStr

from src.modules.vessels.demo_directory import DEMO_NOTE, DEMO_VESSELS
from src.modules.vessels.models import VesselRecord, VesselSearchHints, VesselSource
from src.modules.vessels.registries import (
    MarineTrafficClient,
    RegistryError,
    VesselFinderClient,
    VesselRegistryClient,
)
from src.modules.vessels.service import VesselDirectory, build_vessel_directory
from src.utils.settings.registry import RegistrySettings

LIVE_VESSEL = VesselRecord(
    name="Northern Star",
    mmsi="235000001",
    imo="9000001",
    vessel_type="Cargo",
    source=VesselSource.LIVE_REGISTRY,
)


def _registry(name: str = "Registry", **methods) -> MagicMock:
    registry = MagicMock(spec=VesselRegistryClient)
    registry.name = name
    registry.search = methods.get("search", AsyncMock(return_value=None))
    registry.get_by_mmsi = methods.get("get_by_mmsi", AsyncMock(return_value=None))
    registry.get_by_imo = methods.get("get_by_imo", AsyncMock(return_value=None))
    return registry


@pytest.mark.asyncio
async def test_mmsi_lookup_never_searches():
    registry = _registry()
    directory = VesselDirectory([registry])

    vessel = await directory.lookup(VesselSearchHints(mmsi="123456789", type="Ferry"))

    assert vessel.name == "Sea Explorer"
    assert vessel.imo == "8765432"
    registry.get_by_mmsi.assert_awaited_once_with("123456789")
    registry.search.assert_not_called()


@pytest.mark.asyncio
async def test_imo_lookup_never_searches():
    registry = _registry()
    directory = VesselDirectory([registry])

    vessel = await directory.lookup(VesselSearchHints(imo="2345678"))

    assert vessel.name == "Blue Horizon"
    registry.get_by_imo.assert_awaited_once_with("2345678")
    registry.search.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_identifier_is_none():
    directory = VesselDirectory([_registry()])

    assert await directory.lookup(VesselSearchHints(mmsi="000000000")) is None
    assert await directory.lookup_by_imo("0000000") is None


@pytest.mark.asyncio
async def test_live_result_wins_over_demo():
    registry = _registry(search=AsyncMock(return_value=LIVE_VESSEL))
    directory = VesselDirectory([registry])

    vessel = await directory.lookup(VesselSearchHints(query="Northern Star"))

    assert vessel == LIVE_VESSEL
    assert vessel.source == VesselSource.LIVE_REGISTRY


@pytest.mark.asyncio
async def test_registry_failure_continues_to_next():
    failing = _registry("First", search=AsyncMock(side_effect=RegistryError("down")))
    working = _registry("Second", search=AsyncMock(return_value=LIVE_VESSEL))
    directory = VesselDirectory([failing, working])

    vessel = await directory.lookup(VesselSearchHints(query="Northern Star"))

    assert vessel == LIVE_VESSEL
    failing.search.assert_awaited_once()
    working.search.assert_awaited_once()


@pytest.mark.asyncio
async def test_identifier_lookup_failure_falls_back_to_demo():
    registry = _registry(get_by_mmsi=AsyncMock(side_effect=RegistryError("timeout")))
    directory = VesselDirectory([registry])

    vessel = await directory.lookup_by_mmsi("456789123")

    assert vessel.name == "Pacific Dream"
    assert vessel.source == VesselSource.DEMO_DATABASE


@pytest.mark.asyncio
async def test_demo_match_on_type():
    directory = VesselDirectory()

    vessel = await directory.lookup(VesselSearchHints(type="sailboat"))

    assert vessel.name == "Blue Horizon"
    assert vessel.source == VesselSource.DEMO_DATABASE
    assert vessel.note == DEMO_NOTE


@pytest.mark.asyncio
async def test_demo_match_takes_first_containing_entry():
    vessel = await VesselDirectory().lookup(VesselSearchHints(type="Yacht"))

    assert vessel.name == "Sea Explorer"


@pytest.mark.asyncio
async def test_demo_random_entry_without_type_match():
    directory = VesselDirectory(rng=random.Random(7))

    vessel = await directory.lookup(VesselSearchHints(type="Submarine"))

    assert vessel.name in {demo.name for demo in DEMO_VESSELS}
    assert vessel.note == DEMO_NOTE


@pytest.mark.asyncio
async def test_demo_records_are_not_mutated():
    await VesselDirectory().lookup(VesselSearchHints(type="Yacht"))

    assert all(demo.note is None for demo in DEMO_VESSELS)


def test_build_orders_registries_by_priority():
    settings = RegistrySettings(
        MARINETRAFFIC_API_KEY=SecretStr("mt-key"),
        VESSELFINDER_API_KEY=SecretStr("vf-key"),
    )

    directory = build_vessel_directory(settings)

    assert [type(r) for r in directory.registries] == [
        MarineTrafficClient,
        VesselFinderClient,
    ]
    assert directory.is_live


def test_build_without_keys_is_demo_only():
    settings = RegistrySettings(MARINETRAFFIC_API_KEY=None, VESSELFINDER_API_KEY=None)

    directory = build_vessel_directory(settings)

    assert directory.registries == []
    assert not directory.is_live
