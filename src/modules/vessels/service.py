"""Vessel directory adapter: live registries first, embedded demo data last."""

import random
from typing import Sequence

from src.modules.vessels.demo_directory import DEMO_NOTE, DEMO_VESSELS
from src.modules.vessels.models import VesselRecord, VesselSearchHints, VesselSource
from src.modules.vessels.registries import (
    MarineTrafficClient,
    VesselFinderClient,
    VesselRegistryClient,
)
from src.utils.logger import get_logger
from src.utils.settings.registry import RegistrySettings

logger = get_logger(__name__)


class VesselDirectory:
    """Looks vessels up across registries in priority order. Never raises.

    Registry failures are logged and skipped. Identifier lookups never fall
    through to the type-based search.
    """

    def __init__(
        self,
        registries: Sequence[VesselRegistryClient] = (),
        demo_vessels: Sequence[VesselRecord] = DEMO_VESSELS,
        rng: random.Random | None = None,
    ):
        self.registries = list(registries)
        self.demo_vessels = list(demo_vessels)
        self.rng = rng or random.Random()

    @property
    def is_live(self) -> bool:
        return bool(self.registries)

    async def lookup(self, hints: VesselSearchHints) -> VesselRecord | None:
        if hints.mmsi:
            return await self.lookup_by_mmsi(hints.mmsi)
        if hints.imo:
            return await self.lookup_by_imo(hints.imo)

        for registry in self.registries:
            try:
                vessel = await registry.search(hints)
            except Exception as e:
                logger.warning(f"{registry.name} search error: {e}")
                continue
            if vessel is not None:
                return vessel

        return self._demo_match(hints.type)

    async def lookup_by_mmsi(self, mmsi: str) -> VesselRecord | None:
        for registry in self.registries:
            try:
                vessel = await registry.get_by_mmsi(mmsi)
            except Exception as e:
                logger.warning(f"{registry.name} MMSI lookup error: {e}")
                continue
            if vessel is not None:
                return vessel

        return self._demo_by(lambda v: v.mmsi == mmsi)

    async def lookup_by_imo(self, imo: str) -> VesselRecord | None:
        for registry in self.registries:
            try:
                vessel = await registry.get_by_imo(imo)
            except Exception as e:
                logger.warning(f"{registry.name} IMO lookup error: {e}")
                continue
            if vessel is not None:
                return vessel

        return self._demo_by(lambda v: v.imo == imo)

    def _demo_by(self, predicate) -> VesselRecord | None:
        for vessel in self.demo_vessels:
            if predicate(vessel):
                return vessel.model_copy()
        return None

    def _demo_match(self, vessel_type: str | None) -> VesselRecord | None:
        """First demo vessel whose type contains the hint, else a random one."""
        if not self.demo_vessels:
            return None

        match = None
        if vessel_type:
            wanted = vessel_type.lower()
            match = next(
                (
                    v
                    for v in self.demo_vessels
                    if v.vessel_type and wanted in v.vessel_type.lower()
                ),
                None,
            )
        if match is None:
            match = self.rng.choice(self.demo_vessels)

        return match.model_copy(
            update={"source": VesselSource.DEMO_DATABASE, "note": DEMO_NOTE}
        )


def build_vessel_directory(
    settings: RegistrySettings | None = None,
) -> VesselDirectory:
    """Build the directory once at startup, registries in priority order."""
    settings = settings or RegistrySettings()
    registries: list[VesselRegistryClient] = []

    if settings.MARINETRAFFIC_API_KEY is not None:
        registries.append(
            MarineTrafficClient(
                api_key=settings.MARINETRAFFIC_API_KEY.get_secret_value(),
                base_url=settings.MARINETRAFFIC_BASE_URL,
                timeout=settings.REGISTRY_TIMEOUT,
            )
        )
    if settings.VESSELFINDER_API_KEY is not None:
        registries.append(
            VesselFinderClient(
                api_key=settings.VESSELFINDER_API_KEY.get_secret_value(),
                base_url=settings.VESSELFINDER_BASE_URL,
                timeout=settings.REGISTRY_TIMEOUT,
            )
        )

    if registries:
        logger.info(
            "Vessel registries configured",
            registries=[registry.name for registry in registries],
        )
    else:
        logger.warning("No vessel registry keys set, using demo vessel directory")

    return VesselDirectory(registries)
