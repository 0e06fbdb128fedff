"""Clients for live vessel registry services."""

import asyncio
import re
from abc import ABC, abstractmethod
from typing import Any

import aiohttp

from src.modules.vessels.models import VesselRecord, VesselSearchHints, VesselSource

MMSI_PATTERN = re.compile(r"^\d{9}$")
IMO_PATTERN = re.compile(r"^\d{7}$")


class RegistryError(RuntimeError):
    """A registry call failed."""


def _text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


class VesselRegistryClient(ABC):
    """A live registry queried over HTTP with a bounded timeout."""

    name: str = "registry"

    def __init__(self, api_key: str, base_url: str, timeout: int = 15):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        async with aiohttp.ClientSession() as session:
            try:
                async with session.get(
                    url,
                    params=params,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    response.raise_for_status()
                    return await response.json(content_type=None)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise RegistryError(f"{self.name} request failed: {e}")

    @abstractmethod
    async def search(self, hints: VesselSearchHints) -> VesselRecord | None:
        """Free-text search; None when the hints give nothing to search on."""

    @abstractmethod
    async def get_by_mmsi(self, mmsi: str) -> VesselRecord | None: ...

    @abstractmethod
    async def get_by_imo(self, imo: str) -> VesselRecord | None: ...


class MarineTrafficClient(VesselRegistryClient):
    """MarineTraffic vessel master data and ship search services.

    Both answer with a JSON list of objects keyed SHIPNAME, MMSI, IMO,
    SHIPTYPE, LENGTH, DWT, OWNER, AIS_LAST_POS and FLAG.
    """

    name = "MarineTraffic"

    def _master_data_url(self) -> str:
        return f"{self.base_url}/vesselmasterdata/v:5/{self.api_key}"

    async def search(self, hints: VesselSearchHints) -> VesselRecord | None:
        if not hints.query:
            return None
        data = await self._get_json(
            f"{self.base_url}/shipsearch/{self.api_key}",
            params={"shipname": hints.query, "protocol": "jsono"},
        )
        return self.format_vessel(data)

    async def get_by_mmsi(self, mmsi: str) -> VesselRecord | None:
        data = await self._get_json(
            f"{self._master_data_url()}/mmsi:{mmsi}/protocol:jsono"
        )
        return self.format_vessel(data)

    async def get_by_imo(self, imo: str) -> VesselRecord | None:
        data = await self._get_json(
            f"{self._master_data_url()}/imo:{imo}/protocol:jsono"
        )
        return self.format_vessel(data)

    @staticmethod
    def format_vessel(data: Any) -> VesselRecord | None:
        if not isinstance(data, list) or not data:
            return None

        vessel = data[0]
        if not vessel.get("SHIPNAME") and not vessel.get("MMSI"):
            return None

        return VesselRecord(
            name=_text(vessel.get("SHIPNAME")),
            mmsi=_text(vessel.get("MMSI")),
            imo=_text(vessel.get("IMO")),
            vessel_type=_text(vessel.get("SHIPTYPE")),
            length=f"{vessel['LENGTH']}m" if vessel.get("LENGTH") else None,
            tonnage=f"{vessel['DWT']} GT" if vessel.get("DWT") else None,
            owner=_text(vessel.get("OWNER")),
            location=_text(vessel.get("AIS_LAST_POS")),
            flag=_text(vessel.get("FLAG")),
            source=VesselSource.LIVE_REGISTRY,
        )


class VesselFinderClient(VesselRegistryClient):
    """VesselFinder vessels service, which looks vessels up by identifier only.

    The response is a JSON list of ``{"AIS": {...}, "MASTERDATA": {...}}``.
    A free-text query is only forwarded when it is itself an MMSI or IMO number.
    """

    name = "VesselFinder"

    async def search(self, hints: VesselSearchHints) -> VesselRecord | None:
        query = (hints.query or "").strip()
        if MMSI_PATTERN.match(query):
            return await self.get_by_mmsi(query)
        if IMO_PATTERN.match(query):
            return await self.get_by_imo(query)
        return None

    async def get_by_mmsi(self, mmsi: str) -> VesselRecord | None:
        data = await self._get_json(
            f"{self.base_url}/vessels", params={"userkey": self.api_key, "mmsi": mmsi}
        )
        return self.format_vessel(data)

    async def get_by_imo(self, imo: str) -> VesselRecord | None:
        data = await self._get_json(
            f"{self.base_url}/vessels", params={"userkey": self.api_key, "imo": imo}
        )
        return self.format_vessel(data)

    @staticmethod
    def format_vessel(data: Any) -> VesselRecord | None:
        if not isinstance(data, list) or not data:
            return None

        ais = data[0].get("AIS") or {}
        master = data[0].get("MASTERDATA") or {}
        if not ais.get("NAME") and not ais.get("MMSI"):
            return None

        location = None
        if ais.get("LATITUDE") is not None and ais.get("LONGITUDE") is not None:
            location = f"{ais['LATITUDE']}, {ais['LONGITUDE']}"

        length = master.get("LENGTH")
        tonnage = master.get("GT") or master.get("DWT")

        return VesselRecord(
            name=_text(ais.get("NAME")),
            mmsi=_text(ais.get("MMSI")),
            imo=_text(ais.get("IMO")),
            vessel_type=_text(ais.get("TYPE") or master.get("TYPE")),
            length=f"{length}m" if length else None,
            tonnage=f"{tonnage} GT" if tonnage else None,
            owner=_text(master.get("OWNER")),
            location=location,
            flag=_text(master.get("FLAG")),
            source=VesselSource.LIVE_REGISTRY,
        )
