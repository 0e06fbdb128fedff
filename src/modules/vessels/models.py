"""Vessel directory models."""

from enum import Enum

from pydantic import Field

from src.api.core.messages import CamelModel
from src.modules.classification.models import ColorInfo, Label


class VesselSource(str, Enum):
    LIVE_REGISTRY = "live_registry"
    DEMO_DATABASE = "demo_database"


class VesselRecord(CamelModel):
    """A vessel as reported by a registry or the demo directory."""

    name: str | None = None
    mmsi: str | None = None
    imo: str | None = None
    vessel_type: str | None = None
    length: str | None = None
    tonnage: str | None = None
    owner: str | None = None
    location: str | None = None
    flag: str | None = None
    source: VesselSource
    note: str | None = None


class VesselSearchHints(CamelModel):
    """What is known about the vessel being looked for."""

    type: str | None = None
    labels: list[Label] = Field(default_factory=list)
    colors: list[ColorInfo] = Field(default_factory=list)
    query: str | None = None
    mmsi: str | None = None
    imo: str | None = None
