"""Identify domain requests and responses."""

from pydantic import BaseModel

from src.api.core.messages import CamelModel
from src.modules.classification.models import (
    ColorInfo,
    Label,
    ScoredEntity,
    SyntheticAttributes,
)
from src.modules.vessels.models import VesselRecord


class Base64ImageRequest(BaseModel):
    """Data URL or raw base64 image."""

    image: str | None = None


class IdentificationSummary(CamelModel):
    boat_type: str
    brand: str | None = None
    model: str | None = None
    confidence: float
    labels: list[Label]
    colors: list[ColorInfo]
    description: str | None = None
    attributes: SyntheticAttributes | None = None


class IdentifyResponse(CamelModel):
    success: bool = True
    id: int
    image_url: str
    identification: IdentificationSummary
    vessel_data: VesselRecord | None = None
    similar_boats: list[ScoredEntity]
