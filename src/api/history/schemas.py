"""History domain responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.api.core.messages import SuccessResponse


class IdentificationRecord(BaseModel):
    """A stored identification, serialized with its column names."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    image_path: str | None = None
    boat_type: str | None = None
    boat_brand: str | None = None
    boat_model: str | None = None
    confidence: float | None = None
    vessel_name: str | None = None
    mmsi: str | None = None
    registration: str | None = None
    length: str | None = None
    tonnage: str | None = None
    owner: str | None = None
    location: str | None = None
    identified_at: datetime


class HistoryResponse(SuccessResponse):
    count: int
    identifications: list[IdentificationRecord]


class IdentificationResponse(SuccessResponse):
    identification: IdentificationRecord
