"""Identification model for persisted boat identifications."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Identification(Base):
    """One merged classification + vessel lookup, created once per request."""

    __tablename__ = "identifications"
    # AUTOINCREMENT keeps ids strictly increasing, even after deletes
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    image_path: Mapped[str | None] = mapped_column(String, nullable=True)
    boat_type: Mapped[str | None] = mapped_column(String, nullable=True)
    boat_brand: Mapped[str | None] = mapped_column(String, nullable=True)
    boat_model: Mapped[str | None] = mapped_column(String, nullable=True)
    confidence: Mapped[float | None] = mapped_column(Float, nullable=True)
    vessel_name: Mapped[str | None] = mapped_column(String, nullable=True)
    mmsi: Mapped[str | None] = mapped_column(String, nullable=True)
    registration: Mapped[str | None] = mapped_column(String, nullable=True)
    length: Mapped[str | None] = mapped_column(String, nullable=True)
    tonnage: Mapped[str | None] = mapped_column(String, nullable=True)
    owner: Mapped[str | None] = mapped_column(String, nullable=True)
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    identified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.current_timestamp(),
        index=True,
    )
