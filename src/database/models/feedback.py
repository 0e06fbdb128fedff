"""Identification feedback model."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Feedback(Base):
    """User confirmation or correction of an identification."""

    __tablename__ = "feedback"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Declared for the schema only: SQLite leaves foreign keys unenforced
    # unless the pragma is switched on, and feedback may outlive its record.
    identification_id: Mapped[int] = mapped_column(
        ForeignKey("identifications.id"), nullable=False, index=True
    )

    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    feedback_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.current_timestamp(),
    )
