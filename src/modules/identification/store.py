"""Durable record of identifications and user feedback."""

from dataclasses import dataclass

from sqlalchemy import case, func, select

from src.core.base import BaseService
from src.database.models import Feedback, Identification
from src.modules.identification.reconciler import IdentificationDraft

DEFAULT_LIMIT = 50
MAX_LIMIT = 100


@dataclass
class FeedbackStats:
    total: int
    correct_count: int
    incorrect_count: int


class IdentificationStore(BaseService):
    """Owns the identifications and feedback tables.

    Records are never updated in place. Every write commits on its own, so a
    failure surfaces as a ``SQLAlchemyError`` from the call that caused it.
    """

    async def create(self, draft: IdentificationDraft) -> int:
        identification = Identification(**draft.model_dump())
        self.db.add(identification)
        await self.db.commit()
        await self.db.refresh(identification)

        self.logger.info("Identification stored", identification_id=identification.id)
        return identification.id

    async def list_identifications(
        self, limit: int = DEFAULT_LIMIT, offset: int = 0
    ) -> list[Identification]:
        """Newest first. A non-positive ``limit`` means the default page, a large
        one is capped at 100; ``offset`` is clamped to >= 0.
        """
        limit = min(limit, MAX_LIMIT) if limit > 0 else DEFAULT_LIMIT
        offset = max(offset, 0)

        result = await self.db.execute(
            select(Identification)
            .order_by(Identification.identified_at.desc(), Identification.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def get(self, identification_id: int) -> Identification | None:
        return await self.db.get(Identification, identification_id)

    async def delete(self, identification_id: int) -> bool:
        """Returns False when there was nothing to delete. Feedback rows stay."""
        identification = await self.db.get(Identification, identification_id)
        if identification is None:
            return False

        await self.db.delete(identification)
        await self.db.commit()
        self.logger.info("Identification deleted", identification_id=identification_id)
        return True

    async def record_feedback(
        self,
        identification_id: int,
        is_correct: bool = False,
        feedback_text: str | None = None,
    ) -> int:
        feedback = Feedback(
            identification_id=identification_id,
            is_correct=is_correct,
            feedback_text=feedback_text,
        )
        self.db.add(feedback)
        await self.db.commit()
        await self.db.refresh(feedback)

        self.logger.info(
            "Feedback recorded",
            feedback_id=feedback.id,
            identification_id=identification_id,
            is_correct=is_correct,
        )
        return feedback.id

    async def feedback_stats(self) -> FeedbackStats:
        result = await self.db.execute(
            select(
                func.count(Feedback.id),
                func.coalesce(
                    func.sum(case((Feedback.is_correct.is_(True), 1), else_=0)), 0
                ),
                func.coalesce(
                    func.sum(case((Feedback.is_correct.is_(False), 1), else_=0)), 0
                ),
            )
        )
        total, correct, incorrect = result.one()
        return FeedbackStats(
            total=int(total),
            correct_count=int(correct),
            incorrect_count=int(incorrect),
        )
