from fastapi import APIRouter, status

from src.api.core.dependencies import IdentificationStoreDep
from src.api.core.exceptions.base import BoatIdentifierException
from src.api.core.messages import MessageCode, get_default_message
from src.api.feedback.schemas import (
    FeedbackCreatedResponse,
    FeedbackRequest,
    FeedbackStatsBody,
    FeedbackStatsResponse,
)

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackCreatedResponse)
async def submit_feedback(
    store: IdentificationStoreDep,
    body: FeedbackRequest | None = None,
) -> FeedbackCreatedResponse:
    """Record feedback. The identification is not required to exist."""
    if body is None or not body.identification_id:
        raise BoatIdentifierException(
            MessageCode.IDENTIFICATION_ID_REQUIRED, status.HTTP_400_BAD_REQUEST
        )

    feedback_id = await store.record_feedback(
        identification_id=body.identification_id,
        is_correct=bool(body.is_correct),
        feedback_text=body.feedback_text or None,
    )
    return FeedbackCreatedResponse(
        id=feedback_id,
        message=get_default_message(MessageCode.FEEDBACK_RECORDED),
    )


@router.get("/stats", response_model=FeedbackStatsResponse)
async def feedback_stats(store: IdentificationStoreDep) -> FeedbackStatsResponse:
    stats = await store.feedback_stats()
    return FeedbackStatsResponse(
        stats=FeedbackStatsBody(
            total=stats.total,
            correct_count=stats.correct_count,
            incorrect_count=stats.incorrect_count,
        )
    )
