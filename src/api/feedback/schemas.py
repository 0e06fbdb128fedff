"""Feedback domain requests and responses."""

from pydantic import BaseModel

from src.api.core.messages import MessageResponse, SuccessResponse


class FeedbackRequest(BaseModel):
    identification_id: int | None = None
    is_correct: bool | None = None
    feedback_text: str | None = None


class FeedbackCreatedResponse(MessageResponse):
    id: int


class FeedbackStatsBody(BaseModel):
    total: int
    correct_count: int
    incorrect_count: int


class FeedbackStatsResponse(SuccessResponse):
    stats: FeedbackStatsBody
