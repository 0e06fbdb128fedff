"""Factory for Feedback models."""

import factory

from src.database.models import Feedback
from .base import AsyncSQLAlchemyModelFactory


class FeedbackFactory(AsyncSQLAlchemyModelFactory[Feedback]):
    """Factory for creating Feedback instances."""

    class Meta:
        model = Feedback

    identification_id = factory.Sequence(lambda n: n + 1)
    is_correct = factory.Faker("pybool")
    feedback_text = factory.Faker("sentence", nb_words=10)
