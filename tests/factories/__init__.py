"""Test factories for Boat Identifier models."""

from .base import AsyncSQLAlchemyModelFactory
from .feedback import FeedbackFactory
from .identifications import IdentificationFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "FeedbackFactory",
    "IdentificationFactory",
]
