"""Database models for the Boat Identifier API."""

from .base import Base
from .feedback import Feedback
from .identifications import Identification

__all__ = [
    "Base",
    "Feedback",
    "Identification",
]
