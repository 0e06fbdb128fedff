"""Centralized message codes and default messages for API responses."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    IDENTIFICATION_DELETED = "IDENTIFICATION_DELETED"
    FEEDBACK_RECORDED = "FEEDBACK_RECORDED"

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    NO_IMAGE_PROVIDED = "NO_IMAGE_PROVIDED"
    NO_IMAGE_DATA_PROVIDED = "NO_IMAGE_DATA_PROVIDED"
    INVALID_IMAGE_DATA = "INVALID_IMAGE_DATA"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    IDENTIFICATION_ID_REQUIRED = "IDENTIFICATION_ID_REQUIRED"
    REQUEST_TOO_LARGE = "REQUEST_TOO_LARGE"

    # Not found
    IDENTIFICATION_NOT_FOUND = "IDENTIFICATION_NOT_FOUND"
    VESSEL_NOT_FOUND = "VESSEL_NOT_FOUND"

    # Pipeline errors
    IDENTIFICATION_FAILED = "IDENTIFICATION_FAILED"
    SEARCH_FAILED = "SEARCH_FAILED"
    VESSEL_LOOKUP_FAILED = "VESSEL_LOOKUP_FAILED"

    # Storage errors
    DATABASE_ERROR = "DATABASE_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.IDENTIFICATION_DELETED: "Identification deleted",
    MessageCode.FEEDBACK_RECORDED: "Thank you for your feedback!",
    # Validation errors
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.NO_IMAGE_PROVIDED: "No image provided",
    MessageCode.NO_IMAGE_DATA_PROVIDED: "No image data provided",
    MessageCode.INVALID_IMAGE_DATA: "Image data is not valid base64",
    MessageCode.FILE_TOO_LARGE: "File size too large",
    MessageCode.INVALID_FILE_TYPE: "Only image files are allowed",
    MessageCode.IDENTIFICATION_ID_REQUIRED: "identification_id is required",
    MessageCode.REQUEST_TOO_LARGE: "Request body too large",
    # Not found
    MessageCode.IDENTIFICATION_NOT_FOUND: "Identification not found",
    MessageCode.VESSEL_NOT_FOUND: "Vessel not found",
    # Pipeline errors
    MessageCode.IDENTIFICATION_FAILED: "Failed to analyze image",
    MessageCode.SEARCH_FAILED: "Search failed",
    MessageCode.VESSEL_LOOKUP_FAILED: "Vessel lookup failed",
    # Storage errors
    MessageCode.DATABASE_ERROR: "Database error occurred",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
}


def get_default_message(code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(code, "Unknown error")


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(BaseModel):
    """Base body for successful responses."""

    success: bool = True


class MessageResponse(SuccessResponse):
    message: str
