import asyncio
import base64
import binascii
import re
import uuid
from pathlib import Path

from fastapi import UploadFile, status

from src.api.core.constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_TYPES,
    DEFAULT_IMAGE_EXTENSION,
)
from src.api.core.exceptions.base import BoatIdentifierException
from src.api.core.messages import MessageCode

DATA_URL_PREFIX = re.compile(r"^data:image/([\w.+-]+);base64,")


async def validate_image_upload(file: UploadFile, max_size_bytes: int) -> bytes:
    """Validate uploaded image extension, content type and size, return bytes."""
    extension = Path(file.filename or "").suffix.lower()
    content_type = (file.content_type or "").lower()
    if extension not in ALLOWED_IMAGE_EXTENSIONS or (
        content_type not in ALLOWED_IMAGE_TYPES
    ):
        raise BoatIdentifierException(
            MessageCode.INVALID_FILE_TYPE, status.HTTP_400_BAD_REQUEST
        )

    content = await file.read()
    if len(content) > max_size_bytes:
        raise BoatIdentifierException(
            MessageCode.FILE_TOO_LARGE, status.HTTP_400_BAD_REQUEST
        )

    return content


def decode_base64_image(image: str) -> tuple[bytes, str]:
    """Strip an optional data URL prefix and decode; returns bytes and extension.

    Padding is optional. The extension comes from the data URL subtype up to
    any structured suffix, so ``svg+xml`` is stored as ``.svg``.
    """
    extension = DEFAULT_IMAGE_EXTENSION
    match = DATA_URL_PREFIX.match(image)
    if match:
        extension = _extension_for_subtype(match.group(1))
        image = image[match.end() :]
    image = "".join(image.split()).rstrip("=")
    image += "=" * (-len(image) % 4)

    try:
        data = base64.b64decode(image, validate=True)
    except (binascii.Error, ValueError):
        raise BoatIdentifierException(
            MessageCode.INVALID_IMAGE_DATA, status.HTTP_400_BAD_REQUEST
        )
    if not data:
        raise BoatIdentifierException(
            MessageCode.NO_IMAGE_DATA_PROVIDED, status.HTTP_400_BAD_REQUEST
        )
    return data, extension


def _extension_for_subtype(subtype: str) -> str:
    name = re.sub(r"[^a-z0-9]", "", subtype.lower().split("+")[0])
    if not name:
        return DEFAULT_IMAGE_EXTENSION
    return ".jpg" if name == "jpeg" else f".{name}"


async def save_image(upload_dir: Path, data: bytes, extension: str) -> Path:
    """Write the image under a fresh unique name inside the upload directory."""
    path = upload_dir / f"{uuid.uuid4()}{extension}"
    await asyncio.to_thread(path.write_bytes, data)
    return path
