"""Client for the Google Cloud Vision REST annotate endpoint."""

import asyncio
import base64
import logging
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


class VisionServiceError(RuntimeError):
    """The Vision service answered, but not with a usable annotation."""


class VisionServiceUnavailable(VisionServiceError):
    """The Vision service could not be reached at all."""


class GoogleVisionClient:
    """Issues one annotate request per feature type for an image."""

    LABEL_DETECTION = "LABEL_DETECTION"
    OBJECT_LOCALIZATION = "OBJECT_LOCALIZATION"
    IMAGE_PROPERTIES = "IMAGE_PROPERTIES"
    WEB_DETECTION = "WEB_DETECTION"

    def __init__(self, api_key: str, url: str, timeout: int = 30):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout

    async def annotate(
        self, image_data: bytes, feature_type: str, max_results: int = 20
    ) -> dict[str, Any]:
        """Run a single feature against the image and return its response object."""
        payload = {
            "requests": [
                {
                    "image": {"content": base64.b64encode(image_data).decode("ascii")},
                    "features": [{"type": feature_type, "maxResults": max_results}],
                }
            ]
        }

        async with aiohttp.ClientSession() as session:
            try:
                async with session.post(
                    self.url,
                    json=payload,
                    params={"key": self.api_key},
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    response.raise_for_status()
                    data = await response.json()
            except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
                logger.warning(f"Vision service unreachable for {feature_type}: {e}")
                raise VisionServiceUnavailable(f"Vision service unavailable: {e}")
            except aiohttp.ClientResponseError as e:
                message = f"Vision {feature_type} failed: {e.status} {e.message}"
                logger.error(message)
                raise VisionServiceError(message)

        return self._unwrap(data, feature_type)

    def _unwrap(self, data: dict[str, Any], feature_type: str) -> dict[str, Any]:
        responses = data.get("responses") or []
        if not responses:
            raise VisionServiceError(f"Empty Vision response for {feature_type}")

        result = responses[0]
        if "error" in result:
            message = result["error"].get("message", "unknown error")
            raise VisionServiceError(f"Vision {feature_type} error: {message}")
        return result

    async def detect_labels(self, image_data: bytes) -> dict[str, Any]:
        return await self.annotate(image_data, self.LABEL_DETECTION)

    async def localize_objects(self, image_data: bytes) -> dict[str, Any]:
        return await self.annotate(image_data, self.OBJECT_LOCALIZATION)

    async def image_properties(self, image_data: bytes) -> dict[str, Any]:
        return await self.annotate(image_data, self.IMAGE_PROPERTIES)

    async def detect_web(self, image_data: bytes) -> dict[str, Any]:
        return await self.annotate(image_data, self.WEB_DETECTION, max_results=10)
